from viur.storefront import Config, Context, TemplateEngine, View


class TestView:
    def test_mapping(self):
        view = View(Context(), standard_basket="basket")
        view["standard_checkout"] = True
        assert dict(view) == {"standard_basket": "basket", "standard_checkout": True}
        del view["standard_checkout"]
        assert len(view) == 1
        assert view.get("standard_checkout") is None

    def test_param(self):
        view = View(Context(), {
            "b_action": "add",
            "b_prod": [{"prodid": "1", "quantity": "2"}],
            "b_attrconfid": {"id": ["5"]},
        })
        assert view.param("b_action") == "add"
        assert view.param("b_prod/0/prodid") == "1"
        assert view.param("b_attrconfid/id/0") == "5"
        assert view.param("b_prod/1/prodid", "none") == "none"
        assert view.param("b_prod/x", "none") == "none"
        assert view.param("b_coupon") is None

    def test_params_are_copied(self):
        params = {"b_action": "add"}
        view = View(Context(), params)
        params["b_action"] = "delete"
        assert view.param("b_action") == "add"

    def test_config(self):
        context = Context(config=Config({"client/html/basket/standard/check": 2}))
        assert View(context).config("client/html/basket/standard/check", 1) == 2
        assert View(context).config("client/html/basket/standard/name", "standard") == "standard"

    def test_append(self):
        view = View(Context())
        first = view.append("standard_error_list", "a")
        view.append("standard_error_list", "b", "c")
        assert view["standard_error_list"] == ["a", "b", "c"]
        # the field is replaced, not changed in place
        assert first == ["a"]

    def test_url(self):
        view = View(Context())
        assert view.url(None, "checkout", "index") == "/checkout/index"
        assert view.url("shop", "catalog", "detail", {"d_prodid": "1", "f_attrid": ["2", "3"]}) == (
            "/shop/catalog/detail?d_prodid=1&f_attrid=2&f_attrid=3"
        )
        assert view.url("", "catalog", "detail", trailing=["pen"]) == "/catalog/detail/pen"

    def test_url_builder(self):
        calls = []

        def build(target, controller, action, params, trailing, config):
            calls.append((target, controller, action, params, trailing, config))
            return "https://example.com/basket"

        view = View(Context(url_builder=build))
        assert view.url(None, "basket", "index", {"a": 1}) == "https://example.com/basket"
        assert calls == [(None, "basket", "index", {"a": 1}, (), {})]

    def test_render(self, tmp_path):
        (tmp_path / "hello.html").write_text("{{ greeting }} {{ view.translate('client', 'Back') }}")
        view = View(Context(templates=TemplateEngine([tmp_path])), greeting="Hi")
        assert view.render("hello.html") == "Hi Back"

    def test_template_context(self):
        view = View(Context(), standard_basket="basket")
        template_context = view.as_template_context()
        assert template_context["standard_basket"] == "basket"
        assert template_context["view"] is view
