import pytest

from viur.storefront import (
    CLIENT_REGISTRY,
    DECORATOR_REGISTRY,
    BasketStandard,
    ClientAbstract,
    ClientDecorator,
    ConfigurationError,
    DispatchError,
    View,
    create_client,
)
from viur.storefront.factory import get_decorator_names


class Recorder(ClientDecorator):
    pass


@pytest.fixture
def decorator_names():
    """Register a recording decorator for every name and drop them afterwards"""
    registered = []

    def register(*names, scope=None):
        for name in names:
            DECORATOR_REGISTRY.register(name, scope)(type(f"Recorder_{name}", (Recorder,), {}))
            registered.append((name, scope))

    yield register
    for name, scope in registered:
        DECORATOR_REGISTRY.unregister(name, scope)


@pytest.fixture
def teaser_client():
    calls = []

    class Teaser(ClientAbstract):
        def add_data(self, view):
            calls.append(("add_data", self.path))
            view.append("standard_teasers", self.path)
            return super().add_data(view)

        def get_body(self, uid=""):
            return "<p class=\"teaser\">teaser</p>"

        def process(self):
            calls.append(("process", self.path))

    CLIENT_REGISTRY.register("basket/standard/teaser")(Teaser)
    CLIENT_REGISTRY.register("basket/standard/related")(Teaser)
    yield calls
    CLIENT_REGISTRY.unregister("basket/standard/teaser")
    CLIENT_REGISTRY.unregister("basket/standard/related")


def chain_names(client) -> list[str]:
    """Decorator names of a client, innermost first"""
    names = []
    while isinstance(client, ClientDecorator):
        names.append(client.name)
        client = client._client
    return names[::-1]


def innermost(client):
    while isinstance(client, ClientDecorator):
        client = client._client
    return client


class TestCreateClient:
    def test_default_implementation(self, context):
        client = create_client(context, "basket/standard")
        assert isinstance(client, BasketStandard)
        assert client.path == "basket/standard"
        assert client.get_object() is client

    def test_configured_name(self, context, config):
        class MyBasket(BasketStandard):
            pass

        CLIENT_REGISTRY.register("basket/standard", "MyProject")(MyBasket)
        try:
            config.set("client/html/basket/standard/name", "myproject")
            assert type(create_client(context, "basket/standard")) is MyBasket
            assert type(create_client(context, "basket/standard", "standard")) is BasketStandard
        finally:
            CLIENT_REGISTRY.unregister("basket/standard", "myproject")

    def test_unknown_client(self, context):
        with pytest.raises(DispatchError) as exc_info:
            create_client(context, "basket/unknown")
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.name == "basket/unknown:standard"

    def test_view_is_set(self, context):
        view = View(context)
        assert create_client(context, "basket/standard", view=view).view is view

    def test_missing_view(self, context):
        with pytest.raises(ConfigurationError):
            create_client(context, "basket/standard").view


class TestDecoratorChain:
    def test_order(self, context, config, decorator_names):
        decorator_names("one", "two", "three", "four")
        decorator_names("five", scope="basket/standard")
        config.merge({
            # the order of the keys does not matter
            "client/html/basket/standard/decorators/local": ["five"],
            "client/html/basket/standard/decorators/global": ["four"],
            "client/html/basket/standard/decorators/excludes": ["two"],
            "client/html/common/decorators/default": ["one", "two", "three"],
        })

        assert get_decorator_names(context, "basket/standard") == [
            ("one", None), ("three", None), ("four", None), ("five", "basket/standard"),
        ]

        client = create_client(context, "basket/standard")
        assert chain_names(client) == ["one", "three", "four", "five"]
        assert innermost(client).get_object() is client

    def test_local_decorator_needs_its_scope(self, context, config, decorator_names):
        decorator_names("five", scope="catalog/stock")
        config.set("client/html/basket/standard/decorators/local", ["five"])
        with pytest.raises(DispatchError):
            create_client(context, "basket/standard")

    def test_unknown_decorator(self, context, config):
        config.set("client/html/common/decorators/default", ["missing"])
        with pytest.raises(DispatchError) as exc_info:
            create_client(context, "basket/standard")
        assert exc_info.value.name == "missing"

    def test_forwards_to_client(self, context, config, decorator_names):
        decorator_names("one")
        config.set("client/html/common/decorators/default", ["one"])
        view = View(context)
        client = create_client(context, "basket/standard", view=view)

        assert isinstance(client, ClientDecorator)
        assert client.view is view
        assert client.path == "basket/standard"
        assert "Pen" in client.get_body()


class TestSubClients:
    def test_default_subparts(self, make_client):
        address = make_client("checkout/standard/address")
        assert [sub_client.path for sub_client in address.sub_clients] == [
            "checkout/standard/address/billing",
            "checkout/standard/address/delivery",
        ]

    def test_configured_subparts(self, make_client, config, teaser_client):
        config.set("client/html/basket/standard/subparts", ["related", "teaser"])
        client = make_client("basket/standard")

        assert [sub_client.path for sub_client in client.sub_clients] == [
            "basket/standard/related",
            "basket/standard/teaser",
        ]
        # created once per client
        assert client.sub_clients[0] is client.sub_clients[0]

    def test_configured_empty_subparts(self, make_client, config):
        config.set("client/html/checkout/standard/address/subparts", [])
        assert make_client("checkout/standard/address").sub_clients == []

    def test_data_and_processing_order(self, make_client, config, teaser_client):
        config.set("client/html/basket/standard/subparts", ["teaser", "related"])
        client = make_client("basket/standard")
        client.process()
        html = client.get_body()

        assert teaser_client == [
            ("process", "basket/standard/teaser"),
            ("process", "basket/standard/related"),
            ("add_data", "basket/standard/teaser"),
            ("add_data", "basket/standard/related"),
        ]
        assert client.view["standard_teasers"] == ["basket/standard/teaser", "basket/standard/related"]
        assert html.count('<p class="teaser">teaser</p>') == 2

    def test_populate_once_per_view(self, make_client, config, teaser_client, basket_controller):
        config.set("client/html/basket/standard/subparts", ["teaser"])
        client = make_client("basket/standard")
        client.get_body()
        client.get_header()
        client.get_body()

        assert basket_controller.get.call_count == 1
        assert teaser_client == [("add_data", "basket/standard/teaser")]

    def test_unknown_subpart(self, make_client, config):
        config.set("client/html/basket/standard/subparts", ["missing"])
        client = make_client("basket/standard")
        html = client.get_body()

        assert client.view["standard_error_list"] == ["A non-recoverable error occured"]
        assert "A non-recoverable error occured" in html
