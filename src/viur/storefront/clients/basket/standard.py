import typing as t

from . import summary
from ..abstract import ClientAbstract
from ...errors import error_boundary
from ...globals import STOREFRONT_LOGGER
from ...services import CLIENT_REGISTRY
from ...types import BasketAction, BasketPart, CheckMode, ClientException

if t.TYPE_CHECKING:
    from ...view import View

logger = STOREFRONT_LOGGER.getChild(__name__)

PRODUCT_DOMAINS: t.Final[tuple[str, ...]] = ("attribute", "media", "price", "product", "text")
"""Domains loaded together with a product that is added to the basket"""


def to_int(value: t.Any, default: int = 0) -> int:
    """Convert a request parameter to an int, ``default`` if not possible"""
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return default


def to_position(value: t.Any) -> int:
    """Convert a basket position parameter to an int.

    :raises ClientException: The value is not a non-negative integer.
    """
    try:
        position = int(value)
    except (TypeError, ValueError):
        position = -1
    if position < 0:
        raise ClientException("Invalid basket position")
    return position


def as_list(value: t.Any) -> list[t.Any]:
    """Request parameter as list, a mapping contributes its values"""
    if value is None or value == "":
        return []
    if isinstance(value, t.Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def get_attribute_map(values: t.Mapping[str, t.Any] | None) -> dict[t.Any, int]:
    """Map configurable attribute ids to their quantity.

    ``values`` has the form ``{"id": [...], "qty": [...]}``. Empty ids
    (including ``"0"``) and quantities are dropped, ids without a positive
    quantity at the same position are left out.

    >>> get_attribute_map({"id": [5, 6], "qty": [2, 0]})
    {5: 2}
    """
    if not values:
        return {}
    ids = {idx: id_ for idx, id_ in enumerate(as_list(values.get("id"))) if id_ and id_ != "0"}
    quantities = {idx: qty for idx, qty in enumerate(as_list(values.get("qty"))) if qty}
    return {
        id_: to_int(quantities[idx])
        for idx, id_ in ids.items()
        if idx in quantities and to_int(quantities[idx]) > 0
    }


@CLIENT_REGISTRY.register("basket/standard")
class BasketStandard(ClientAbstract):
    """
    The basket page.

    Shows the products, coupons and costs of the current basket and applies
    the basket changes of the request (``b_action``) in :meth:`process`.
    """

    template_body = "basket/standard/body.html"
    template_header = "basket/standard/header.html"

    # --- Rendering -----------------------------------------------------------

    def get_body(self, uid: str = "") -> str:
        view = self.view
        with error_boundary(view, "standard_error_list"):
            self.populate(view)
            view["standard_body"] = self.render_sub_bodies(uid)
        return self.render_template("body")

    def get_header(self, uid: str = "") -> str:
        view = self.view
        try:
            self.populate(view)
            view["standard_header"] = self.render_sub_headers(uid)
            return self.render_template("header")
        except Exception as exc:
            logger.exception(f"Rendering the basket header failed: {exc}")
            return ""

    def add_data(self, view: "View") -> "View":
        context = self.context
        site = context.locale.site_code

        if (params := context.session.get(f"storefront/catalog/detail/params/last/{site}")) is not None:
            page = "detail"
        else:
            params = context.session.get(f"storefront/catalog/lists/params/last/{site}", {})
            page = "lists"
        if params:
            view["standard_back_url"] = view.url(
                view.config(f"client/html/catalog/{page}/url/target"),
                view.config(f"client/html/catalog/{page}/url/controller", "catalog"),
                view.config(f"client/html/catalog/{page}/url/action", "detail" if page == "detail" else "list"),
                params,
                config=view.config(f"client/html/catalog/{page}/url/config", {}),
            )

        basket = context.controller("basket").get()
        view["standard_basket"] = basket
        view["standard_tax_rates"] = summary.get_tax_rates(basket)
        view["standard_named_taxes"] = summary.get_named_taxes(basket)
        view["standard_costs_delivery"] = summary.get_costs_delivery(basket)
        view["standard_costs_payment"] = summary.get_costs_payment(basket)

        return super().add_data(view)

    # --- Processing ----------------------------------------------------------

    def process(self) -> None:
        view = self.view
        controller = self.context.controller("basket")

        with error_boundary(view, "standard_error_list", codes_field="standard_error_codes"):
            action = BasketAction.from_param(view.param("b_action"))
            if action == BasketAction.ADD:
                self.add_products(view)
            elif action == BasketAction.COUPON_DELETE:
                self.delete_coupon(view)
            elif action == BasketAction.DELETE:
                self.delete_products(view)
            else:
                self.update_products(view)
                self.add_coupon(view)

            super().process()

            check = CheckMode(to_int(view.config("client/html/basket/standard/check", CheckMode.ALWAYS)))
            if check == CheckMode.ALWAYS or (check == CheckMode.ON_REQUEST and to_int(view.param("b_check", 0))):
                controller.get().check(BasketPart.PRODUCT)
            if check != CheckMode.ON_REQUEST or to_int(view.param("b_check", 0)):
                view["standard_checkout"] = True

        # store the basket even if a plugin has changed it and raised an exception
        controller.save()

    def add_coupon(self, view: "View") -> None:
        if coupon := view.param("b_coupon"):
            self.context.controller("basket").add_coupon(coupon)
            self.clear_cached()

    def delete_coupon(self, view: "View") -> None:
        if coupon := view.param("b_coupon"):
            self.context.controller("basket").delete_coupon(coupon)
            self.clear_cached()

    def add_products(self, view: "View") -> None:
        basket_controller = self.context.controller("basket")
        product_controller = self.context.controller("product")

        if (prod_id := view.param("b_prodid", "")) != "" and to_int(view.param("b_quantity", 0)) > 0:
            basket_controller.add_product(
                product_controller.get(prod_id, domains=PRODUCT_DOMAINS),
                to_int(view.param("b_quantity", 0)),
                variant_attribute_ids=as_list(view.param("b_attrvarid", [])),
                config_attributes=get_attribute_map(view.param("b_attrconfid", {})),
                custom_attributes=view.param("b_attrcustid", []) or [],
                stock_type=view.param("b_stocktype") or "default",
                supplier=view.param("b_supplier"),
                site_id=view.param("b_siteid"),
            )
        else:
            for row in as_list(view.param("b_prod", [])):
                if not isinstance(row, t.Mapping) or row.get("prodid") in (None, ""):
                    continue
                if (quantity := to_int(row.get("quantity"))) <= 0:
                    continue
                basket_controller.add_product(
                    product_controller.get(row["prodid"], domains=PRODUCT_DOMAINS),
                    quantity,
                    variant_attribute_ids=[v for v in as_list(row.get("attrvarid")) if v],
                    config_attributes=get_attribute_map(row.get("attrconfid")),
                    custom_attributes=[v for v in as_list(row.get("attrcustid")) if v],
                    stock_type=str(row.get("stocktype") or "default"),
                    supplier=None if row.get("supplier") is None else str(row["supplier"]),
                    site_id=None if row.get("siteid") is None else str(row["siteid"]),
                )

        self.clear_cached()

    def delete_products(self, view: "View") -> None:
        controller = self.context.controller("basket")
        # all positions are checked before the first one is deleted
        positions = [to_position(position) for position in as_list(view.param("b_position", []))]
        for position in positions:
            controller.delete_product(position)

        self.clear_cached()

    def update_products(self, view: "View") -> None:
        controller = self.context.controller("basket")
        rows = [row for row in as_list(view.param("b_prod", [])) if isinstance(row, t.Mapping)]

        if (position := view.param("b_position", "")) not in ("", None):
            rows.append({"position": position, "quantity": view.param("b_quantity", 1)})

        updates = [
            (0 if row.get("position") in (None, "") else to_position(row["position"]), to_int(row.get("quantity"), 1))
            for row in rows
        ]
        for position, quantity in updates:
            controller.update_product(position, quantity)

        self.clear_cached()
