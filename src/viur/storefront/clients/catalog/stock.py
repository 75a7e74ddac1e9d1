import collections
import typing as t

from ..abstract import ClientAbstract
from ..basket.standard import as_list
from ...globals import STOREFRONT_LOGGER
from ...services import CLIENT_REGISTRY

if t.TYPE_CHECKING:
    from ...view import View

logger = STOREFRONT_LOGGER.getChild(__name__)


@CLIENT_REGISTRY.register("catalog/stock")
class CatalogStock(ClientAbstract):
    """
    Stock levels of the products given by ``s_prodcode``.

    Usually requested asynchronously by the catalog pages. Errors are only
    logged, the output is empty then.
    """

    template_body = "catalog/stock/body.html"
    template_header = "catalog/stock/header.html"

    def get_body(self, uid: str = "") -> str:
        view = self.view
        try:
            self.populate(view)
            view["stock_body"] = self.render_sub_bodies(uid)
            return self.render_template("body")
        except Exception as exc:
            self.context.logger.exception(f"Rendering the stock body failed: {exc}")
            return ""

    def get_header(self, uid: str = "") -> str:
        view = self.view
        try:
            self.populate(view)
            view["stock_header"] = self.render_sub_headers(uid)
            return self.render_template("header")
        except Exception as exc:
            self.context.logger.exception(f"Rendering the stock header failed: {exc}")
            return ""

    def process(self) -> None:
        try:
            super().process()
        except Exception as exc:
            self.context.logger.exception(f"Processing the stock client failed: {exc}")

    def add_data(self, view: "View") -> "View":
        product_codes = [str(code) for code in as_list(view.param("s_prodcode", []))]

        stock_items_by_products = collections.defaultdict(list)
        for stock_item in self.get_stock_items(product_codes):
            stock_items_by_products[stock_item.product_code].append(stock_item)

        view["stock_items_by_products"] = dict(stock_items_by_products)
        view["stock_product_codes"] = product_codes

        return super().add_data(view)

    def get_stock_items(self, product_codes: list[str]) -> t.Iterable[t.Any]:
        if not product_codes:
            return []
        context = self.context
        return context.controller("stock").search(
            product_codes,
            stock_type=context.locale.site_config.get("stocktype"),
            sort=context.config.get("client/html/catalog/stock/sort", "stock.type"),
            limit=len(product_codes),
        )
