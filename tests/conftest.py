"""
Pytest fixtures for the storefront clients

The commerce layer is replaced by MagicMocks and small dataclasses.
"""
import dataclasses
import decimal
from unittest.mock import MagicMock

import pytest

from viur.storefront import Config, Context, Locale, View, create_client
from viur.storefront.clients.checkout.address import language_cache


@dataclasses.dataclass
class FakePrice:
    value: decimal.Decimal = decimal.Decimal("0")
    costs: decimal.Decimal = decimal.Decimal("0")
    tax: decimal.Decimal = decimal.Decimal("0")
    tax_rate: decimal.Decimal = decimal.Decimal("19")
    tax_name: str = "VAT"


@dataclasses.dataclass
class FakeProduct:
    name: str
    price: FakePrice
    quantity: int = 1


@dataclasses.dataclass
class FakeService:
    price: FakePrice


@dataclasses.dataclass
class FakeBasket:
    products: list = dataclasses.field(default_factory=list)
    addresses: dict = dataclasses.field(default_factory=dict)
    services: dict = dataclasses.field(default_factory=dict)
    coupons: dict = dataclasses.field(default_factory=dict)
    check: MagicMock = dataclasses.field(default_factory=MagicMock)


@dataclasses.dataclass
class FakeStockItem:
    product_code: str
    type: str = "default"
    stock_level: int = 10


@dataclasses.dataclass
class FakeCustomer:
    id: str = "42"
    payment_address: dict = dataclasses.field(default_factory=lambda: {"lastname": "Mustermann"})
    address_items: dict = dataclasses.field(default_factory=lambda: {"7": {"lastname": "Musterfrau"}})


class FakeOrderAddress:
    def __init__(self):
        self.values = None

    def copy_from(self, address):
        self.values = dict(address)
        return self

    def __repr__(self):
        return f"<FakeOrderAddress {self.values}>"


@pytest.fixture(autouse=True)
def clear_language_cache():
    language_cache.clear()
    yield
    language_cache.clear()


@pytest.fixture
def basket() -> FakeBasket:
    return FakeBasket(
        products=[
            FakeProduct("Pen", FakePrice(decimal.Decimal("2.50"), decimal.Decimal("0.50"), decimal.Decimal("0.48")), 2),
            FakeProduct("Book", FakePrice(decimal.Decimal("10.00"), tax=decimal.Decimal("0.65"),
                                          tax_rate=decimal.Decimal("7")), 1),
        ],
        services={
            "delivery": [FakeService(FakePrice(decimal.Decimal("0"), decimal.Decimal("4.90"), decimal.Decimal("0.78")))],
            "payment": [FakeService(FakePrice(decimal.Decimal("0"), decimal.Decimal("1.00"), decimal.Decimal("0.16")))],
        },
    )


@pytest.fixture
def basket_controller(basket) -> MagicMock:
    controller = MagicMock(name="basket_controller")
    controller.get.return_value = basket
    return controller


@pytest.fixture
def product_controller() -> MagicMock:
    controller = MagicMock(name="product_controller")
    controller.get.side_effect = lambda product_id, domains=(): f"product:{product_id}"
    return controller


@pytest.fixture
def customer_controller() -> MagicMock:
    controller = MagicMock(name="customer_controller")
    controller.get.return_value = FakeCustomer()
    return controller


@pytest.fixture
def stock_controller() -> MagicMock:
    return MagicMock(name="stock_controller")


@pytest.fixture
def locale_manager() -> MagicMock:
    manager = MagicMock(name="locale_manager")
    manager.search.return_value = [MagicMock(language_id="de"), MagicMock(language_id="en")]
    return manager


@pytest.fixture
def address_manager() -> MagicMock:
    manager = MagicMock(name="address_manager")
    manager.create_item.side_effect = FakeOrderAddress
    return manager


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def context(
    config,
    basket_controller,
    product_controller,
    customer_controller,
    stock_controller,
    locale_manager,
    address_manager,
) -> Context:
    return Context(
        config=config,
        session={},
        locale=Locale(site_code="default", language_id="en"),
        controller_factories={
            "basket": lambda ctx: basket_controller,
            "product": lambda ctx: product_controller,
            "customer": lambda ctx: customer_controller,
            "stock": lambda ctx: stock_controller,
        },
        manager_factories={
            "locale": lambda ctx: locale_manager,
            "order/base/address": lambda ctx: address_manager,
        },
    )


@pytest.fixture
def make_client(context):
    """Create a client for ``path`` with a fresh view of ``params``"""

    def factory(path: str, params: dict | None = None, **values):
        view = View(context, params, **values)
        return create_client(context, path, view=view)

    return factory
