"""
Narrow interfaces of the commerce layer

The storefront clients only rely on the members declared here. The concrete
controllers and managers live in the commerce layer and are provided through
the :class:`viur.storefront.context.Context` factories.
"""

from __future__ import annotations

import decimal
import typing as t

from .enums import AddressType, BasketPart


@t.runtime_checkable
class Price(t.Protocol):
    value: decimal.Decimal
    costs: decimal.Decimal
    tax: decimal.Decimal
    tax_rate: decimal.Decimal
    tax_name: str


class OrderProduct(t.Protocol):
    price: Price
    quantity: int


class OrderService(t.Protocol):
    price: Price


class OrderAddress(t.Protocol):
    def copy_from(self, address: t.Any) -> OrderAddress:
        ...


class Basket(t.Protocol):
    products: t.Sequence[OrderProduct]
    addresses: t.Mapping[AddressType | str, t.Sequence[t.Any]]
    services: t.Mapping[str, t.Sequence[OrderService]]
    coupons: t.Mapping[str, t.Any]

    def check(self, part: BasketPart | str) -> None:
        """Run the basket plugins for ``part``.

        :raises PluginProviderException: A plugin rejected the basket.
        """
        ...


class BasketController(t.Protocol):
    def get(self) -> Basket:
        ...

    def add_product(
        self,
        product: t.Any,
        quantity: int = 1,
        *,
        variant_attribute_ids: t.Sequence[str] = (),
        config_attributes: t.Mapping[str, int] | None = None,
        custom_attributes: t.Sequence[str] | t.Mapping[str, t.Any] = (),
        stock_type: str = "default",
        supplier: str | None = None,
        site_id: str | None = None,
    ) -> t.Any:
        ...

    def update_product(self, position: int, quantity: int) -> t.Any:
        ...

    def delete_product(self, position: int) -> t.Any:
        ...

    def add_coupon(self, code: str) -> t.Any:
        ...

    def delete_coupon(self, code: str) -> t.Any:
        ...

    def add_address(self, address_type: AddressType, address: t.Any) -> t.Any:
        ...

    def delete_address(self, address_type: AddressType) -> t.Any:
        ...

    def save(self) -> t.Any:
        ...


class ProductController(t.Protocol):
    def get(self, product_id: str, *, domains: t.Sequence[str] = ()) -> t.Any:
        ...


class Customer(t.Protocol):
    id: str
    payment_address: t.Any
    address_items: t.Mapping[str, t.Any]


class CustomerController(t.Protocol):
    def get(self, user_id: str, *, domains: t.Sequence[str] = ()) -> Customer:
        ...


class StockItem(t.Protocol):
    product_code: str
    type: str


class StockController(t.Protocol):
    def search(
        self,
        product_codes: t.Sequence[str],
        *,
        stock_type: str | None = None,
        sort: str = "stock.type",
        limit: int | None = None,
    ) -> t.Iterable[StockItem]:
        ...


class LocaleItem(t.Protocol):
    language_id: str


class LocaleManager(t.Protocol):
    def search(self, *, enabled_only: bool = True) -> t.Iterable[LocaleItem]:
        ...


class OrderAddressManager(t.Protocol):
    def create_item(self) -> OrderAddress:
        ...
