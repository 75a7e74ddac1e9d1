"""The html clients of the storefront, registered on import"""

from .abstract import ClientAbstract
from .basket import BasketStandard
from .catalog import CatalogStock
from .checkout import CheckoutAddress, CheckoutAddressBilling, CheckoutAddressDelivery

__all__ = [
    "BasketStandard",
    "CatalogStock",
    "CheckoutAddress",
    "CheckoutAddressBilling",
    "CheckoutAddressDelivery",
    "ClientAbstract",
]
