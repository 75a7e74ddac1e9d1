"""
Summaries of a basket for the templates

These functions only add up what the commerce layer already calculated,
the prices and taxes themselves are not computed here.
"""

import decimal
import typing as t

from ...types.data import PriceSummary, ZERO

if t.TYPE_CHECKING:
    from ...types.domain import Basket, Price


def _priced_items(basket: "Basket") -> t.Iterator[tuple["Price", int]]:
    for product in basket.products:
        yield product.price, product.quantity
    for services in basket.services.values():
        for service in services:
            yield service.price, 1


def get_tax_rates(basket: "Basket") -> dict[decimal.Decimal, PriceSummary]:
    """Prices of products and services by tax rate"""
    tax_rates: dict[decimal.Decimal, PriceSummary] = {}
    for price, quantity in _priced_items(basket):
        rate = decimal.Decimal(price.tax_rate)
        tax_rates.setdefault(rate, PriceSummary(rate)).add(price, quantity)
    return dict(sorted(tax_rates.items()))


def get_named_taxes(basket: "Basket") -> dict[str, dict[decimal.Decimal, PriceSummary]]:
    """Prices by tax name (e.g. ``VAT``) and rate"""
    named: dict[str, dict[decimal.Decimal, PriceSummary]] = {}
    for price, quantity in _priced_items(basket):
        rate = decimal.Decimal(price.tax_rate)
        rates = named.setdefault(getattr(price, "tax_name", "") or "", {})
        rates.setdefault(rate, PriceSummary(rate)).add(price, quantity)
    return named


def get_costs(basket: "Basket", service_type: str) -> decimal.Decimal:
    return sum(
        (decimal.Decimal(service.price.costs) for service in basket.services.get(service_type, ())),
        ZERO,
    )


def get_costs_delivery(basket: "Basket") -> decimal.Decimal:
    """Shipping costs of products and delivery services"""
    costs = get_costs(basket, "delivery")
    for product in basket.products:
        costs += decimal.Decimal(product.price.costs) * product.quantity
    return costs


def get_costs_payment(basket: "Basket") -> decimal.Decimal:
    return get_costs(basket, "payment")
