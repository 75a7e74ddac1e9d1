import dataclasses
import decimal

ZERO = decimal.Decimal(0)


@dataclasses.dataclass
class PriceSummary:
    """Sum of the prices sharing one tax rate"""

    tax_rate: decimal.Decimal
    value: decimal.Decimal = ZERO
    costs: decimal.Decimal = ZERO
    tax: decimal.Decimal = ZERO

    def add(self, price, quantity: int = 1) -> "PriceSummary":
        self.value += decimal.Decimal(price.value) * quantity
        self.costs += decimal.Decimal(price.costs) * quantity
        self.tax += decimal.Decimal(price.tax) * quantity
        return self


@dataclasses.dataclass
class Locale:
    """The locale of the current request"""

    site_code: str = "default"
    language_id: str = "en"
    currency_id: str | None = None
    site_config: dict = dataclasses.field(default_factory=dict)
    """Site specific settings, e.g. ``stocktype``"""
