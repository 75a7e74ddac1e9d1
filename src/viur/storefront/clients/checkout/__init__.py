from .address import CheckoutAddress  # noqa
from .parts import CheckoutAddressBilling, CheckoutAddressDelivery  # noqa
