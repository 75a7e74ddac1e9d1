import enum


class AddressType(enum.Enum):
    PAYMENT = "payment"
    DELIVERY = "delivery"


class BasketAction(enum.Enum):
    """Values of the ``b_action`` request parameter"""

    ADD = "add"
    DELETE = "delete"
    COUPON_DELETE = "coupon-delete"
    UPDATE = "update"
    """Default action: update quantities and add a coupon"""

    @classmethod
    def from_param(cls, value: object) -> "BasketAction":
        try:
            return cls(value)
        except ValueError:
            return cls.UPDATE


class CheckMode(enum.IntEnum):
    """Values of ``client/html/basket/standard/check``"""

    NONE = 0
    """No product related checks"""

    ALWAYS = 1
    """Checks are performed every time the basket is displayed"""

    ON_REQUEST = 2
    """Checks are performed only when the "check" button was clicked"""


class BasketPart(enum.Enum):
    """Parts of a basket a check can be limited to"""

    PRODUCT = "product"
    ADDRESS = "address"
    SERVICE = "service"
    COUPON = "coupon"
