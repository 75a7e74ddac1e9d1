from .data import Locale, PriceSummary  # noqa
from .enums import (  # noqa
    AddressType,
    BasketAction,
    BasketPart,
    CheckMode,
)
from .exceptions import (  # noqa
    ClientException,
    ConfigurationError,
    ControllerException,
    DispatchError,
    DomainException,
    PluginProviderException,
    StorefrontException,
)
