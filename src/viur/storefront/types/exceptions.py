"""
Specific exceptions used inside viur-storefront

The client exceptions map to a translation domain. The clients catch them at
their outermost boundary and show the translated message to the customer.
"""

from __future__ import annotations

import typing as t


class StorefrontException(Exception):
    """Base of all viur-storefront exceptions"""

    domain: t.ClassVar[str] = "client"
    """Translation domain of the message"""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class ClientException(StorefrontException):
    """
    Exception raised by an html client, e.g. on invalid request parameters.
    """
    domain = "client"


class ControllerException(StorefrontException):
    """
    Exception raised by a frontend controller of the commerce layer.
    """
    domain = "controller/frontend"


class DomainException(StorefrontException):
    """
    Exception raised by the domain layer (managers, items).
    """
    domain = "mshop"


class PluginProviderException(DomainException):
    """
    Exception raised by a basket plugin, e.g. during the product check.

    Carries structured error codes in the form ``{scope: {key: code}}``,
    for example ``{"product": {"0": "stock.notenough"}}``.
    """

    def __init__(self, msg: t.Any = "", error_codes: dict[str, dict[str, str]] | None = None, *args: t.Any):
        super().__init__(msg, *args)
        self.error_codes: dict[str, dict[str, str]] = error_codes or {}


class ConfigurationError(StorefrontException):
    """
    Exception raised when a configuration is invalid or incomplete.

    Unknown client paths or decorator names are reported this way.
    """
    ...


class DispatchError(ConfigurationError):
    """
    Exception raised when a registry lookup fails.
    """

    def __init__(self, msg: t.Any, name: str, *args: t.Any) -> None:
        """Create a new DispatchError.

        :param msg: Error message
        :param name: The name that could not be resolved
        """
        super().__init__(msg, *args)
        self.name: str = name
