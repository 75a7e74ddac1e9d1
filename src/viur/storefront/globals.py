import logging
import typing as t

if t.TYPE_CHECKING:
    from .storefront import Storefront

STOREFRONT_LOGGER: logging.Logger = logging.getLogger("viur.storefront")
"""viur-storefront base logger instance"""


class Sentinel:
    """
    Marker for "no value given", distinct from ``None``.

    Renders as ``<SENTINEL>`` and is falsy.
    """

    def __repr__(self) -> str:
        return "<SENTINEL>"

    def __bool__(self) -> bool:
        return False


SENTINEL: t.Final[Sentinel] = Sentinel()
"""Unique sentinel object used to detect if a value was explicitly set or not"""

_T = t.TypeVar("_T")


class GlobalVar(t.Generic[_T]):
    """A named, process wide slot with an optional default."""

    __slots__ = ("name", "value")

    def __init__(self, name: str, default: _T = SENTINEL):
        self.name = name
        self.value = default

    def set(self, value: _T) -> None:
        self.value = value

    def get(self, default: _T = SENTINEL) -> _T:
        """
        Return the stored value, else ``default``.

        :raises LookupError: Neither a value nor a default is available.
        """
        if self.value is not SENTINEL:
            return self.value
        if default is not SENTINEL:
            return default
        raise LookupError(f"{self.name} is not set")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} value={self.value!r}>"


STOREFRONT_INSTANCE: GlobalVar["Storefront"] = GlobalVar("StorefrontInstance")
"""The storefront instance used by the viur bridge"""

HTML_OUTPUT_KEY: t.Final[str] = "storefront/html-output"
"""Session key of the index of cached html output keys"""
