"""
Translation of exceptions into messages for the customer.

The clients wrap their work in :func:`error_boundary`. Known exceptions are
translated within the domain of their class and appended to an error list
field of the view, everything else is logged and shown as a generic message.
"""

import contextlib
import typing as t

from .globals import STOREFRONT_LOGGER
from .types.exceptions import ConfigurationError, PluginProviderException, StorefrontException

if t.TYPE_CHECKING:
    from .context import Context
    from .view import View

logger = STOREFRONT_LOGGER.getChild(__name__)

NON_RECOVERABLE_ERROR: t.Final[str] = "A non-recoverable error occured"


def translate_plugin_error_codes(
    context: "Context",
    error_codes: t.Mapping[str, t.Mapping[str, str]],
) -> list[str]:
    """Translate plugin error codes into messages

    Each code is translated in the ``mshop/code`` domain and formatted with
    the translated key, e.g. ``{"product": {"pen": "stock.notenough"}}``.
    """
    errors = []
    for scope, codes in error_codes.items():
        for key, code in codes.items():
            message = context.translate("mshop/code", code)
            errors.append(message.format(context.translate("mshop/code", key)))
    return errors


def translate_exception(context: "Context", exception: Exception) -> list[str]:
    if isinstance(exception, ConfigurationError) or not isinstance(exception, StorefrontException):
        return [context.translate("client", NON_RECOVERABLE_ERROR)]
    errors = [context.translate(exception.domain, exception.message)]
    if isinstance(exception, PluginProviderException):
        errors += translate_plugin_error_codes(context, exception.error_codes)
    return errors


def log_exception(context: "Context", exception: Exception) -> None:
    context.logger.exception(f"{type(exception).__name__}: {exception}", exc_info=exception)


@contextlib.contextmanager
def error_boundary(
    view: "View",
    field: str,
    *,
    codes_field: str | None = None,
) -> t.Iterator[None]:
    """Collect exceptions raised inside the block into ``view[field]``

    :param view: The view holding the error list.
    :param field: Name of the error list field, e.g. ``standard_error_list``.
    :param codes_field: Field for the raw error codes of plugin exceptions.
    """
    try:
        yield
    except Exception as exc:  # noqa
        view.append(field, *translate_exception(view.context, exc))
        if codes_field and isinstance(exc, PluginProviderException):
            view[codes_field] = exc.error_codes
        if isinstance(exc, ConfigurationError) or not isinstance(exc, StorefrontException):
            log_exception(view.context, exc)
