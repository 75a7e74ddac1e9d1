"""
Use the storefront clients inside a ViUR application.

Requires the ``viur`` extra (``pip install viur-storefront[viur]``).

.. code-block:: python

    from viur.core import Module, exposed
    from viur.storefront.viur_bridge import create_client_from_current

    class Basket(Module):
        @exposed
        def index(self, **kwargs):
            client = create_client_from_current("basket/standard")
            client.process()
            return client.get_body()

``viur.core`` is imported on use only, it requires a configured project.
"""

import collections.abc
import typing as t

from .globals import STOREFRONT_INSTANCE, STOREFRONT_LOGGER
from .types import Locale

if t.TYPE_CHECKING:
    from .context import Context
    from .storefront import Storefront

logger = STOREFRONT_LOGGER.getChild(__name__)


class ViurTranslator:
    """Translate with the translations of the ViUR project"""

    key_prefix: t.ClassVar[str] = "viur.storefront"

    def translate(self, domain: str, message: str) -> str:
        from viur.core.i18n import translate
        key = f"{self.key_prefix}.{domain.replace('/', '.')}.{message}"
        return str(translate(key, message))


class ViurSession(collections.abc.MutableMapping):
    """Own scope of the storefront in the current ViUR session"""

    scope: t.ClassVar[str] = "storefront"

    @property
    def _data(self) -> dict[str, t.Any]:
        from viur.core import current
        session = current.session.get()
        if session is None:
            logger.warning("Session is None!")
            return {}
        if self.scope not in session:
            session[self.scope] = {}
            session.markChanged()
        return session[self.scope]

    def _changed(self) -> None:
        from viur.core import current
        if (session := current.session.get()) is not None:
            session.markChanged()

    def __getitem__(self, key: str) -> t.Any:
        return self._data[key]

    def __setitem__(self, key: str, value: t.Any) -> None:
        self._data[key] = value
        self._changed()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._changed()

    def __iter__(self) -> t.Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


def context_from_current(storefront: "Storefront | None" = None) -> "Context":
    """Create the context for the current ViUR request"""
    from viur.core import current

    storefront = storefront or STOREFRONT_INSTANCE.get()
    user = current.user.get()
    context = storefront.create_context(
        session=ViurSession(),
        locale=Locale(language_id=current.language.get() or "en"),
        user_id=str(user["key"]) if user else None,
    )
    context.translator = ViurTranslator()
    return context


def create_client_from_current(
    path: str,
    *,
    storefront: "Storefront | None" = None,
    name: str | None = None,
):
    """Create a client for the current ViUR request with its parameters"""
    from viur.core import current

    storefront = storefront or STOREFRONT_INSTANCE.get()
    context = context_from_current(storefront)
    params = dict(current.request.get().kwargs)
    return storefront.create_client(context, path, params=params, name=name)
