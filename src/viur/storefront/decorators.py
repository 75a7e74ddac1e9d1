"""
Client decorators

Decorators wrap a client and add cross-cutting behavior without changing
its contract. They are configured by name per client path:

- ``client/html/common/decorators/default``: common decorators for all clients
- ``client/html/<path>/decorators/excludes``: common decorators to skip
- ``client/html/<path>/decorators/global``: additional common decorators
- ``client/html/<path>/decorators/local``: decorators registered for ``<path>``

See :func:`viur.storefront.factory.add_client_decorators` for the order.
"""

import hashlib
import json
import time
import typing as t

from .globals import HTML_OUTPUT_KEY, STOREFRONT_LOGGER
from .services import DECORATOR_REGISTRY

if t.TYPE_CHECKING:
    from .clients.abstract import ClientAbstract
    from .context import Context
    from .view import View

logger = STOREFRONT_LOGGER.getChild(__name__)


class ClientDecorator:
    """Base decorator, forwards everything to the wrapped client"""

    name: t.ClassVar[str] = ""

    def __init__(self, client: "ClientAbstract | ClientDecorator", context: "Context"):
        self._client = client
        self.context = context

    def __getattr__(self, name: str) -> t.Any:
        return getattr(self._client, name)

    @property
    def view(self) -> "View":
        return self._client.view

    def set_view(self, view: "View") -> t.Self:
        self._client.set_view(view)
        return self

    def add_data(self, view: "View") -> "View":
        return self._client.add_data(view)

    def get_body(self, uid: str = "") -> str:
        return self._client.get_body(uid)

    def get_header(self, uid: str = "") -> str:
        return self._client.get_header(uid)

    def process(self) -> None:
        return self._client.process()

    def get_sub_client(self, type: str, name: str | None = None) -> "ClientAbstract | ClientDecorator":
        return self._client.get_sub_client(type, name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} of {self._client!r}>"


@DECORATOR_REGISTRY.register("log")
class LogDecorator(ClientDecorator):
    """Debug log of every pipeline call with its duration"""

    def _timed(self, method: str, func: t.Callable[..., t.Any], *args: t.Any) -> t.Any:
        start = time.perf_counter()
        try:
            return func(*args)
        finally:
            logger.debug(f"{self.path}.{method}{args!r} took {time.perf_counter() - start:.4f}s")

    def add_data(self, view: "View") -> "View":
        return self._timed("add_data", self._client.add_data, view)

    def get_body(self, uid: str = "") -> str:
        return self._timed("get_body", self._client.get_body, uid)

    def get_header(self, uid: str = "") -> str:
        return self._timed("get_header", self._client.get_header, uid)

    def process(self) -> None:
        return self._timed("process", self._client.process)


@DECORATOR_REGISTRY.register("exceptions")
class ExceptionsDecorator(ClientDecorator):
    """Last resort: nothing raised by a client breaks the whole page"""

    def get_body(self, uid: str = "") -> str:
        try:
            return self._client.get_body(uid)
        except Exception as exc:  # noqa
            logger.exception(f"Rendering the body of {self.path!r} failed: {exc}")
            return ""

    def get_header(self, uid: str = "") -> str:
        try:
            return self._client.get_header(uid)
        except Exception as exc:  # noqa
            logger.exception(f"Rendering the header of {self.path!r} failed: {exc}")
            return ""

    def process(self) -> None:
        try:
            self._client.process()
        except Exception as exc:  # noqa
            logger.exception(f"Processing {self.path!r} failed: {exc}")


@DECORATOR_REGISTRY.register("login")
class LoginDecorator(ClientDecorator):
    """Only render and process the client for authenticated customers"""

    @property
    def is_authenticated(self) -> bool:
        return self.context.user_id is not None

    def add_data(self, view: "View") -> "View":
        if not self.is_authenticated:
            return view
        return self._client.add_data(view)

    def get_body(self, uid: str = "") -> str:
        if not self.is_authenticated:
            return ""
        return self._client.get_body(uid)

    def get_header(self, uid: str = "") -> str:
        if not self.is_authenticated:
            return ""
        return self._client.get_header(uid)

    def process(self) -> None:
        if self.is_authenticated:
            self._client.process()


@DECORATOR_REGISTRY.register("cache")
class CacheDecorator(ClientDecorator):
    """Keep the rendered output in the session

    The keys are listed in the session under :data:`HTML_OUTPUT_KEY`,
    :meth:`ClientAbstract.clear_cached` drops all of them after a basket change.
    """

    def cache_key(self, kind: str, uid: str) -> str:
        params = json.dumps(self.view.params, sort_keys=True, default=str)
        digest = hashlib.sha1(params.encode()).hexdigest()
        return f"{HTML_OUTPUT_KEY}/{self.path}/{kind}/{uid}/{self.context.locale.language_id}/{digest}"

    def _cached(self, kind: str, uid: str, render: t.Callable[[str], str]) -> str:
        session = self.context.session
        key = self.cache_key(kind, uid)
        if (html := session.get(key)) is not None:
            logger.debug(f"Using cached {kind} of {self.path!r}")
            return html
        html = render(uid)
        session[key] = html
        index = list(session.get(HTML_OUTPUT_KEY) or [])
        if key not in index:
            session[HTML_OUTPUT_KEY] = index + [key]
        return html

    def get_body(self, uid: str = "") -> str:
        return self._cached("body", uid, self._client.get_body)

    def get_header(self, uid: str = "") -> str:
        return self._cached("header", uid, self._client.get_header)
