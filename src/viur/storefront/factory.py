"""Creation of clients with their decorator chain"""

import typing as t

from . import decorators  # noqa: registers the common decorators
from .globals import STOREFRONT_LOGGER
from .services import CLIENT_REGISTRY, DECORATOR_REGISTRY, DEFAULT_NAME

if t.TYPE_CHECKING:
    from .clients.abstract import ClientAbstract
    from .context import Context
    from .decorators import ClientDecorator
    from .view import View

logger = STOREFRONT_LOGGER.getChild(__name__)

Client_T = t.Union["ClientAbstract", "ClientDecorator"]


def get_decorator_names(context: "Context", path: str) -> list[tuple[str, str | None]]:
    """Names and scopes of the decorators for ``path``, innermost first.

    The order is fixed: common defaults without the excludes, then the
    global decorators, then the local decorators of the client.
    """
    config = context.config
    excludes = set(config.get(f"client/html/{path}/decorators/excludes", []))
    names: list[tuple[str, str | None]] = [
        (name, None)
        for name in config.get("client/html/common/decorators/default", [])
        if name not in excludes
    ]
    names += [(name, None) for name in config.get(f"client/html/{path}/decorators/global", [])]
    names += [(name, path) for name in config.get(f"client/html/{path}/decorators/local", [])]
    return names


def add_client_decorators(client: "ClientAbstract", context: "Context", path: str) -> Client_T:
    """Wrap ``client`` with its configured decorators

    The last decorator is the outermost one. The client gets a reference
    to it, so calls the client makes on itself pass all decorators.
    """
    decorated: Client_T = client
    for name, scope in get_decorator_names(context, path):
        decorated = DECORATOR_REGISTRY.dispatch(name, scope)(decorated, context)
    client.set_object(decorated)
    return decorated


def create_client(
    context: "Context",
    path: str,
    name: str | None = None,
    view: "View | None" = None,
) -> Client_T:
    """Create the client registered for ``path``

    :param context: Context of the current request.
    :param path: Path of the client, e.g. ``basket/standard``.
    :param name: Implementation name, defaults to ``client/html/<path>/name``
        or ``standard``.
    :param view: Optional view to set on the client.
    :raises DispatchError: No client or decorator is registered for a name.
    """
    path = path.strip("/")
    if not name:
        name = context.config.get(f"client/html/{path}/name", DEFAULT_NAME)
    cls = CLIENT_REGISTRY.dispatch(path, name)
    logger.debug(f"Creating client {cls.__name__} for {path!r}")
    client = add_client_decorators(cls(context, path), context, path)
    if view is not None:
        client.set_view(view)
    return client
