"""Client and decorator registry

Clients and decorators are registered under a name when their module is
imported. The factory resolves configured names through these registries,
there is no lookup of classes by constructed import paths.

.. code-block:: python

    from viur.storefront.services import CLIENT_REGISTRY, DECORATOR_REGISTRY

    @CLIENT_REGISTRY.register("catalog/stock", "myproject")
    class MyStock(CatalogStock):
        ...

    @DECORATOR_REGISTRY.register("maintenance")
    class Maintenance(ClientDecorator):
        ...

    # a decorator which is only available for the basket client
    @DECORATOR_REGISTRY.register("teaser", scope="basket/standard")
    class BasketTeaser(ClientDecorator):
        ...
"""

import typing as t

from ..globals import STOREFRONT_LOGGER
from ..types.exceptions import DispatchError

if t.TYPE_CHECKING:
    from ..clients.abstract import ClientAbstract
    from ..decorators import ClientDecorator

logger = STOREFRONT_LOGGER.getChild(__name__)

DEFAULT_NAME: t.Final[str] = "standard"
"""Implementation name used if none is configured"""

_C = t.TypeVar("_C", bound=type)


class ClientRegistry:
    """Client classes by path (``basket/standard``) and implementation name"""

    clients: t.Final[dict[tuple[str, str], t.Type["ClientAbstract"]]] = {}

    def register(self, path: str, name: str = DEFAULT_NAME) -> t.Callable[[_C], _C]:
        """Register a client class, to be used as class decorator"""

        def outer_wrapper(cls: _C) -> _C:
            key = (path.strip("/"), name.lower())
            if key in ClientRegistry.clients and ClientRegistry.clients[key] is not cls:
                logger.info(f"Replacing client {ClientRegistry.clients[key]!r} for {key} by {cls!r}")
            ClientRegistry.clients[key] = cls
            return cls

        return outer_wrapper

    def unregister(self, path: str, name: str = DEFAULT_NAME) -> None:
        ClientRegistry.clients.pop((path.strip("/"), name.lower()), None)

    def dispatch(self, path: str, name: str = DEFAULT_NAME) -> t.Type["ClientAbstract"]:
        try:
            return ClientRegistry.clients[(path.strip("/"), name.lower())]
        except KeyError:
            raise DispatchError(f"No client {name!r} registered for {path!r}", f"{path}:{name}")


class DecoratorRegistry:
    """Decorator classes by name

    Common decorators have no scope and can be configured for every client.
    Local decorators are registered for one client path only.
    """

    decorators: t.Final[dict[tuple[str | None, str], t.Type["ClientDecorator"]]] = {}

    def register(self, name: str, scope: str | None = None) -> t.Callable[[_C], _C]:
        def outer_wrapper(cls: _C) -> _C:
            DecoratorRegistry.decorators[(scope and scope.strip("/"), name.lower())] = cls
            cls.name = name.lower()
            return cls

        return outer_wrapper

    def unregister(self, name: str, scope: str | None = None) -> None:
        DecoratorRegistry.decorators.pop((scope and scope.strip("/"), name.lower()), None)

    def dispatch(self, name: str, scope: str | None = None) -> t.Type["ClientDecorator"]:
        key = (scope and scope.strip("/"), name.lower())
        try:
            return DecoratorRegistry.decorators[key]
        except KeyError:
            kind = f"local decorator for {scope!r}" if scope else "common decorator"
            raise DispatchError(f"No {kind} named {name!r}", name)


CLIENT_REGISTRY = ClientRegistry()
DECORATOR_REGISTRY = DecoratorRegistry()
