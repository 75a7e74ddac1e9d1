"""
The request scoped context

A :class:`Context` is created for every request and handed to every client of
the client tree. It bundles the configuration, the session, the locale and the
translator, and it creates the frontend controllers and domain managers of the
commerce layer on demand.
"""

import dataclasses
import logging
import typing as t

from .config import Config
from .globals import STOREFRONT_LOGGER
from .i18n import CatalogTranslator, Translator
from .rendering import TemplateEngine
from .types import ConfigurationError, Locale

ControllerFactory = t.Callable[["Context"], t.Any]
"""Creates a controller/manager of the commerce layer for a context"""


@dataclasses.dataclass(eq=False)
class Context:
    config: Config = dataclasses.field(default_factory=Config)
    session: t.MutableMapping[str, t.Any] = dataclasses.field(default_factory=dict)
    locale: Locale = dataclasses.field(default_factory=Locale)
    translator: Translator | None = None
    templates: TemplateEngine | None = None
    user_id: str | None = None
    """Id of the authenticated customer, ``None`` for guests"""
    logger: logging.Logger = STOREFRONT_LOGGER
    controller_factories: t.Mapping[str, ControllerFactory] = dataclasses.field(default_factory=dict)
    manager_factories: t.Mapping[str, ControllerFactory] = dataclasses.field(default_factory=dict)
    url_builder: t.Callable[..., str] | None = None

    _controllers: dict[str, t.Any] = dataclasses.field(default_factory=dict, init=False, repr=False)
    _managers: dict[str, t.Any] = dataclasses.field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.translator is None:
            self.translator = CatalogTranslator(self.locale.language_id)
        if self.templates is None:
            self.templates = TemplateEngine()

    def controller(self, name: str) -> t.Any:
        """Get the frontend controller ``name`` (e.g. ``basket``), once per request"""
        return self._create(name, self.controller_factories, self._controllers, "controller")

    def manager(self, name: str) -> t.Any:
        """Get the domain manager ``name`` (e.g. ``locale``), once per request"""
        return self._create(name, self.manager_factories, self._managers, "manager")

    def _create(
        self,
        name: str,
        factories: t.Mapping[str, ControllerFactory],
        cache: dict[str, t.Any],
        kind: str,
    ) -> t.Any:
        if name not in cache:
            try:
                factory = factories[name]
            except KeyError:
                raise ConfigurationError(f"No {kind} factory configured for {name!r}")
            cache[name] = factory(self)
        return cache[name]

    def translate(self, domain: str, message: str) -> str:
        return self.translator.translate(domain, message)
