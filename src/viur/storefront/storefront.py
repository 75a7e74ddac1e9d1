import logging
import os
import typing as t

from .config import Config
from .context import Context, ControllerFactory
from .factory import create_client
from .globals import STOREFRONT_INSTANCE, STOREFRONT_LOGGER
from .i18n import CatalogTranslator, Translator
from .rendering import TemplateEngine
from .types import Locale
from .view import View

logger = STOREFRONT_LOGGER.getChild(__name__)

__all__ = ["Storefront"]

if STOREFRONT_LOGGER.level == logging.NOTSET:
    # By default, if not explicitly set before by the application, we set the logging level to INFO
    STOREFRONT_LOGGER.setLevel(logging.INFO)


class Storefront:
    """
    Application wide setup of the html clients.

    Holds what is shared by all requests (configuration, templates,
    the factories of the commerce layer) and creates the request scoped
    :class:`Context` and the top level clients from it.

    .. code-block:: python

        storefront = Storefront(
            config={"client": {"html": {"basket": {"standard": {"check": 2}}}}},
            controllers={"basket": BasketController, "product": ProductController},
            managers={"locale": LocaleManager},
        )
        context = storefront.create_context(session=session, user_id=user_id)
        client = storefront.create_client(context, "basket/standard", params=request.params)
        client.process()
        html = client.get_body()
    """

    def __init__(
        self,
        *,
        config: Config | t.Mapping[str, t.Any] | None = None,
        controllers: t.Mapping[str, ControllerFactory] | None = None,
        managers: t.Mapping[str, ControllerFactory] | None = None,
        template_paths: t.Sequence[str | os.PathLike] = (),
        translator_factory: t.Callable[[Locale], Translator] | None = None,
        url_builder: t.Callable[..., str] | None = None,
        **kwargs: t.Any,
    ):
        self.config: Config = config if isinstance(config, Config) else Config(config)
        self.controllers: dict[str, ControllerFactory] = dict(controllers or {})
        self.managers: dict[str, ControllerFactory] = dict(managers or {})
        self.templates = TemplateEngine(template_paths)
        self.translator_factory = translator_factory or (lambda locale: CatalogTranslator(locale.language_id))
        self.url_builder = url_builder
        self.additional_settings: dict[str, t.Any] = dict(kwargs)

        STOREFRONT_INSTANCE.set(self)

    def create_context(
        self,
        *,
        session: t.MutableMapping[str, t.Any] | None = None,
        locale: Locale | None = None,
        user_id: str | None = None,
    ) -> Context:
        locale = locale or Locale()
        return Context(
            config=self.config,
            session=session if session is not None else {},
            locale=locale,
            translator=self.translator_factory(locale),
            templates=self.templates,
            user_id=user_id,
            logger=STOREFRONT_LOGGER,
            controller_factories=self.controllers,
            manager_factories=self.managers,
            url_builder=self.url_builder,
        )

    def create_client(
        self,
        context: Context,
        path: str,
        *,
        params: t.Mapping[str, t.Any] | None = None,
        name: str | None = None,
    ):
        """Create the client for ``path`` with a new view for ``params``"""
        return create_client(context, path, name, view=View(context, params))

    def __repr__(self) -> str:
        return (
            f"<{type(self).__module__}.{type(self).__qualname__} "
            f"controllers={sorted(self.controllers)} managers={sorted(self.managers)} "
            f"at {hex(id(self))}>"
        )
