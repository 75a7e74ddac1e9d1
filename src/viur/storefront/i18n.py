"""Message translation for the html clients

Messages are identified by a domain (``client``, ``controller/frontend``,
``mshop``, ``mshop/code``) and the untranslated english text.
"""

import typing as t

from .data.translations import TRANSLATIONS
from .globals import STOREFRONT_LOGGER

logger = STOREFRONT_LOGGER.getChild(__name__)


@t.runtime_checkable
class Translator(t.Protocol):
    def translate(self, domain: str, message: str) -> str:
        ...


class CatalogTranslator:
    """Translate with a catalog like :data:`TRANSLATIONS`

    Lookup order: language, ``_default_text``, the message itself.
    """

    def __init__(
        self,
        language: str = "en",
        catalog: t.Mapping[str, t.Mapping[str, t.Mapping[str, str]]] = TRANSLATIONS,
    ):
        self.language = language
        self.catalog = catalog

    def translate(self, domain: str, message: str) -> str:
        entry = self.catalog.get(domain, {}).get(message)
        if not entry:
            return message
        return entry.get(self.language) or entry.get("_default_text") or message

    def __repr__(self) -> str:
        return f"<{type(self).__name__} language={self.language!r}>"
