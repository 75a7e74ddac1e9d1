"""
ViUR-Storefront – html clients for the pages of an e-commerce storefront.

Each client renders one section of a page (basket, checkout address step,
catalog stock), may consist of configurable sub-clients and applies the
basket changes requested by the customer.

Components included:

-   `storefront`: The application wide setup creating contexts and clients.
-   `context`, `view`: Request scoped context and the field bag of the templates.
-   `clients`: The html clients, registered by path.
-   `decorators`: Cross-cutting behavior wrapped around the clients.
-   `services`: Registries of the clients and decorators.

.. note::
    The commerce layer (basket, product, customer and stock controllers,
    locale and order address managers) is not part of this package.
    It is provided by the application through the controller factories.
"""

from .globals import *
from .types import *
from .config import Config
from .context import Context
from .view import View
from .rendering import TemplateEngine
from .i18n import CatalogTranslator, Translator
from .services import CLIENT_REGISTRY, DECORATOR_REGISTRY
from .decorators import ClientDecorator
from .factory import add_client_decorators, create_client
from .clients import *
from .storefront import Storefront
