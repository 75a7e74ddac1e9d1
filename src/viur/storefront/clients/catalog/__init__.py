from .stock import CatalogStock  # noqa
