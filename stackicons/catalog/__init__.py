"""Icon catalog model, loading and upstream sync."""

from .loader import BUNDLED_CATALOG_PATH, CatalogRecord, catalog_from_mapping, get_catalog, load_catalog
from .models import Catalog, CatalogEntry, CatalogError

__all__ = [
    "BUNDLED_CATALOG_PATH",
    "Catalog",
    "CatalogEntry",
    "CatalogError",
    "CatalogRecord",
    "catalog_from_mapping",
    "get_catalog",
    "load_catalog",
]
