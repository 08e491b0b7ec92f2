"""
Catalog use cases.

CatalogService is built with a CatalogStore and is the only place where
catalog rules (validation, duplicates, statistics) are applied.
"""

from .catalog_service import CatalogService

__all__ = [
    "CatalogService",
]
