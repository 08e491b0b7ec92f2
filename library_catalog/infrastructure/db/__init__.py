"""
Persistence adapters for the catalog.

This package contains:
- SqliteCatalogStore: CatalogStore port backed by a SQLite file
"""

from .sqlite_catalog_store import SqliteCatalogStore

__all__ = ["SqliteCatalogStore"]
