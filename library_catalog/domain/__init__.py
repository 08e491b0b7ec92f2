"""
Catalog domain: the Book record, catalog statistics and error kinds.

Nothing here imports FastAPI, pydantic or sqlite3; adapters depend on this
package, never the other way round.
"""

from .entities import Book
from .errors import (
    BookNotFoundError,
    CatalogError,
    DuplicateBookError,
    ErrorKind,
    InvalidArgumentError,
    StoreFailureError,
)
from .value_objects import LibraryStats

__all__ = [
    # Entities
    "Book",
    # Value Objects
    "LibraryStats",
    # Errors
    "CatalogError",
    "ErrorKind",
    "InvalidArgumentError",
    "BookNotFoundError",
    "DuplicateBookError",
    "StoreFailureError",
]
