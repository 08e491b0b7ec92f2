"""
Error kinds raised by the catalog domain.

Every failure the core can produce is a CatalogError subclass tagged with an
ErrorKind, so adapters (tool surface, HTTP API) can decide how to present it
without parsing messages. The concrete classes also inherit from the builtin
exception that best describes them, which keeps `except ValueError` style
handling working at the edges.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of a catalog failure."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    DUPLICATE_BOOK = "duplicate_book"
    STORE_FAILURE = "store_failure"


class CatalogError(Exception):
    """Base class for all catalog failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(CatalogError, ValueError):
    """
    A field failed its constraint (empty text, non-positive number, min > max).

    Attributes:
        field: Name of the offending argument (e.g. 'name', 'price')
        rule: The violated rule (e.g. 'must not be empty')
    """

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, field: str, rule: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{field} {rule}")
        self.field = field
        self.rule = rule


class BookNotFoundError(CatalogError, LookupError):
    """The referenced book id does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with ID {book_id} not found")
        self.book_id = book_id


class DuplicateBookError(CatalogError, ValueError):
    """A book with the same name and author (case-insensitive) already exists."""

    kind = ErrorKind.DUPLICATE_BOOK

    def __init__(self, name: str, author: str, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or f"Book with name '{name}' by author '{author}' already exists"
        )
        self.name = name
        self.author = author


class StoreFailureError(CatalogError, RuntimeError):
    """The underlying store could not complete the operation."""

    kind = ErrorKind.STORE_FAILURE
