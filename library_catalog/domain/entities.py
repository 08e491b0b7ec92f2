"""
Domain entities for the library catalog.

A Book is identified by the id the store assigns; its four business fields
are validated whenever one is built. Money is handled as Decimal cents.
"""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from .errors import InvalidArgumentError

CENT = Decimal("0.01")

# Ids, years and prices in cents are stored as signed 64-bit integers.
MAX_INTEGER = 2 ** 63 - 1
MAX_PRICE = Decimal(MAX_INTEGER).scaleb(-2)


def to_decimal(value: object, field: str = "price", label: str = "Price") -> Decimal:
    """
    Convert a number to an exact, unrounded Decimal.

    Floats go through str() first so 12.99 stays 12.99 instead of picking up
    binary noise. Booleans are rejected even though they are ints.

    Raises:
        InvalidArgumentError: If the value is not a finite number
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(field, "must be a number", f"{label} must be a number")

    try:
        if isinstance(value, float):
            amount = Decimal(str(value))
        else:
            amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidArgumentError(
            field, "must be a number", f"{label} must be a number"
        ) from None

    if not amount.is_finite():
        raise InvalidArgumentError(field, "must be a number", f"{label} must be a number")
    return amount


def to_money(value: object, field: str = "price", label: str = "Price") -> Decimal:
    """
    Convert a number to a monetary Decimal with two fractional digits.

    Raises:
        InvalidArgumentError: If the value is not a finite number
    """
    amount = to_decimal(value, field, label)
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidArgumentError(field, "is out of range", f"{label} is out of range") from None


@dataclass
class Book:
    """
    Represents a book in the catalog.

    A book is identified by the id the store assigns on creation. The four
    business fields are always populated and valid.
    """

    name: str
    """Book title"""

    author: str
    """Author name"""

    year_of_publishing: int
    """Year of publishing (strictly positive)"""

    price: Decimal
    """Price, normalised to two fractional digits"""

    id: Optional[int] = None
    """Store-assigned identifier, None until the book is persisted"""

    def __post_init__(self) -> None:
        """Validate book data."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("name", "must not be empty", "Book name cannot be empty")

        if not isinstance(self.author, str) or not self.author.strip():
            raise InvalidArgumentError(
                "author", "must not be empty", "Author name cannot be empty"
            )

        if (
            isinstance(self.year_of_publishing, bool)
            or not isinstance(self.year_of_publishing, int)
            or self.year_of_publishing <= 0
        ):
            raise InvalidArgumentError(
                "year_of_publishing",
                "must be positive",
                "Year of publishing must be a positive number",
            )

        self.price = to_money(self.price)
        if self.price <= 0:
            raise InvalidArgumentError("price", "must be positive", "Price must be a positive number")

        if self.id is not None and (isinstance(self.id, bool) or self.id <= 0):
            raise InvalidArgumentError("id", "must be positive", "Book ID must be a positive number")

    def __eq__(self, other: object) -> bool:
        """Two books are equal if they have the same ID."""
        if not isinstance(other, Book):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on book ID."""
        if self.id is None:
            return id(self)
        return hash(self.id)

    def with_id(self, book_id: int) -> "Book":
        """Return a copy of this book carrying the given store id."""
        return replace(self, id=book_id)
