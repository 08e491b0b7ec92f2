"""
Derived, immutable catalog data.

LibraryStats is recomputed from the stored books on every request and has
no identity of its own.
"""

from dataclasses import dataclass
from decimal import Decimal

ZERO_PRICE = Decimal("0.00")


@dataclass(frozen=True)
class LibraryStats:
    """
    Aggregate view over the whole catalog.

    Recomputed on every request from the current set of books. For an empty
    catalog every derived field is zeroed; use is_empty() to tell the cases
    apart.
    """

    total_books: int
    """Number of books in the catalog"""

    unique_authors: int = 0
    """Number of distinct author strings (case-sensitive)"""

    earliest_year: int = 0
    """Smallest year of publishing"""

    latest_year: int = 0
    """Largest year of publishing"""

    min_price: Decimal = ZERO_PRICE
    """Cheapest price"""

    max_price: Decimal = ZERO_PRICE
    """Most expensive price"""

    def __post_init__(self) -> None:
        """Validate stats constraints."""
        if self.total_books < 0:
            raise ValueError(f"total_books cannot be negative, got {self.total_books}")

        if self.unique_authors > self.total_books:
            raise ValueError(
                f"unique_authors ({self.unique_authors}) cannot exceed "
                f"total_books ({self.total_books})"
            )

        if self.earliest_year > self.latest_year:
            raise ValueError(
                f"earliest_year ({self.earliest_year}) cannot be greater than "
                f"latest_year ({self.latest_year})"
            )

        if self.min_price > self.max_price:
            raise ValueError(
                f"min_price ({self.min_price}) cannot be greater than "
                f"max_price ({self.max_price})"
            )

    @classmethod
    def empty(cls) -> "LibraryStats":
        """Stats for a catalog without books."""
        return cls(total_books=0)

    def is_empty(self) -> bool:
        """Check if the catalog had no books."""
        return self.total_books == 0
