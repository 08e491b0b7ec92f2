"""
Domain service for managing the library catalog.

CatalogService owns every business rule of the catalog: input validation,
duplicate prevention on the (name, author) pair, update reconciliation,
search delegation and statistics. It depends only on the CatalogStore port,
so it runs the same against SQLite or an in-memory fake.

Duplicate detection is case-insensitive, while the unique_authors statistic
counts author strings exactly as stored. Both behaviours are intended.
"""

import logging
import threading
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR
from typing import List, Optional

from library_catalog.domain.entities import (
    CENT,
    MAX_INTEGER,
    MAX_PRICE,
    Book,
    to_decimal,
    to_money,
)
from library_catalog.domain.errors import (
    BookNotFoundError,
    DuplicateBookError,
    InvalidArgumentError,
)
from library_catalog.domain.ports import CatalogStore
from library_catalog.domain.value_objects import LibraryStats

logger = logging.getLogger(__name__)


def _require_text(value: object, field: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(field, "must not be empty", f"{label} cannot be empty")
    return value.strip()


def _require_positive_int(value: object, field: str, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(field, "must be positive", f"{label} must be a positive number")
    if value > MAX_INTEGER:
        raise InvalidArgumentError(field, "is out of range", f"{label} is out of range")
    return value


def _require_positive_price(value: object) -> Decimal:
    price = to_money(value)
    if price <= 0:
        raise InvalidArgumentError("price", "must be positive", "Price must be a positive number")
    if price > MAX_PRICE:
        raise InvalidArgumentError("price", "is out of range", "Price is out of range")
    return price


def _require_price_bound(value: object, field: str, label: str) -> Decimal:
    # Sign is checked before any rounding so -0.004 is still negative.
    price = to_decimal(value, field, label)
    if price < 0:
        raise InvalidArgumentError(
            field, "must not be negative", f"{label} must be a non-negative number"
        )
    return price


class CatalogService:
    """
    Use cases of the library catalog.

    Each operation validates its arguments before touching the store and
    commits at most one change. The check-then-write sequences (add, update,
    delete) run under a lock so concurrent callers in one process cannot
    both pass the duplicate check; the SQLite store backs this with a unique
    index for writers in other processes.

    Usage:
        service = CatalogService(SqliteCatalogStore(Path("data/catalog.db")))
        book = service.add_book("Dune", "Frank Herbert", 1965, Decimal("16.99"))
    """

    def __init__(self, store: CatalogStore) -> None:
        """
        Initialize the service with its store.

        Args:
            store: Persistence port for books
        """
        self._store = store
        self._write_lock = threading.RLock()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_book(
        self,
        name: str,
        author: str,
        year_of_publishing: int,
        price: Decimal,
    ) -> Book:
        """
        Add a new book to the catalog.

        Args:
            name: Book title, trimmed before storing
            author: Author name, trimmed before storing
            year_of_publishing: Strictly positive year
            price: Strictly positive price

        Returns:
            The stored book including its assigned id

        Raises:
            InvalidArgumentError: If any field is invalid
            DuplicateBookError: If the name+author pair already exists (any case)
            StoreFailureError: If the store fails
        """
        book = Book(
            name=_require_text(name, "name", "Book name"),
            author=_require_text(author, "author", "Author name"),
            year_of_publishing=_require_positive_int(
                year_of_publishing, "year_of_publishing", "Year of publishing"
            ),
            price=_require_positive_price(price),
        )

        with self._write_lock:
            existing = self._store.find_by_name_and_author(book.name, book.author)
            if existing is not None:
                logger.warning(
                    "Rejected duplicate book '%s' by '%s' (matches ID %s)",
                    book.name, book.author, existing.id,
                )
                raise DuplicateBookError(book.name, book.author)

            saved = self._store.save(book)

        logger.info(f"Added book ID {saved.id}: '{saved.name}' by {saved.author}")
        return saved

    def update_book(
        self,
        book_id: int,
        name: str,
        author: str,
        year_of_publishing: int,
        price: Decimal,
    ) -> Book:
        """
        Replace all four business fields of an existing book.

        Renaming a book to its own current name+author is allowed; renaming
        it onto the pair held by a different book is not.

        Returns:
            The updated book, with its id unchanged

        Raises:
            InvalidArgumentError: If any field is invalid
            BookNotFoundError: If no book has this id
            DuplicateBookError: If another book holds the new name+author pair
            StoreFailureError: If the store fails
        """
        book_id = _require_positive_int(book_id, "book_id", "Book ID")
        replacement = Book(
            name=_require_text(name, "name", "Book name"),
            author=_require_text(author, "author", "Author name"),
            year_of_publishing=_require_positive_int(
                year_of_publishing, "year_of_publishing", "Year of publishing"
            ),
            price=_require_positive_price(price),
            id=book_id,
        )

        with self._write_lock:
            if self._store.find_by_id(book_id) is None:
                raise BookNotFoundError(book_id)

            duplicate = self._store.find_by_name_and_author(replacement.name, replacement.author)
            if duplicate is not None and duplicate.id != book_id:
                logger.warning(
                    "Rejected update of book ID %s: pair already held by ID %s",
                    book_id, duplicate.id,
                )
                raise DuplicateBookError(
                    replacement.name,
                    replacement.author,
                    f"Another book with name '{replacement.name}' by author "
                    f"'{replacement.author}' already exists",
                )

            saved = self._store.save(replacement)

        logger.info(f"Updated book ID {saved.id}: '{saved.name}' by {saved.author}")
        return saved

    def delete_book(self, book_id: int) -> bool:
        """
        Delete a book by id.

        Returns:
            True if the book existed and was removed, False otherwise
        """
        book_id = _require_positive_int(book_id, "book_id", "Book ID")

        with self._write_lock:
            if not self._store.exists_by_id(book_id):
                logger.debug(f"Delete skipped, no book with ID {book_id}")
                return False
            self._store.delete_by_id(book_id)

        logger.info(f"Deleted book ID {book_id}")
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_book(self, book_id: int) -> Optional[Book]:
        """Get a book by id, or None if it does not exist."""
        book_id = _require_positive_int(book_id, "book_id", "Book ID")
        return self._store.find_by_id(book_id)

    def all_books(self) -> List[Book]:
        """All books in insertion order."""
        return self._store.find_all()

    def books_ordered_by_year(self) -> List[Book]:
        """All books, newest first."""
        return self._store.find_all_ordered_by_year_desc()

    def search_by_name(self, fragment: str) -> List[Book]:
        """Books whose name contains the fragment, ignoring case."""
        fragment = _require_text(fragment, "book_name", "Book name")
        logger.debug(f"Searching books by name containing '{fragment}'")
        return self._store.find_by_name_containing(fragment)

    def search_by_author(self, fragment: str) -> List[Book]:
        """Books whose author contains the fragment, ignoring case."""
        fragment = _require_text(fragment, "author", "Author name")
        logger.debug(f"Searching books by author containing '{fragment}'")
        return self._store.find_by_author_containing(fragment)

    def books_by_year(self, year: int) -> List[Book]:
        """Books published in exactly this year."""
        year = _require_positive_int(year, "year", "Year")
        return self._store.find_by_year(year)

    def books_by_year_range(self, start_year: int, end_year: int) -> List[Book]:
        """Books published between the two years, inclusive."""
        start_year = _require_positive_int(start_year, "start_year", "Start year")
        end_year = _require_positive_int(end_year, "end_year", "End year")
        if start_year > end_year:
            raise InvalidArgumentError(
                "start_year",
                "must not exceed end_year",
                "Start year cannot be greater than end year",
            )
        return self._store.find_by_year_range(start_year, end_year)

    def books_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Book]:
        """
        Books priced between min_price and max_price, inclusive.

        Bounds are compared as given: the lower one is rounded up to the next
        cent and the upper one down, so a sub-cent bound never widens the
        range. An upper bound above the largest storable price matches
        everything from min_price up.

        Raises:
            InvalidArgumentError: If a bound is negative or min_price > max_price
        """
        low = _require_price_bound(min_price, "min_price", "Minimum price")
        high = _require_price_bound(max_price, "max_price", "Maximum price")
        if low > high:
            raise InvalidArgumentError(
                "min_price",
                "must not exceed max_price",
                "Minimum price cannot be greater than maximum price",
            )
        if low > MAX_PRICE:
            return []

        return self._store.find_by_price_range(
            low.quantize(CENT, rounding=ROUND_CEILING),
            min(high, MAX_PRICE).quantize(CENT, rounding=ROUND_FLOOR),
        )

    def total_count(self) -> int:
        """Number of books currently stored."""
        return self._store.count()

    def library_stats(self) -> LibraryStats:
        """
        Compute catalog statistics from a single snapshot of all books.

        This scans the whole catalog (O(n)) and has no side effects.
        """
        books = self._store.find_all()
        if not books:
            return LibraryStats.empty()

        years = [book.year_of_publishing for book in books]
        prices = [book.price for book in books]

        return LibraryStats(
            total_books=len(books),
            unique_authors=len({book.author for book in books}),
            earliest_year=min(years),
            latest_year=max(years),
            min_price=min(prices),
            max_price=max(prices),
        )
