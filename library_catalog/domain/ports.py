"""
Storage contract the catalog service is written against.

CatalogStore lists every lookup the service needs as an explicit method.
SqliteCatalogStore implements it for real use, and the service tests use a
dictionary-backed fake.
"""

from decimal import Decimal
from typing import List, Optional, Protocol

from .entities import Book


class CatalogStore(Protocol):
    """
    Port for persisting and querying books.

    The store owns id assignment and durable storage. It does not apply
    business rules beyond what the storage engine guarantees on its own.

    Implementations should handle:
    - Assigning ids that are never reused after a delete
    - Case-insensitive matching for name/author lookups
    - Wrapping engine errors in StoreFailureError
    """

    def save(self, book: Book) -> Book:
        """
        Persist a book.

        A book without id is inserted and returned with its new id. A book
        with an id overwrites the stored row with that id.

        Args:
            book: Book to insert (id None) or overwrite (id set)

        Returns:
            The stored book, carrying its id

        Raises:
            BookNotFoundError: If the book has an id that is not stored
            DuplicateBookError: If the storage engine rejects the name+author pair
            StoreFailureError: If a database error occurs
        """
        ...

    def find_by_id(self, book_id: int) -> Optional[Book]:
        """
        Retrieve a book by its id.

        Returns:
            The stored book, or None
        """
        ...

    def find_all(self) -> List[Book]:
        """
        Retrieve all books in insertion order.
        """
        ...

    def find_all_ordered_by_year_desc(self) -> List[Book]:
        """
        Retrieve all books, newest year of publishing first.
        """
        ...

    def exists_by_id(self, book_id: int) -> bool:
        """
        Check whether a book with this id is stored.
        """
        ...

    def delete_by_id(self, book_id: int) -> None:
        """
        Delete the book with this id. Deleting a missing id is a no-op.
        """
        ...

    def find_by_name_containing(self, fragment: str) -> List[Book]:
        """
        Case-insensitive substring search over book names.

        The fragment is matched literally (no wildcard characters).
        """
        ...

    def find_by_author_containing(self, fragment: str) -> List[Book]:
        """
        Case-insensitive substring search over author names.
        """
        ...

    def find_by_year(self, year: int) -> List[Book]:
        """
        Books published exactly in the given year.
        """
        ...

    def find_by_year_range(self, start_year: int, end_year: int) -> List[Book]:
        """
        Books published between start_year and end_year, both inclusive.
        """
        ...

    def find_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Book]:
        """
        Books priced between min_price and max_price, both inclusive.
        """
        ...

    def find_by_name_and_author(self, name: str, author: str) -> Optional[Book]:
        """
        Find the book holding exactly this name and author, ignoring case.

        Returns:
            The stored book, or None
        """
        ...

    def count(self) -> int:
        """
        Number of stored books.
        """
        ...
