"""
Tool adapter over the catalog service.

Each BookTools method is one tool: typed arguments in, human-readable text
out. Core failures never escape a tool; they come back as "Error: ..." text
so a calling agent can show them as-is.
"""

import functools
import logging
from decimal import Decimal
from typing import Callable, Iterable, List, Optional

from library_catalog.domain.entities import Book
from library_catalog.domain.errors import CatalogError, InvalidArgumentError
from library_catalog.domain.services import CatalogService

logger = logging.getLogger(__name__)


def _money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def _book_line(book: Book, with_year: bool = True) -> str:
    line = f"ID: {book.id} | '{book.name}' by {book.author}"
    if with_year:
        line += f" | Year: {book.year_of_publishing}"
    return f"{line} | Price: {_money(book.price)}"


def _listing(header: str, books: Iterable[Book], footer: str, with_year: bool = True) -> str:
    lines: List[str] = [header]
    lines.extend(_book_line(book, with_year) for book in books)
    return "\n".join(lines) + f"\n\n{footer}"


def tool_errors(action: str) -> Callable[[Callable[..., str]], Callable[..., str]]:
    """
    Turn catalog errors raised by a tool into text.

    Validation failures read "Error: <message>"; every other catalog error
    reads "Error <action>: <message>".
    """

    def decorator(func: Callable[..., str]) -> Callable[..., str]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> str:
            try:
                return func(*args, **kwargs)
            except InvalidArgumentError as e:
                logger.info(f"Tool {func.__name__} rejected arguments: {e.message}")
                return f"Error: {e.message}"
            except CatalogError as e:
                logger.warning(f"Tool {func.__name__} failed ({e.kind.value}): {e.message}")
                return f"Error {action}: {e.message}"

        return wrapper

    return decorator


class BookTools:
    """Library tools backed by a CatalogService."""

    def __init__(self, service: CatalogService) -> None:
        self._service = service

    @tool_errors("adding book")
    def add_book(
        self, book_name: str, author: str, year_of_publishing: int, price: Decimal
    ) -> str:
        """Add a new book to the library"""
        book = self._service.add_book(book_name, author, year_of_publishing, price)
        return (
            f"Successfully added book: '{book.name}' by {book.author} "
            f"(ID: {book.id}, Year: {book.year_of_publishing}, Price: {_money(book.price)})"
        )

    @tool_errors("removing book")
    def remove_book(self, book_id: int) -> str:
        """Remove a book from the library by ID"""
        book = self._service.get_book(book_id)
        if book is None:
            return f"Error: Book with ID {book_id} not found"

        if not self._service.delete_book(book_id):
            return f"Error: Failed to remove book with ID {book_id}"

        return f"Successfully removed book: '{book.name}' by {book.author} (ID: {book_id})"

    @tool_errors("updating book")
    def update_book(
        self,
        book_id: int,
        book_name: str,
        author: str,
        year_of_publishing: int,
        price: Decimal,
    ) -> str:
        """Update an existing book in the library"""
        book = self._service.update_book(book_id, book_name, author, year_of_publishing, price)
        return (
            f"Successfully updated book: '{book.name}' by {book.author} "
            f"(ID: {book.id}, Year: {book.year_of_publishing}, Price: {_money(book.price)})"
        )

    @tool_errors("retrieving books")
    def get_all_books(self) -> str:
        """Get all books in the library"""
        books = self._service.all_books()
        if not books:
            return "No books found in the library"
        return _listing("Books in the library:", books, f"Total books: {len(books)}")

    @tool_errors("retrieving book")
    def get_book_by_id(self, book_id: int) -> str:
        """Get a specific book by its ID"""
        book: Optional[Book] = self._service.get_book(book_id)
        if book is None:
            return f"Book with ID {book_id} not found"

        return (
            "Book Details:\n"
            f"ID: {book.id}\n"
            f"Title: '{book.name}'\n"
            f"Author: {book.author}\n"
            f"Year: {book.year_of_publishing}\n"
            f"Price: {_money(book.price)}"
        )

    @tool_errors("searching books")
    def search_books_by_name(self, book_name: str) -> str:
        """Search books by book name (partial match)"""
        books = self._service.search_by_name(book_name)
        if not books:
            return f"No books found with name containing: {book_name}"
        return _listing(f"Books matching '{book_name}':", books, f"Found {len(books)} books")

    @tool_errors("searching books")
    def search_books_by_author(self, author: str) -> str:
        """Search books by author name (partial match)"""
        books = self._service.search_by_author(author)
        if not books:
            return f"No books found by author containing: {author}"
        return _listing(
            f"Books by authors matching '{author}':", books, f"Found {len(books)} books"
        )

    @tool_errors("retrieving books")
    def get_books_by_year(self, year: int) -> str:
        """Get books published in a specific year"""
        books = self._service.books_by_year(year)
        if not books:
            return f"No books found published in year: {year}"
        return _listing(
            f"Books published in {year}:", books, f"Found {len(books)} books", with_year=False
        )

    @tool_errors("retrieving books")
    def get_books_by_year_range(self, start_year: int, end_year: int) -> str:
        """Get books published between two years (inclusive)"""
        books = self._service.books_by_year_range(start_year, end_year)
        if not books:
            return f"No books found published between {start_year} and {end_year}"
        return _listing(
            f"Books published between {start_year} and {end_year}:",
            books,
            f"Found {len(books)} books",
        )

    @tool_errors("retrieving books")
    def get_books_by_price_range(self, min_price: Decimal, max_price: Decimal) -> str:
        """Get books within a specific price range"""
        books = self._service.books_by_price_range(min_price, max_price)
        price_range = f"{_money(Decimal(min_price))} - {_money(Decimal(max_price))}"
        if not books:
            return f"No books found in price range {price_range}"
        return _listing(
            f"Books in price range {price_range}:", books, f"Found {len(books)} books"
        )

    @tool_errors("retrieving library statistics")
    def get_library_stats(self) -> str:
        """Get statistics about the library"""
        stats = self._service.library_stats()
        if stats.is_empty():
            return "Library is empty - no books available"

        return (
            "Library Statistics:\n"
            f"Total Books: {stats.total_books}\n"
            f"Unique Authors: {stats.unique_authors}\n"
            f"Publication Years: {stats.earliest_year} - {stats.latest_year}\n"
            f"Price Range: {_money(stats.min_price)} - {_money(stats.max_price)}\n"
        )
