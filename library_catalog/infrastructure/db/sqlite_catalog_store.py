"""
SQLite implementation of the CatalogStore port.

Books live in a single table with prices kept as integer cents; this module
converts rows to Book records and backs the (name, author) uniqueness
rule with a unique index.
"""

import logging
import sqlite3
from contextlib import contextmanager
from decimal import Decimal
from pathlib import Path
from typing import Iterator, List, Optional

from library_catalog.domain.entities import Book
from library_catalog.domain.errors import (
    BookNotFoundError,
    DuplicateBookError,
    StoreFailureError,
)
from library_catalog.domain.ports import CatalogStore

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, author, year_of_publishing, price_cents"


def _fold_case(value: Optional[str]) -> Optional[str]:
    """Case folding used for every case-insensitive comparison."""
    return value.lower() if value is not None else None


class SqliteCatalogStore(CatalogStore):
    """
    Ids come from an AUTOINCREMENT primary key, so SQLite never hands out the id
    of a deleted row again.

    Prices are stored as integer cents. Case-insensitive lookups go through a
    Python-registered fold_case() function so they agree with str.lower();
    the unique index uses SQLite's built-in lower() as a backstop for writers
    that bypass the service.
    """

    def __init__(self, db_path: Path, timeout: float = 5.0) -> None:
        """
        Initialize the store with a database path
        """
        self._db_path = Path(db_path)
        self._timeout = timeout
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection with row factory."""
        conn = sqlite3.connect(str(self._db_path), timeout=self._timeout)
        conn.row_factory = sqlite3.Row
        conn.create_function("fold_case", 1, _fold_case, deterministic=True)
        return conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Run a unit of work in one transaction, closing the connection after."""
        try:
            conn = self._get_connection()
        except sqlite3.Error as e:
            logger.error(f"Could not open catalog database {self._db_path}: {e}")
            raise StoreFailureError(f"Could not open catalog database: {e}") from e

        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            logger.error(f"Database error in catalog store: {e}")
            raise StoreFailureError(f"Database error: {e}") from e
        except OverflowError as e:
            # sqlite3 raises this when binding an int beyond 64 bits
            logger.error(f"Value out of range for catalog store: {e}")
            raise StoreFailureError(f"Database error: {e}") from e
        finally:
            conn.close()

    def _init_schema(self) -> None:
        """Create the books table if it doesn't exist."""
        with self._transaction() as conn:
            conn.execute("""
            CREATE TABLE IF NOT EXISTS books (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                author TEXT NOT NULL,
                year_of_publishing INTEGER NOT NULL CHECK (year_of_publishing > 0),
                price_cents INTEGER NOT NULL CHECK (price_cents > 0)
            )
        """)

            conn.execute(
                "CREATE UNIQUE INDEX IF NOT EXISTS idx_books_name_author "
                "ON books(lower(name), lower(author))"
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_books_year ON books(year_of_publishing)"
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_books_price ON books(price_cents)"
            )
        logger.debug(f"Catalog schema ready at {self._db_path}")

    @staticmethod
    def _to_cents(price: Decimal) -> int:
        return int(price.scaleb(2))

    @staticmethod
    def _book_to_row(book: Book) -> dict:
        """Convert a Book entity to a database row dict."""
        return {
            "id": book.id,
            "name": book.name,
            "author": book.author,
            "year_of_publishing": book.year_of_publishing,
            "price_cents": SqliteCatalogStore._to_cents(book.price),
        }

    @staticmethod
    def _row_to_book(row: sqlite3.Row) -> Book:
        """Convert a database row to a Book entity."""
        return Book(
            id=row["id"],
            name=row["name"],
            author=row["author"],
            year_of_publishing=row["year_of_publishing"],
            price=Decimal(row["price_cents"]).scaleb(-2),
        )

    def _select(self, where: str = "", params: tuple = (), order_by: str = "id") -> List[Book]:
        sql = f"SELECT {_COLUMNS} FROM books"
        if where:
            sql += f" WHERE {where}"
        sql += f" ORDER BY {order_by}"

        with self._transaction() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [self._row_to_book(row) for row in rows]

    def save(self, book: Book) -> Book:
        """Insert a new book or overwrite an existing one."""
        row = self._book_to_row(book)

        with self._transaction() as conn:
            try:
                if book.id is None:
                    cursor = conn.execute("""
                        INSERT INTO books (name, author, year_of_publishing, price_cents)
                        VALUES (:name, :author, :year_of_publishing, :price_cents)
                    """, row)
                    return book.with_id(cursor.lastrowid)

                cursor = conn.execute("""
                    UPDATE books SET
                        name = :name,
                        author = :author,
                        year_of_publishing = :year_of_publishing,
                        price_cents = :price_cents
                    WHERE id = :id
                """, row)
            except sqlite3.IntegrityError as e:
                if "UNIQUE" not in str(e).upper():
                    raise
                logger.warning(f"Unique index rejected '{book.name}' by {book.author}")
                raise DuplicateBookError(book.name, book.author) from e

            if cursor.rowcount == 0:
                raise BookNotFoundError(book.id)
            return book

    def find_by_id(self, book_id: int) -> Optional[Book]:
        """Retrieve a book by its id."""
        books = self._select("id = ?", (book_id,))
        return books[0] if books else None

    def find_all(self) -> List[Book]:
        """Retrieve all books in insertion order."""
        return self._select()

    def find_all_ordered_by_year_desc(self) -> List[Book]:
        """Retrieve all books, newest first."""
        return self._select(order_by="year_of_publishing DESC, id")

    def exists_by_id(self, book_id: int) -> bool:
        """Check whether a book with this id is stored."""
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT 1 FROM books WHERE id = ?",
                (book_id,)
            ).fetchone()
        return row is not None

    def delete_by_id(self, book_id: int) -> None:
        """Delete a book from the catalog."""
        with self._transaction() as conn:
            conn.execute(
                "DELETE FROM books WHERE id = ?",
                (book_id,)
            )

    def find_by_name_containing(self, fragment: str) -> List[Book]:
        """Case-insensitive, literal substring match on the name."""
        return self._select("instr(fold_case(name), ?) > 0", (_fold_case(fragment),))

    def find_by_author_containing(self, fragment: str) -> List[Book]:
        """Case-insensitive, literal substring match on the author."""
        return self._select("instr(fold_case(author), ?) > 0", (_fold_case(fragment),))

    def find_by_year(self, year: int) -> List[Book]:
        """Books published in the given year."""
        return self._select("year_of_publishing = ?", (year,))

    def find_by_year_range(self, start_year: int, end_year: int) -> List[Book]:
        """Books published between the two years, inclusive."""
        return self._select(
            "year_of_publishing BETWEEN ? AND ?",
            (start_year, end_year),
        )

    def find_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Book]:
        """Books priced between the two bounds, inclusive."""
        return self._select(
            "price_cents BETWEEN ? AND ?",
            (self._to_cents(min_price), self._to_cents(max_price)),
        )

    def find_by_name_and_author(self, name: str, author: str) -> Optional[Book]:
        """Exact name+author match, ignoring case."""
        books = self._select(
            "fold_case(name) = ? AND fold_case(author) = ?",
            (_fold_case(name), _fold_case(author)),
        )
        return books[0] if books else None

    def count(self) -> int:
        """Get the total number of books in the catalog."""
        with self._transaction() as conn:
            result = conn.execute("SELECT COUNT(*) AS cnt FROM books").fetchone()
        return result["cnt"]
