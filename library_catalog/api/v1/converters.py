"""
Mapping from catalog domain objects to the HTTP response models.
"""

from dataclasses import asdict

from library_catalog.domain import entities as domain
from library_catalog.domain import value_objects as domain_vo
from library_catalog.api.v1 import schemas as api


def domain_book_to_api(book: domain.Book) -> api.Book:
    """
    Build the response model for a stored book.

    Args:
        book: A stored book (id is set)

    Returns:
        API Book model
    """
    return api.Book(**asdict(book))


def domain_stats_to_api(stats: domain_vo.LibraryStats) -> api.LibraryStats:
    """
    Convert a domain LibraryStats value object to an API LibraryStats model.
    """
    return api.LibraryStats(empty=stats.is_empty(), **asdict(stats))
