"""
Sample data for a fresh catalog.

Seeding is a bootstrap concern: it calls CatalogService.add_book from the
outside and only runs when the catalog is empty.
"""

import logging
from decimal import Decimal
from typing import List, Tuple

from library_catalog.domain.errors import CatalogError
from library_catalog.domain.services import CatalogService

logger = logging.getLogger(__name__)

# (name, author, year_of_publishing, price)
SAMPLE_BOOKS: List[Tuple[str, str, int, Decimal]] = [
    # Classic Literature
    ("To Kill a Mockingbird", "Harper Lee", 1960, Decimal("12.99")),
    ("1984", "George Orwell", 1949, Decimal("13.99")),
    ("Pride and Prejudice", "Jane Austen", 1813, Decimal("10.99")),
    ("The Great Gatsby", "F. Scott Fitzgerald", 1925, Decimal("11.99")),
    # Science Fiction
    ("Dune", "Frank Herbert", 1965, Decimal("16.99")),
    ("Foundation", "Isaac Asimov", 1951, Decimal("14.99")),
    ("The Hitchhiker's Guide to the Galaxy", "Douglas Adams", 1979, Decimal("12.99")),
    ("Neuromancer", "William Gibson", 1984, Decimal("15.99")),
    # Fantasy
    ("The Lord of the Rings", "J.R.R. Tolkien", 1954, Decimal("18.99")),
    ("A Game of Thrones", "George R.R. Martin", 1996, Decimal("16.99")),
    ("The Name of the Wind", "Patrick Rothfuss", 2007, Decimal("17.99")),
    # Programming & Technology
    ("Clean Code", "Robert C. Martin", 2008, Decimal("45.99")),
    ("Design Patterns", "Gang of Four", 1994, Decimal("54.99")),
    ("Effective Java", "Joshua Bloch", 2017, Decimal("49.99")),
    ("Spring in Action", "Craig Walls", 2020, Decimal("52.99")),
    # Non-Fiction
    ("Sapiens", "Yuval Noah Harari", 2011, Decimal("19.99")),
    ("The Lean Startup", "Eric Ries", 2011, Decimal("24.99")),
    ("Thinking, Fast and Slow", "Daniel Kahneman", 2011, Decimal("22.99")),
    # Recent Publications
    ("Klara and the Sun", "Kazuo Ishiguro", 2021, Decimal("26.99")),
    ("The Thursday Murder Club", "Richard Osman", 2020, Decimal("15.99")),
    ("Project Hail Mary", "Andy Weir", 2021, Decimal("27.99")),
]


def seed_sample_books(service: CatalogService) -> int:
    """
    Load SAMPLE_BOOKS into an empty catalog.

    A book that fails to insert is logged and skipped; the rest still go in.

    Args:
        service: The catalog service to add books through

    Returns:
        Number of books inserted (0 if the catalog already had books)
    """
    if service.total_count() > 0:
        logger.info("Catalog already has books, skipping sample data")
        return 0

    inserted = 0
    for name, author, year, price in SAMPLE_BOOKS:
        try:
            service.add_book(name, author, year, price)
            inserted += 1
        except CatalogError as e:
            logger.error(f"Could not add sample book '{name}': {e}")

    logger.info(f"Sample books loaded: {inserted} (catalog total: {service.total_count()})")
    return inserted
