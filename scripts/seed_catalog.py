#!/usr/bin/env python3
"""
Catalog Seeding Script.

This script loads the sample books into the catalog database when it is
empty. Running it against a catalog that already has books does nothing.

Usage:
    python -m scripts.seed_catalog --db-path data/catalog.db
"""

import argparse
import logging
import sys
from pathlib import Path

from library_catalog.config import Settings, configure_logging
from library_catalog.domain.errors import StoreFailureError
from library_catalog.domain.services import CatalogService
from library_catalog.infrastructure.db import SqliteCatalogStore
from library_catalog.seed import seed_sample_books

logger = logging.getLogger(__name__)


def main(db_path: Path) -> int:
    """
    Main entry point for the seeding script.

    Args:
        db_path: SQLite catalog file (created if missing)

    Returns:
        Number of books inserted
    """
    logger.info(f"Seeding catalog at {db_path}")

    try:
        service = CatalogService(SqliteCatalogStore(db_path))
        inserted = seed_sample_books(service)
    except StoreFailureError as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)

    logger.info(f"Done: {inserted} books inserted, {service.total_count()} in catalog")
    return inserted


if __name__ == "__main__":
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Load sample books into an empty catalog")
    parser.add_argument(
        "--db-path", "-d",
        type=Path,
        default=settings.db_path,
        help=f"SQLite catalog file (default: {settings.db_path})"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level (default: INFO)"
    )

    args = parser.parse_args()
    configure_logging(args.log_level)
    main(args.db_path)
