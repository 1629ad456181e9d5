"""
main.py
-------
Entry point for the book catalog.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Log catalog statistics and the current book listing.
    - Close the pool on exit.
"""

from db.connection import init_pool, close_pool
from db.init_db import create_tables
from services.catalog_service import CatalogService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize the database and report on the catalog."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    try:
        create_tables()

        # ── 2. Report ─────────────────────────────────────
        service = CatalogService()
        stats = service.get_stats()
        logger.info(
            f"Catalog holds {stats['books']} books, "
            f"{stats['authors']} authors, {stats['genres']} genres."
        )
        logger.info(service.list_books())
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    main()
