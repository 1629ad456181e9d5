"""
db/init_db.py
-------------
Creates the catalog schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Authors: deduplicated by (first_name, family_name)
CREATE TABLE IF NOT EXISTS author (
    id              SERIAL PRIMARY KEY,
    first_name      VARCHAR(255) NOT NULL,
    family_name     VARCHAR(255) NOT NULL
);

-- Genres: deduplicated by (name, code)
CREATE TABLE IF NOT EXISTS genre (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    code            VARCHAR(50) NOT NULL
);

-- Books: each book references exactly one genre
CREATE TABLE IF NOT EXISTS book (
    id                  SERIAL PRIMARY KEY,
    genre_id            INT NOT NULL REFERENCES genre(id),
    title               VARCHAR(255) NOT NULL,
    isbn                VARCHAR(32),
    publication_year    INT,
    number_of_pages     INT,
    publisher           VARCHAR(255)
);

-- Book/author link table
CREATE TABLE IF NOT EXISTS book_author (
    book_id         INT NOT NULL REFERENCES book(id),
    author_id       INT NOT NULL REFERENCES author(id),
    PRIMARY KEY (book_id, author_id)
);

-- Indexes for natural-key lookups
CREATE INDEX IF NOT EXISTS idx_author_name ON author(first_name, family_name);
CREATE INDEX IF NOT EXISTS idx_genre_name_code ON genre(name, code);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
    finally:
        close_pool()
    print("Database schema created successfully.")
