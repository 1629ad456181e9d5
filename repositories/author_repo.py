"""
repositories/author_repo.py
----------------------------
Data access layer for authors.
All SQL queries related to the `author` table live here.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.author import Author
from repositories.mappers import AUTHOR_COLUMNS, map_author
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthorRepository:
    """Repository for find/save operations on the author table."""

    # ── CREATE ────────────────────────────────────────────

    def save(self, author: Author) -> Author:
        """
        Insert a new author row.

        Args:
            author: The Author domain object to persist.

        Returns:
            The same Author with its `id` populated.
        """
        sql = """
            INSERT INTO author (first_name, family_name)
            VALUES (%s, %s)
            RETURNING id;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (author.first_name, author.family_name))
                author_id = cur.fetchone()[0]
            conn.commit()
            author.id = author_id
            logger.info(f"Added author #{author.id}: {author}")
            return author
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add author {author}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def find_by_entity(self, author: Author) -> Optional[Author]:
        """
        Look up an author by natural key (first name + family name).

        Returns:
            The stored Author or None if no row matches.
        """
        sql = (
            f"SELECT {AUTHOR_COLUMNS} FROM author "
            "WHERE first_name = %s AND family_name = %s ORDER BY id;"
        )
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, author.natural_key())
                row = cur.fetchone()
                return map_author(row) if row else None
        finally:
            release_connection(conn)

    def find_by_id(self, author_id: int) -> Optional[Author]:
        """Fetch a single author by primary key, or None."""
        sql = f"SELECT {AUTHOR_COLUMNS} FROM author WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (author_id,))
                row = cur.fetchone()
                return map_author(row) if row else None
        finally:
            release_connection(conn)

    def find_all(self) -> list[Author]:
        """Fetch every author ordered by id."""
        sql = f"SELECT {AUTHOR_COLUMNS} FROM author ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [map_author(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def count(self) -> int:
        """Number of author rows."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM author;")
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)
