"""
repositories/genre_repo.py
---------------------------
Data access layer for genres.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.genre import Genre
from repositories.mappers import GENRE_COLUMNS, map_genre
from utils.logger import get_logger

logger = get_logger(__name__)


class GenreRepository:
    """Repository for find/save operations on the genre table."""

    def save(self, genre: Genre) -> Genre:
        """Insert a new genre and populate its generated `id`."""
        sql = "INSERT INTO genre (name, code) VALUES (%s, %s) RETURNING id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (genre.name, genre.code))
                genre_id = cur.fetchone()[0]
            conn.commit()
            genre.id = genre_id
            logger.info(f"Added genre #{genre.id}: {genre}")
            return genre
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add genre {genre}: {e}")
            raise
        finally:
            release_connection(conn)

    def find_by_entity(self, genre: Genre) -> Optional[Genre]:
        """Look up a genre by natural key (name + code). Returns None on a miss."""
        sql = f"SELECT {GENRE_COLUMNS} FROM genre WHERE name = %s AND code = %s ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, genre.natural_key())
                row = cur.fetchone()
                return map_genre(row) if row else None
        finally:
            release_connection(conn)

    def find_by_id(self, genre_id: int) -> Optional[Genre]:
        """Fetch a single genre by primary key, or None."""
        sql = f"SELECT {GENRE_COLUMNS} FROM genre WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (genre_id,))
                row = cur.fetchone()
                return map_genre(row) if row else None
        finally:
            release_connection(conn)

    def find_all(self) -> list[Genre]:
        """Fetch every genre ordered by id."""
        sql = f"SELECT {GENRE_COLUMNS} FROM genre ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [map_genre(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def count(self) -> int:
        """Number of genre rows."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM genre;")
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)
