"""
repositories/book_repo.py
--------------------------
Data access layer for books.
Resolves each book's author and genre by natural key (find-or-create)
before writing the `book` row and its `book_author` link.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.author import Author
from models.book import Book
from models.genre import Genre
from repositories.author_repo import AuthorRepository
from repositories.genre_repo import GenreRepository
from repositories.mappers import BOOK_SELECT, map_book
from utils.logger import get_logger

logger = get_logger(__name__)


class BookRepository:
    """Repository for find/save operations on the book and book_author tables."""

    def __init__(
        self,
        author_repo: Optional[AuthorRepository] = None,
        genre_repo: Optional[GenreRepository] = None,
    ):
        self.author_repo = author_repo or AuthorRepository()
        self.genre_repo = genre_repo or GenreRepository()

    # ── CREATE ────────────────────────────────────────────

    def save(self, book: Book) -> Book:
        """
        Persist a book together with its author and genre.

        The author and genre are looked up by natural key and inserted only
        when absent. The book row and its book_author link are then written
        in a single transaction.

        Note:
            The lookup and the insert are two separate steps, so two callers
            saving the same new author at the same time can both insert it.

        Args:
            book: The Book domain object to persist.

        Returns:
            The same Book with `id`, `author.id` and `genre.id` populated.
        """
        author = self._resolve_author(book.author)
        genre = self._resolve_genre(book.genre)

        book_sql = """
            INSERT INTO book (genre_id, title, isbn, publication_year, number_of_pages, publisher)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING id;
        """
        link_sql = "INSERT INTO book_author (book_id, author_id) VALUES (%s, %s);"

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(book_sql, (
                    genre.id, book.title, book.isbn,
                    book.publication_year, book.number_of_pages, book.publisher,
                ))
                book_id = cur.fetchone()[0]
                cur.execute(link_sql, (book_id, author.id))
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add book '{book.title}': {e}")
            raise
        finally:
            release_connection(conn)

        book.id = book_id
        book.author = author
        book.genre = genre
        logger.info(f"Added book #{book.id} '{book.title}' (author #{author.id}, genre #{genre.id})")
        return book

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, book_id: int) -> Optional[Book]:
        """
        Fetch a single fully hydrated book by primary key.

        Returns:
            A Book object or None if not found.
        """
        sql = BOOK_SELECT + " WHERE b.id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (book_id,))
                row = cur.fetchone()
                return map_book(row) if row else None
        finally:
            release_connection(conn)

    def find_all(self) -> list[Book]:
        """Fetch every book, with author and genre, ordered by id."""
        sql = BOOK_SELECT + " ORDER BY b.id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [map_book(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def count(self) -> int:
        """Number of book rows."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM book;")
                return int(cur.fetchone()[0])
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _resolve_author(self, author: Author) -> Author:
        existing = self.author_repo.find_by_entity(author)
        if existing is not None:
            return existing
        return self.author_repo.save(author)

    def _resolve_genre(self, genre: Genre) -> Genre:
        existing = self.genre_repo.find_by_entity(genre)
        if existing is not None:
            return existing
        return self.genre_repo.save(genre)
