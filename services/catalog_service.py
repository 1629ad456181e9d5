"""
services/catalog_service.py
----------------------------
Business logic for the book catalog.
Builds domain objects from plain fields, validates them and
formats repository results for display.
"""

from repositories.author_repo import AuthorRepository
from repositories.book_repo import BookRepository
from repositories.genre_repo import GenreRepository
from models.author import Author
from models.book import Book
from models.genre import Genre
from utils.logger import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Handles catalog use cases on top of the repositories.

    Workflow for adding a book:
        1. Validate the raw fields.
        2. Build the Book, Author and Genre objects.
        3. Persist via the BookRepository (find-or-create author/genre).
        4. Return a user-friendly confirmation.
    """

    def __init__(self):
        self.author_repo = AuthorRepository()
        self.genre_repo = GenreRepository()
        self.book_repo = BookRepository(self.author_repo, self.genre_repo)

    def add_book(
        self,
        title: str,
        isbn: str,
        publication_year: int,
        number_of_pages: int,
        publisher: str,
        author_first_name: str,
        author_family_name: str,
        genre_name: str,
        genre_code: str,
    ) -> str:
        """
        Validate the fields and save a new book.

        Raises:
            ValueError: If a required field is blank or a number is negative.

        Returns:
            Confirmation message including the new book id.
        """
        required = {
            "title": title,
            "author_first_name": author_first_name,
            "author_family_name": author_family_name,
            "genre_name": genre_name,
            "genre_code": genre_code,
        }
        for field_name, value in required.items():
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"'{field_name}' must not be empty.")
        if publication_year < 0:
            raise ValueError("'publication_year' must not be negative.")
        if number_of_pages < 0:
            raise ValueError("'number_of_pages' must not be negative.")

        book = Book(
            title=title.strip(),
            isbn=isbn,
            publication_year=publication_year,
            number_of_pages=number_of_pages,
            publisher=publisher,
            author=Author(first_name=author_first_name.strip(), family_name=author_family_name.strip()),
            genre=Genre(name=genre_name.strip(), code=genre_code.strip()),
        )
        saved = self.book_repo.save(book)
        return f"Saved book #{saved.id}: {saved}"

    def list_books(self) -> str:
        """One line per book, or a notice when the catalog is empty."""
        books = self.book_repo.find_all()
        if not books:
            return "The catalog is empty."
        lines = [f"Catalog ({len(books)} books):"]
        for b in books:
            lines.append(f"  #{b.id} {b}")
        return "\n".join(lines)

    def describe_book(self, book_id: int) -> str:
        """Detailed view of a single book."""
        book = self.book_repo.find_by_id(book_id)
        if book is None:
            return f"Book #{book_id} not found."
        return (
            f"#{book.id} {book.title}\n"
            f"  Author:    {book.author}\n"
            f"  Genre:     {book.genre}\n"
            f"  ISBN:      {book.isbn}\n"
            f"  Publisher: {book.publisher} ({book.publication_year})\n"
            f"  Pages:     {book.number_of_pages}"
        )

    def get_stats(self) -> dict:
        """
        Row counts for the catalog tables.

        Returns:
            Dict with keys 'books', 'authors', 'genres'.
        """
        return {
            "books": self.book_repo.count(),
            "authors": self.author_repo.count(),
            "genres": self.genre_repo.count(),
        }
