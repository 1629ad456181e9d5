"""
models/book.py
--------------
Domain model for catalog books.
"""

from dataclasses import dataclass
from typing import Optional

from models.author import Author
from models.genre import Genre


@dataclass
class Book:
    """
    Represents a single catalog book with its author and genre.

    Attributes:
        title: Book title.
        isbn: ISBN as printed on the book.
        publication_year: Year of publication.
        number_of_pages: Page count.
        publisher: Publishing house.
        author: The book's author (resolved by natural key on save).
        genre: The book's genre (resolved by natural key on save).
        id: Database primary key (None for new records).
    """
    title: str
    isbn: str
    publication_year: int
    number_of_pages: int
    publisher: str
    author: Author
    genre: Genre
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.title} by {self.author} [{self.genre.code}], {self.publisher} {self.publication_year}"
