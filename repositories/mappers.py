"""
repositories/mappers.py
-----------------------
Row mappers: turn a single result row (tuple) into a typed domain object.
Column order is fixed by the *_COLUMNS constants, which every query
that feeds a mapper must select in exactly that order.
"""

from models.author import Author
from models.book import Book
from models.genre import Genre

AUTHOR_COLUMNS = "id, first_name, family_name"
GENRE_COLUMNS = "id, name, code"

# Joined book row: book fields, then genre fields, then author fields.
BOOK_SELECT = """
    SELECT
        b.id,
        b.title,
        b.isbn,
        b.publication_year,
        b.number_of_pages,
        b.publisher,
        g.id AS genre_id,
        g.name AS genre_name,
        g.code AS genre_code,
        a.id AS author_id,
        a.first_name,
        a.family_name
    FROM book b
    JOIN genre g ON g.id = b.genre_id
    JOIN book_author b_a ON b_a.book_id = b.id
    JOIN author a ON a.id = b_a.author_id
"""

_BOOK_WIDTH = 6
_GENRE_WIDTH = 3


def map_author(row: tuple, offset: int = 0) -> Author:
    """Convert an (id, first_name, family_name) row slice to an Author."""
    return Author(
        id=int(row[offset]),
        first_name=row[offset + 1],
        family_name=row[offset + 2],
    )


def map_genre(row: tuple, offset: int = 0) -> Genre:
    """Convert an (id, name, code) row slice to a Genre."""
    return Genre(
        id=int(row[offset]),
        name=row[offset + 1],
        code=row[offset + 2],
    )


def map_book(row: tuple) -> Book:
    """Convert a joined BOOK_SELECT row to a fully hydrated Book."""
    return Book(
        id=int(row[0]),
        title=row[1],
        isbn=row[2],
        publication_year=_to_int(row[3]),
        number_of_pages=_to_int(row[4]),
        publisher=row[5],
        genre=map_genre(row, _BOOK_WIDTH),
        author=map_author(row, _BOOK_WIDTH + _GENRE_WIDTH),
    )


def _to_int(value):
    return int(value) if value is not None else None
