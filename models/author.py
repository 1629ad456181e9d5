"""
models/author.py
----------------
Domain model for book authors.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Author:
    """
    Represents a book author.

    Attributes:
        first_name: Given name.
        family_name: Family name (surname).
        id: Database primary key (None for new records).
    """
    first_name: str
    family_name: str
    id: Optional[int] = None

    def natural_key(self) -> tuple[str, str]:
        """Returns the (first_name, family_name) pair that identifies an author."""
        return (self.first_name, self.family_name)

    def __str__(self) -> str:
        return f"{self.first_name} {self.family_name}"
