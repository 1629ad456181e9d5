"""
models/genre.py
---------------
Domain model for book genres.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Genre:
    """
    Represents a literary genre.

    Attributes:
        name: Human-readable genre name (e.g., 'SciFi').
        code: Short genre code (e.g., 'SF').
        id: Database primary key (None for new records).
    """
    name: str
    code: str
    id: Optional[int] = None

    def natural_key(self) -> tuple[str, str]:
        """Returns the (name, code) pair that identifies a genre."""
        return (self.name, self.code)

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"
