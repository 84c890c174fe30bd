"""
Memory repository implementations for the library catalog.

These implementations use Python dictionaries for storage and are ideal for
testing scenarios where external dependencies should be avoided. They are
also the default development backend.
"""

from .author import MemoryAuthorRepository
from .book import MemoryBookRepository
from .book_instance import MemoryBookInstanceRepository
from .genre import MemoryGenreRepository

__all__ = [
    "MemoryAuthorRepository",
    "MemoryBookInstanceRepository",
    "MemoryBookRepository",
    "MemoryGenreRepository",
]
