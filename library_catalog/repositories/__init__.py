"""
Repository protocols for the library catalog entity store.

Concrete implementations live in the ``memory`` (dictionaries, for tests
and development) and ``minio`` (JSON documents in object storage)
subpackages.
"""

from .author import AuthorRepository
from .base import DocumentRepository, DuplicateEntityError
from .book import BookRepository
from .book_instance import BookInstanceRepository
from .genre import GenreRepository

__all__ = [
    "AuthorRepository",
    "BookInstanceRepository",
    "BookRepository",
    "DocumentRepository",
    "DuplicateEntityError",
    "GenreRepository",
]
