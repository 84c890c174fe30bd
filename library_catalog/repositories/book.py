"""
Book repository interface.

Books are the dependents of both authors (``author_id``) and genres
(``genre_ids``), and are themselves referenced by book instances.
"""

from typing import Protocol, runtime_checkable

from library_catalog.domain import Book
from .base import DocumentRepository


@runtime_checkable
class BookRepository(DocumentRepository[Book], Protocol):
    """Handles book storage and retrieval operations."""

    pass
