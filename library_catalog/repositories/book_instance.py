"""
BookInstance repository interface.

Book instances reference books through ``BookInstance.book_id``. Nothing
references a book instance.
"""

from typing import Protocol, runtime_checkable

from library_catalog.domain import BookInstance
from .base import DocumentRepository


@runtime_checkable
class BookInstanceRepository(DocumentRepository[BookInstance], Protocol):
    """Handles book instance (physical copy) storage and retrieval."""

    pass
