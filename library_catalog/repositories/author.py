"""
Author repository interface.

Authors are referenced by books through ``Book.author_id``; an author with
books must not be deleted.
"""

from typing import Protocol, runtime_checkable

from library_catalog.domain import Author
from .base import DocumentRepository


@runtime_checkable
class AuthorRepository(DocumentRepository[Author], Protocol):
    """Handles author storage and retrieval operations."""

    pass
