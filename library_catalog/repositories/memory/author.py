"""
Memory implementation of AuthorRepository.
"""

from library_catalog.domain import Author
from library_catalog.repositories.author import AuthorRepository
from .base import MemoryDocumentRepository


class MemoryAuthorRepository(MemoryDocumentRepository[Author], AuthorRepository):
    """Authors kept in a dictionary keyed by author_id."""

    model_class = Author
    id_field = "author_id"
    id_prefix = "author"
