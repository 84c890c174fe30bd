"""
Memory implementation of BookRepository.
"""

from library_catalog.domain import Book
from library_catalog.repositories.book import BookRepository
from .base import MemoryDocumentRepository


class MemoryBookRepository(MemoryDocumentRepository[Book], BookRepository):
    """Books kept in a dictionary keyed by book_id."""

    model_class = Book
    id_field = "book_id"
    id_prefix = "book"
