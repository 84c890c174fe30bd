"""
Memory implementation of BookInstanceRepository.
"""

from library_catalog.domain import BookInstance
from library_catalog.repositories.book_instance import BookInstanceRepository
from .base import MemoryDocumentRepository


class MemoryBookInstanceRepository(
    MemoryDocumentRepository[BookInstance], BookInstanceRepository
):
    """Book instances kept in a dictionary keyed by book_instance_id."""

    model_class = BookInstance
    id_field = "book_instance_id"
    id_prefix = "bookinstance"
