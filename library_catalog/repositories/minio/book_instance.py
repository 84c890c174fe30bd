"""
Minio implementation of BookInstanceRepository.

Book instances are stored as JSON documents in the "book-instances" bucket.
"""

from library_catalog.domain import BookInstance
from library_catalog.repositories.book_instance import BookInstanceRepository
from .base import MinioDocumentRepository


class MinioBookInstanceRepository(
    MinioDocumentRepository[BookInstance], BookInstanceRepository
):
    model_class = BookInstance
    id_field = "book_instance_id"
    id_prefix = "bookinstance"
    bucket_name = "book-instances"
