"""
Minio implementation of AuthorRepository.

Authors are stored as JSON documents in the "authors" bucket.
"""

from library_catalog.domain import Author
from library_catalog.repositories.author import AuthorRepository
from .base import MinioDocumentRepository


class MinioAuthorRepository(MinioDocumentRepository[Author], AuthorRepository):
    model_class = Author
    id_field = "author_id"
    id_prefix = "author"
    bucket_name = "authors"
