"""
Minio implementation of BookRepository.

Books are stored as JSON documents in the "books" bucket, with the author
and genres kept as id references.
"""

from library_catalog.domain import Book
from library_catalog.repositories.book import BookRepository
from .base import MinioDocumentRepository


class MinioBookRepository(MinioDocumentRepository[Book], BookRepository):
    model_class = Book
    id_field = "book_id"
    id_prefix = "book"
    bucket_name = "books"
