"""
Minio repository implementations for the library catalog.

Each entity type lives in its own bucket as one JSON document per entity.
"""

from .author import MinioAuthorRepository
from .book import MinioBookRepository
from .book_instance import MinioBookInstanceRepository
from .client import MinioClient, create_minio_client
from .genre import MinioGenreRepository

__all__ = [
    "MinioAuthorRepository",
    "MinioBookInstanceRepository",
    "MinioBookRepository",
    "MinioClient",
    "MinioGenreRepository",
    "create_minio_client",
]
