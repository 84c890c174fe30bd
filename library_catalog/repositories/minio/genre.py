"""
Minio implementation of GenreRepository.

Genres are stored as JSON documents in the "genres" bucket.
"""

from typing import Optional

from library_catalog.domain import Genre
from library_catalog.repositories.genre import GenreRepository
from .base import MinioDocumentRepository


class MinioGenreRepository(MinioDocumentRepository[Genre], GenreRepository):
    model_class = Genre
    id_field = "genre_id"
    id_prefix = "genre"
    bucket_name = "genres"

    async def find_by_name(self, name: str) -> Optional[Genre]:
        """Retrieve the first genre with exactly this name."""
        matches = await self.find({"name": name})
        return matches[0] if matches else None
