"""
Memory implementation of GenreRepository.
"""

import logging
from typing import Optional

from library_catalog.domain import Genre
from library_catalog.repositories.genre import GenreRepository
from .base import MemoryDocumentRepository

logger = logging.getLogger(__name__)


class MemoryGenreRepository(MemoryDocumentRepository[Genre], GenreRepository):
    """Genres kept in a dictionary keyed by genre_id."""

    model_class = Genre
    id_field = "genre_id"
    id_prefix = "genre"

    async def find_by_name(self, name: str) -> Optional[Genre]:
        """Retrieve the first genre with exactly this name."""
        matches = await self.find({"name": name})
        logger.debug(
            "MemoryGenreRepository: Lookup by name",
            extra={"genre_name": name, "found": bool(matches)},
        )
        return matches[0] if matches else None
