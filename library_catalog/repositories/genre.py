"""
Genre repository interface.

Genre names are logically unique, so besides the generic document
operations this repository offers a lookup by name, used by the create
workflow to avoid inserting duplicates.
"""

from typing import Optional, Protocol, runtime_checkable

from library_catalog.domain import Genre
from .base import DocumentRepository


@runtime_checkable
class GenreRepository(DocumentRepository[Genre], Protocol):
    """Handles genre storage and retrieval operations."""

    async def find_by_name(self, name: str) -> Optional[Genre]:
        """Retrieve the first genre with exactly this name.

        Args:
            name: Sanitized genre name

        Returns:
            Genre if one has this name, None otherwise
        """
        ...
