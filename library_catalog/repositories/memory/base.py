"""
Generic in-memory document repository.

This module provides the dictionary-backed implementation shared by every
memory repository. Entities are stored as deep copies keyed by their id, so
that callers mutating a returned object never change what is stored, the
same isolation a real document store gives.

The implementation uses Python dictionaries, making it ideal for testing
scenarios where external dependencies should be avoided. All operations are
still async to maintain interface compatibility.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import ClassVar, Dict, Generic, List, Optional, Type

from library_catalog.repositories.base import (
    DuplicateEntityError,
    Filters,
    T,
    matches_filters,
    sort_entities,
)

logger = logging.getLogger(__name__)


class MemoryDocumentRepository(Generic[T]):
    """
    Memory implementation of the DocumentRepository protocol.

    Subclasses set ``model_class``, the name of the entity's id field and
    the prefix used for generated ids.
    """

    model_class: ClassVar[Type]
    id_field: ClassVar[str]
    id_prefix: ClassVar[str]

    def __init__(self) -> None:
        """Initialize repository with empty in-memory storage."""
        self._name = type(self).__name__
        logger.debug(f"Initializing {self._name}")

        # Storage dictionary, insertion ordered
        self._entities: Dict[str, T] = {}

    def _entity_id(self, entity: T) -> str:
        return getattr(entity, self.id_field)

    async def get(self, entity_id: str) -> Optional[T]:
        """Retrieve an entity by ID."""
        logger.debug(
            f"{self._name}: Attempting to retrieve entity",
            extra={self.id_field: entity_id},
        )

        entity = self._entities.get(entity_id)
        if entity is None:
            logger.debug(
                f"{self._name}: Entity not found",
                extra={self.id_field: entity_id},
            )
            return None

        return entity.model_copy(deep=True)

    async def find(
        self, filters: Optional[Filters] = None, sort_by: Optional[str] = None
    ) -> List[T]:
        """Retrieve every entity matching the filters."""
        found = [
            entity.model_copy(deep=True)
            for entity in self._entities.values()
            if matches_filters(entity, filters)
        ]

        logger.debug(
            f"{self._name}: Find completed",
            extra={
                "filters": filters,
                "sort_by": sort_by,
                "count": len(found),
            },
        )
        return sort_entities(found, sort_by)

    async def count(self, filters: Optional[Filters] = None) -> int:
        """Count the entities matching the filters."""
        return sum(
            1
            for entity in self._entities.values()
            if matches_filters(entity, filters)
        )

    async def insert(self, entity: T) -> str:
        """Store a new entity."""
        entity_id = self._entity_id(entity)
        if entity_id in self._entities:
            raise DuplicateEntityError(
                f"{self.model_class.__name__} {entity_id} already exists"
            )

        self._entities[entity_id] = entity.model_copy(deep=True)

        logger.info(
            f"{self._name}: Entity inserted successfully",
            extra={self.id_field: entity_id},
        )
        return entity_id

    async def update(self, entity_id: str, entity: T) -> Optional[T]:
        """Replace every mutable field of a stored entity."""
        existing = self._entities.get(entity_id)
        if existing is None:
            logger.debug(
                f"{self._name}: Entity to update not found",
                extra={self.id_field: entity_id},
            )
            return None

        updated = entity.model_copy(
            update={
                self.id_field: entity_id,
                "created_at": existing.created_at,
                "updated_at": datetime.now(timezone.utc),
            },
            deep=True,
        )
        self._entities[entity_id] = updated

        logger.info(
            f"{self._name}: Entity updated successfully",
            extra={
                self.id_field: entity_id,
                "updated_at": updated.updated_at.isoformat(),
            },
        )
        return updated.model_copy(deep=True)

    async def delete(self, entity_id: str) -> bool:
        """Remove an entity."""
        removed = self._entities.pop(entity_id, None) is not None

        logger.info(
            f"{self._name}: Delete completed",
            extra={self.id_field: entity_id, "removed": removed},
        )
        return removed

    async def generate_id(self) -> str:
        """Generate a unique entity identifier."""
        entity_id = f"{self.id_prefix}-{uuid.uuid4()}"

        logger.debug(
            f"{self._name}: Generated ID",
            extra={self.id_field: entity_id},
        )
        return entity_id
