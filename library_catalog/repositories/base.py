"""
Generic document repository protocol for catalog entities.

This module defines the DocumentRepository protocol, the entity store
contract every catalog repository satisfies. The store is document
oriented: each entity is a self-contained record keyed by an opaque id,
and references between entities are stored as ids.

All repository operations follow the same principles:

- **Domain Objects**: Methods accept and return domain objects or
  primitives, never storage-specific types.

- **Absence is not an error**: looking up a missing id returns None and
  deleting a missing id returns False. Failures of the underlying store
  propagate unchanged to the caller; nothing here retries.

- **No coordination**: the store is never locked. Callers that need a
  check-then-act sequence (such as refusing to delete an entity that is
  still referenced) accept that another request may act in between.
"""

from datetime import datetime, timezone
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from pydantic import BaseModel

# Type variable bound to Pydantic BaseModel for domain entities
T = TypeVar("T", bound=BaseModel)

Filters = Dict[str, Any]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class DuplicateEntityError(Exception):
    """Raised when inserting an entity whose id is already stored."""

    pass


def matches_filters(entity: BaseModel, filters: Optional[Filters]) -> bool:
    """Check an entity against document-store style equality filters.

    Every ``field: value`` pair must match. A list-valued field matches when
    it contains the value, so ``{"genre_ids": "genre-1"}`` selects books
    filed under that genre.
    """
    if not filters:
        return True
    for field_name, expected in filters.items():
        actual = getattr(entity, field_name, None)
        if isinstance(actual, list):
            if expected not in actual:
                return False
        elif actual != expected:
            return False
    return True


def sort_entities(entities: List[T], sort_by: Optional[str]) -> List[T]:
    """Order by insertion time, then stably by ``sort_by`` if given."""
    ordered = sorted(
        entities, key=lambda e: getattr(e, "created_at", None) or EPOCH
    )
    if sort_by:
        ordered.sort(key=lambda e: getattr(e, sort_by))
    return ordered


@runtime_checkable
class DocumentRepository(Protocol[T]):
    """Generic entity store protocol.

    Type Parameter:
        T: The domain entity type (must extend Pydantic BaseModel)
    """

    async def get(self, entity_id: str) -> Optional[T]:
        """Retrieve an entity by ID.

        Args:
            entity_id: Unique entity identifier

        Returns:
            Entity if found, None otherwise
        """
        ...

    async def find(
        self, filters: Optional[Filters] = None, sort_by: Optional[str] = None
    ) -> List[T]:
        """Retrieve every entity matching the filters.

        Args:
            filters: Field/value equality filters, None for all entities
            sort_by: Optional field to sort by; ties keep insertion order

        Returns:
            Matching entities, in insertion order unless sorted
        """
        ...

    async def count(self, filters: Optional[Filters] = None) -> int:
        """Count the entities matching the filters."""
        ...

    async def insert(self, entity: T) -> str:
        """Store a new entity.

        Args:
            entity: Complete entity carrying an id from generate_id()

        Returns:
            The stored entity's id

        Raises:
            DuplicateEntityError: If an entity with the same id exists
        """
        ...

    async def update(self, entity_id: str, entity: T) -> Optional[T]:
        """Replace every mutable field of a stored entity.

        The stored id and creation timestamp are kept; updated_at is
        refreshed.

        Args:
            entity_id: Id of the entity to replace
            entity: Entity carrying the new field values

        Returns:
            The updated entity, or None if no entity has that id
        """
        ...

    async def delete(self, entity_id: str) -> bool:
        """Remove an entity.

        Returns:
            True if an entity was removed, False if none had that id
        """
        ...

    async def generate_id(self) -> str:
        """Generate a unique entity identifier."""
        ...
