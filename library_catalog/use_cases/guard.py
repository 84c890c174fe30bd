"""
Referential guard for deletes.

The store enforces no foreign keys: a book keeps its author's id even after
the author is gone. Deletes of referenced entities therefore check for
dependents first and refuse while any exist:

- an author while books name it as their author;
- a genre while books list it among their genres;
- a book while copies of it exist.

The check and the removal are separate store calls, so a dependent created
in between is not seen.
"""

import logging
from typing import Any, Awaitable, Callable, List, Sequence

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DependentsQuery = Callable[[str], Awaitable[Sequence[Any]]]


class GuardResult(BaseModel):
    """Outcome of a dependents check.

    ``blocked`` is true exactly when ``dependents`` is non-empty.
    """

    blocked: bool
    dependents: List[Any] = Field(default_factory=list)


async def can_delete(
    target_id: str, dependents_query: DependentsQuery
) -> GuardResult:
    """Check whether the entity ``target_id`` may be deleted.

    Args:
        target_id: Id of the entity about to be deleted
        dependents_query: Lookup returning the entities that reference
            ``target_id``

    Returns:
        GuardResult listing the dependents found, if any

    Raises:
        Exception: Whatever the dependents lookup raises, unchanged
    """
    dependents = list(await dependents_query(target_id))
    result = GuardResult(blocked=bool(dependents), dependents=dependents)

    if result.blocked:
        logger.info(
            "Delete blocked by dependents",
            extra={
                "target_id": target_id,
                "dependent_count": len(dependents),
            },
        )
    return result
