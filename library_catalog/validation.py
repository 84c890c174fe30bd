"""
Runtime validation of architectural contracts.

Use cases receive their repositories from the outside (the API dependency
container, the CLI, or tests). They validate them here against the
``@runtime_checkable`` repository protocols so that a mis-wired dependency
fails at construction time instead of on the first request.
"""

import logging
from typing import Type, TypeVar

logger = logging.getLogger(__name__)

P = TypeVar("P")


class RepositoryValidationError(Exception):
    """A use case was given an object that is not a catalog repository."""


def validate_repository_protocol(
    repository: object, protocol: Type[P]
) -> None:
    """
    Check that ``repository`` structurally implements ``protocol``.

    Only method presence is checked, which is what ``isinstance`` does for a
    runtime-checkable protocol; signatures are left to the type checker.

    Raises:
        RepositoryValidationError: If a protocol method is missing

    Example:
        >>> from library_catalog.repositories import AuthorRepository
        >>> from library_catalog.repositories.memory import (
        ...     MemoryAuthorRepository,
        ... )
        >>> validate_repository_protocol(
        ...     MemoryAuthorRepository(), AuthorRepository
        ... )
    """
    if not isinstance(repository, protocol):
        error_message = (
            f"{type(repository).__name__} cannot be used as a "
            f"{protocol.__name__}: it lacks one or more of its methods"
        )

        logger.error(
            "Repository protocol validation failed",
            extra={
                "repository_type": type(repository).__name__,
                "protocol_name": protocol.__name__,
            },
        )

        raise RepositoryValidationError(error_message)

    logger.debug(
        "Repository protocol validation passed",
        extra={
            "repository_type": type(repository).__name__,
            "protocol_name": protocol.__name__,
        },
    )


def ensure_repository_protocol(repository: object, protocol: Type[P]) -> P:
    """Validate ``repository`` and return it typed as ``protocol``."""
    validate_repository_protocol(repository, protocol)
    return repository  # type: ignore[return-value]
