"""
Catalog home page: how many books, copies, authors and genres are held.
"""

import logging
from typing import Any, Dict, Optional

from library_catalog.domain import BookInstanceStatus
from library_catalog.repositories import (
    AuthorRepository,
    BookInstanceRepository,
    BookRepository,
    GenreRepository,
)
from library_catalog.validation import ensure_repository_protocol
from .aggregate import fetch_all
from .outcomes import Render

logger = logging.getLogger(__name__)

COUNTS_UNAVAILABLE = "Catalog counts are currently unavailable."


class CatalogIndexUseCase:
    """Use case for the catalog summary shown on the home page."""

    def __init__(
        self,
        book_repo: BookRepository,
        book_instance_repo: BookInstanceRepository,
        author_repo: AuthorRepository,
        genre_repo: GenreRepository,
    ) -> None:
        self.book_repo = ensure_repository_protocol(
            book_repo, BookRepository  # type: ignore[type-abstract]
        )
        self.book_instance_repo = ensure_repository_protocol(
            book_instance_repo,
            BookInstanceRepository,  # type: ignore[type-abstract]
        )
        self.author_repo = ensure_repository_protocol(
            author_repo, AuthorRepository  # type: ignore[type-abstract]
        )
        self.genre_repo = ensure_repository_protocol(
            genre_repo, GenreRepository  # type: ignore[type-abstract]
        )

    async def summary(self) -> Render:
        """Count the catalog's contents.

        A store failure does not fail the page: the home page is rendered
        with an error message in place of the counts.
        """
        data: Optional[Dict[str, Any]] = None
        error: Optional[str] = None
        try:
            data = await fetch_all(
                {
                    "book_count": self.book_repo.count,
                    "book_instance_count": self.book_instance_repo.count,
                    "book_instance_available_count": lambda: (
                        self.book_instance_repo.count(
                            {"status": BookInstanceStatus.AVAILABLE}
                        )
                    ),
                    "author_count": self.author_repo.count,
                    "genre_count": self.genre_repo.count,
                }
            )
        except Exception as e:
            logger.error(
                "Failed to count catalog contents",
                extra={"error_type": type(e).__name__, "error": str(e)},
                exc_info=True,
            )
            error = COUNTS_UNAVAILABLE

        return Render(
            view="index.html",
            context={"title": "Local Library Home", "data": data, "error": error},
        )
