"""
Tests for CatalogIndexUseCase.
"""

from unittest.mock import AsyncMock

import pytest

from library_catalog.domain import BookInstanceStatus
from library_catalog.domain.tests.factories import (
    AuthorFactory,
    BookFactory,
    BookInstanceFactory,
    GenreFactory,
)
from library_catalog.repositories.memory import (
    MemoryAuthorRepository,
    MemoryBookInstanceRepository,
    MemoryBookRepository,
    MemoryGenreRepository,
)
from library_catalog.use_cases import CatalogIndexUseCase
from library_catalog.use_cases.index import COUNTS_UNAVAILABLE


class TestCatalogSummary:
    @pytest.mark.asyncio
    async def test_counts(
        self,
        index_use_case: CatalogIndexUseCase,
        author_repo: MemoryAuthorRepository,
        book_repo: MemoryBookRepository,
        book_instance_repo: MemoryBookInstanceRepository,
        genre_repo: MemoryGenreRepository,
    ) -> None:
        await author_repo.insert(AuthorFactory.build())
        await genre_repo.insert(GenreFactory.build())
        await genre_repo.insert(GenreFactory.build())
        await book_repo.insert(BookFactory.build())
        await book_instance_repo.insert(
            BookInstanceFactory.build(status=BookInstanceStatus.AVAILABLE)
        )
        await book_instance_repo.insert(
            BookInstanceFactory.build(status=BookInstanceStatus.LOANED)
        )

        outcome = await index_use_case.summary()

        assert outcome.view == "index.html"
        assert outcome.context["error"] is None
        assert outcome.context["data"] == {
            "book_count": 1,
            "book_instance_count": 2,
            "book_instance_available_count": 1,
            "author_count": 1,
            "genre_count": 2,
        }

    @pytest.mark.asyncio
    async def test_store_failure_rendered_on_page(
        self,
        author_repo: MemoryAuthorRepository,
        book_repo: MemoryBookRepository,
        book_instance_repo: MemoryBookInstanceRepository,
        genre_repo: MemoryGenreRepository,
    ) -> None:
        genre_repo.count = AsyncMock(  # type: ignore[method-assign]
            side_effect=ConnectionError("genre store unavailable")
        )
        use_case = CatalogIndexUseCase(
            book_repo=book_repo,
            book_instance_repo=book_instance_repo,
            author_repo=author_repo,
            genre_repo=genre_repo,
        )

        outcome = await use_case.summary()

        assert outcome.context["data"] is None
        assert outcome.context["error"] == COUNTS_UNAVAILABLE
