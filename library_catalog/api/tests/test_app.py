"""
Tests for the library_catalog FastAPI application.

These cover the application-level wiring: the root redirect, the health
check, the catalog home page and the two error pages.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from library_catalog.api.app import INTERNAL_ERROR_MESSAGE
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
from library_catalog.use_cases.index import COUNTS_UNAVAILABLE


class TestRoot:
    def test_root_redirects_to_catalog(self, client: TestClient) -> None:
        response = client.get("/", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog"


class TestHealthEndpoint:
    """Test the health check endpoint."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert "timestamp" in data


class TestCatalogHome:
    """Test the catalog home page with its record counts."""

    @pytest.mark.asyncio
    async def test_home_shows_counts(
        self,
        client: TestClient,
        author_repo: MemoryAuthorRepository,
        book_repo: MemoryBookRepository,
        genre_repo: MemoryGenreRepository,
        book_instance_repo: MemoryBookInstanceRepository,
    ) -> None:
        await author_repo.insert(AuthorFactory.build())
        await genre_repo.insert(GenreFactory.build())
        await genre_repo.insert(GenreFactory.build())
        await book_repo.insert(BookFactory.build())
        await book_instance_repo.insert(BookInstanceFactory.build())
        await book_instance_repo.insert(
            BookInstanceFactory.build(status=BookInstanceStatus.LOANED)
        )

        response = client.get("/catalog")

        assert response.status_code == 200
        assert "Local Library Home" in response.text
        assert "<strong>Books:</strong> 1" in response.text
        assert "<strong>Copies:</strong> 2" in response.text
        assert "<strong>Copies available:</strong> 1" in response.text
        assert "<strong>Authors:</strong> 1" in response.text
        assert "<strong>Genres:</strong> 2" in response.text

    def test_home_reports_unavailable_counts(
        self, client: TestClient, genre_repo: MemoryGenreRepository
    ) -> None:
        genre_repo.count = AsyncMock(  # type: ignore[method-assign]
            side_effect=ConnectionError("store unreachable")
        )

        response = client.get("/catalog")

        assert response.status_code == 200
        assert COUNTS_UNAVAILABLE in response.text
        assert "<strong>Books:</strong>" not in response.text


class TestErrorPages:
    def test_missing_entity_renders_not_found(
        self, client: TestClient
    ) -> None:
        response = client.get("/catalog/author/author-missing")

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]
        assert "Author not found" in response.text

    def test_store_failure_renders_error_page(
        self, client: TestClient, author_repo: MemoryAuthorRepository
    ) -> None:
        author_repo.find = AsyncMock(  # type: ignore[method-assign]
            side_effect=ConnectionError("store unreachable")
        )

        response = client.get("/catalog/authors")

        assert response.status_code == 500
        assert INTERNAL_ERROR_MESSAGE in response.text
        assert "store unreachable" not in response.text
