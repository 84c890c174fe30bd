"""
Shared fixtures for the API tests.

Every test gets fresh memory repositories wired into the application through
``app.dependency_overrides``.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from library_catalog.api.app import app
from library_catalog.api.dependencies import (
    get_author_repository,
    get_book_instance_repository,
    get_book_repository,
    get_genre_repository,
)
from library_catalog.repositories.memory import (
    MemoryAuthorRepository,
    MemoryBookInstanceRepository,
    MemoryBookRepository,
    MemoryGenreRepository,
)


@pytest.fixture
def author_repo() -> MemoryAuthorRepository:
    return MemoryAuthorRepository()


@pytest.fixture
def book_repo() -> MemoryBookRepository:
    return MemoryBookRepository()


@pytest.fixture
def genre_repo() -> MemoryGenreRepository:
    return MemoryGenreRepository()


@pytest.fixture
def book_instance_repo() -> MemoryBookInstanceRepository:
    return MemoryBookInstanceRepository()


@pytest.fixture
def client(
    author_repo: MemoryAuthorRepository,
    book_repo: MemoryBookRepository,
    genre_repo: MemoryGenreRepository,
    book_instance_repo: MemoryBookInstanceRepository,
) -> Generator[TestClient, None, None]:
    """Create a test client backed by memory repositories."""
    app.dependency_overrides[get_author_repository] = lambda: author_repo
    app.dependency_overrides[get_book_repository] = lambda: book_repo
    app.dependency_overrides[get_genre_repository] = lambda: genre_repo
    app.dependency_overrides[get_book_instance_repository] = (
        lambda: book_instance_repo
    )

    # Store failures must come back as the error page, not as test errors
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
