"""
Shared fixtures for the use case tests: one fresh memory store per test.
"""

import pytest

from library_catalog.repositories.memory import (
    MemoryAuthorRepository,
    MemoryBookInstanceRepository,
    MemoryBookRepository,
    MemoryGenreRepository,
)
from library_catalog.use_cases import (
    AuthorUseCase,
    BookInstanceUseCase,
    BookUseCase,
    CatalogIndexUseCase,
    GenreUseCase,
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
def author_use_case(
    author_repo: MemoryAuthorRepository, book_repo: MemoryBookRepository
) -> AuthorUseCase:
    return AuthorUseCase(author_repo=author_repo, book_repo=book_repo)


@pytest.fixture
def genre_use_case(
    genre_repo: MemoryGenreRepository, book_repo: MemoryBookRepository
) -> GenreUseCase:
    return GenreUseCase(genre_repo=genre_repo, book_repo=book_repo)


@pytest.fixture
def book_use_case(
    book_repo: MemoryBookRepository,
    author_repo: MemoryAuthorRepository,
    genre_repo: MemoryGenreRepository,
    book_instance_repo: MemoryBookInstanceRepository,
) -> BookUseCase:
    return BookUseCase(
        book_repo=book_repo,
        author_repo=author_repo,
        genre_repo=genre_repo,
        book_instance_repo=book_instance_repo,
    )


@pytest.fixture
def book_instance_use_case(
    book_instance_repo: MemoryBookInstanceRepository,
    book_repo: MemoryBookRepository,
) -> BookInstanceUseCase:
    return BookInstanceUseCase(
        book_instance_repo=book_instance_repo, book_repo=book_repo
    )


@pytest.fixture
def index_use_case(
    book_repo: MemoryBookRepository,
    book_instance_repo: MemoryBookInstanceRepository,
    author_repo: MemoryAuthorRepository,
    genre_repo: MemoryGenreRepository,
) -> CatalogIndexUseCase:
    return CatalogIndexUseCase(
        book_repo=book_repo,
        book_instance_repo=book_instance_repo,
        author_repo=author_repo,
        genre_repo=genre_repo,
    )
