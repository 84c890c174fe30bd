"""
Dependency injection for FastAPI endpoints.

Repositories are created once per process by the DependencyContainer and
shared by every request. Which implementation is created depends on the
configured storage backend; tests replace the repository dependencies with
memory repositories through ``app.dependency_overrides``.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Depends

from library_catalog.config import Settings, StorageBackend
from library_catalog.repositories import (
    AuthorRepository,
    BookInstanceRepository,
    BookRepository,
    GenreRepository,
)
from library_catalog.repositories.memory import (
    MemoryAuthorRepository,
    MemoryBookInstanceRepository,
    MemoryBookRepository,
    MemoryGenreRepository,
)
from library_catalog.repositories.minio import (
    MinioAuthorRepository,
    MinioBookInstanceRepository,
    MinioBookRepository,
    MinioClient,
    MinioGenreRepository,
    create_minio_client,
)
from library_catalog.use_cases import (
    AuthorUseCase,
    BookInstanceUseCase,
    BookUseCase,
    CatalogIndexUseCase,
    GenreUseCase,
)

logger = logging.getLogger(__name__)

MEMORY_REPOSITORIES = {
    "author": MemoryAuthorRepository,
    "book": MemoryBookRepository,
    "genre": MemoryGenreRepository,
    "book_instance": MemoryBookInstanceRepository,
}

MINIO_REPOSITORIES = {
    "author": MinioAuthorRepository,
    "book": MinioBookRepository,
    "genre": MinioGenreRepository,
    "book_instance": MinioBookInstanceRepository,
}


class DependencyContainer:
    """
    Dependency injection container with singleton lifecycle management.

    Memory repositories hold the whole catalog, so they must be created once
    and shared; Minio repositories share one client.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._instances: Dict[str, Any] = {}

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings.from_env()
        return self._settings

    async def get_or_create(
        self, key: str, factory: Callable[[], Awaitable[Any]]
    ) -> Any:
        """Get or create a singleton instance."""
        if key not in self._instances:
            self._instances[key] = await factory()
        return self._instances[key]

    async def get_minio_client(self) -> MinioClient:
        client = await self.get_or_create(
            "minio_client", self._create_minio_client
        )
        return client  # type: ignore[no-any-return]

    async def _create_minio_client(self) -> MinioClient:
        return create_minio_client(self.settings)

    async def get_repository(self, entity: str) -> Any:
        """Get the repository for ``entity`` ("author", "book", ...)."""

        async def create() -> Any:
            backend = self.settings.storage_backend
            logger.debug(
                "Creating repository",
                extra={"entity": entity, "storage_backend": backend.value},
            )
            if backend is StorageBackend.MINIO:
                client = await self.get_minio_client()
                return MINIO_REPOSITORIES[entity](client)
            return MEMORY_REPOSITORIES[entity]()

        return await self.get_or_create(f"{entity}_repository", create)


# Global container instance
_container = DependencyContainer()


def get_container() -> DependencyContainer:
    return _container


async def get_author_repository() -> AuthorRepository:
    """FastAPI dependency for AuthorRepository."""
    return await _container.get_repository("author")  # type: ignore[no-any-return]


async def get_book_repository() -> BookRepository:
    """FastAPI dependency for BookRepository."""
    return await _container.get_repository("book")  # type: ignore[no-any-return]


async def get_genre_repository() -> GenreRepository:
    """FastAPI dependency for GenreRepository."""
    return await _container.get_repository("genre")  # type: ignore[no-any-return]


async def get_book_instance_repository() -> BookInstanceRepository:
    """FastAPI dependency for BookInstanceRepository."""
    return await _container.get_repository("book_instance")  # type: ignore[no-any-return]


async def get_author_use_case(
    author_repo: AuthorRepository = Depends(get_author_repository),
    book_repo: BookRepository = Depends(get_book_repository),
) -> AuthorUseCase:
    """FastAPI dependency for AuthorUseCase."""
    return AuthorUseCase(author_repo=author_repo, book_repo=book_repo)


async def get_genre_use_case(
    genre_repo: GenreRepository = Depends(get_genre_repository),
    book_repo: BookRepository = Depends(get_book_repository),
) -> GenreUseCase:
    """FastAPI dependency for GenreUseCase."""
    return GenreUseCase(genre_repo=genre_repo, book_repo=book_repo)


async def get_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
    author_repo: AuthorRepository = Depends(get_author_repository),
    genre_repo: GenreRepository = Depends(get_genre_repository),
    book_instance_repo: BookInstanceRepository = Depends(
        get_book_instance_repository
    ),
) -> BookUseCase:
    """FastAPI dependency for BookUseCase."""
    return BookUseCase(
        book_repo=book_repo,
        author_repo=author_repo,
        genre_repo=genre_repo,
        book_instance_repo=book_instance_repo,
    )


async def get_book_instance_use_case(
    book_instance_repo: BookInstanceRepository = Depends(
        get_book_instance_repository
    ),
    book_repo: BookRepository = Depends(get_book_repository),
) -> BookInstanceUseCase:
    """FastAPI dependency for BookInstanceUseCase."""
    return BookInstanceUseCase(
        book_instance_repo=book_instance_repo, book_repo=book_repo
    )


async def get_catalog_index_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
    book_instance_repo: BookInstanceRepository = Depends(
        get_book_instance_repository
    ),
    author_repo: AuthorRepository = Depends(get_author_repository),
    genre_repo: GenreRepository = Depends(get_genre_repository),
) -> CatalogIndexUseCase:
    """FastAPI dependency for CatalogIndexUseCase."""
    return CatalogIndexUseCase(
        book_repo=book_repo,
        book_instance_repo=book_instance_repo,
        author_repo=author_repo,
        genre_repo=genre_repo,
    )
