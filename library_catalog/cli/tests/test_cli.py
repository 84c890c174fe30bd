"""
Tests for CLI programs.

The serve command is tested for argument handling only, with uvicorn mocked
out. The populate command is run end to end against memory repositories,
and its click wrapper with the population step mocked.
"""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from library_catalog.api.dependencies import DependencyContainer
from library_catalog.cli.populate import (
    SAMPLE_AUTHORS,
    SAMPLE_BOOKS,
    SAMPLE_COPIES,
    SAMPLE_GENRES,
    PopulateError,
    create_entity,
    populate,
)
from library_catalog.cli.populate import main as populate_main
from library_catalog.cli.serve import APP_PATH
from library_catalog.cli.serve import main as serve_main
from library_catalog.config import Settings
from library_catalog.repositories.memory import (
    MemoryBookRepository,
    MemoryGenreRepository,
)
from library_catalog.use_cases import GenreUseCase


class TestServeCLI:
    def test_default_options(self) -> None:
        runner = CliRunner()

        with patch("library_catalog.cli.serve.uvicorn.run") as mock_run:
            result = runner.invoke(serve_main)

        assert result.exit_code == 0
        assert "http://127.0.0.1:8000/catalog" in result.output
        mock_run.assert_called_once_with(
            APP_PATH, host="127.0.0.1", port=8000, reload=False
        )

    def test_custom_options(self) -> None:
        runner = CliRunner()

        with patch("library_catalog.cli.serve.uvicorn.run") as mock_run:
            result = runner.invoke(
                serve_main, ["--host", "0.0.0.0", "--port", "9001", "--reload"]
            )

        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            APP_PATH, host="0.0.0.0", port=9001, reload=True
        )

    def test_invalid_port(self) -> None:
        runner = CliRunner()

        with patch("library_catalog.cli.serve.uvicorn.run") as mock_run:
            result = runner.invoke(serve_main, ["--port", "eighty"])

        assert result.exit_code != 0
        mock_run.assert_not_called()


class TestPopulate:
    @pytest.mark.asyncio
    async def test_creates_sample_catalog(self) -> None:
        container = DependencyContainer(Settings())

        counts = await populate(container)

        assert counts == {
            "authors": len(SAMPLE_AUTHORS),
            "genres": len(SAMPLE_GENRES),
            "books": len(SAMPLE_BOOKS),
            "copies": len(SAMPLE_COPIES),
        }
        book_repo = await container.get_repository("book")
        author_repo = await container.get_repository("author")
        assert await book_repo.count() == len(SAMPLE_BOOKS)
        [rothfuss] = await author_repo.find({"family_name": "Rothfuss"})
        assert await book_repo.count({"author_id": rothfuss.author_id}) == 3

    @pytest.mark.asyncio
    async def test_running_twice_does_not_duplicate_genres(self) -> None:
        container = DependencyContainer(Settings())

        await populate(container)
        await populate(container)

        genre_repo = await container.get_repository("genre")
        author_repo = await container.get_repository("author")
        assert await genre_repo.count() == len(SAMPLE_GENRES)
        assert await author_repo.count() == 2 * len(SAMPLE_AUTHORS)

    @pytest.mark.asyncio
    async def test_rejected_sample_raises(self) -> None:
        use_case = GenreUseCase(
            genre_repo=MemoryGenreRepository(),
            book_repo=MemoryBookRepository(),
        )

        with pytest.raises(PopulateError, match="Genre name required"):
            await create_entity(use_case, {"name": ""})


class TestPopulateCLI:
    def test_reports_counts(self) -> None:
        runner = CliRunner()

        with patch(
            "library_catalog.cli.populate.populate", new_callable=AsyncMock
        ) as mock_populate:
            mock_populate.return_value = {"authors": 5, "genres": 3}
            result = runner.invoke(
                populate_main, env={"CATALOG_STORAGE_BACKEND": "memory"}
            )

        assert result.exit_code == 0
        assert "memory backend is not persistent" in result.output
        assert "Created 5 authors" in result.output
        assert "Created 3 genres" in result.output
        mock_populate.assert_awaited_once()
