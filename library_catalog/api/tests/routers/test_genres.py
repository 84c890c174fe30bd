"""
Tests for the genre pages router.
"""

import pytest
from fastapi.testclient import TestClient

from library_catalog.domain.tests.factories import BookFactory, GenreFactory
from library_catalog.repositories.memory import (
    MemoryBookRepository,
    MemoryGenreRepository,
)


class TestGenreCreate:
    @pytest.mark.asyncio
    async def test_create_then_duplicate_redirects_to_existing(
        self, client: TestClient, genre_repo: MemoryGenreRepository
    ) -> None:
        first = client.post(
            "/catalog/genre/create",
            data={"name": "Fantasy"},
            follow_redirects=False,
        )
        second = client.post(
            "/catalog/genre/create",
            data={"name": "  Fantasy "},
            follow_redirects=False,
        )

        assert first.status_code == 302
        assert second.status_code == 302
        assert first.headers["location"] == second.headers["location"]
        assert await genre_repo.count() == 1

    def test_blank_name_re_renders(self, client: TestClient) -> None:
        response = client.post(
            "/catalog/genre/create", data={"name": "  "}, follow_redirects=False
        )

        assert response.status_code == 200
        assert "Genre name required" in response.text

    @pytest.mark.asyncio
    async def test_markup_is_escaped_once(
        self, client: TestClient, genre_repo: MemoryGenreRepository
    ) -> None:
        response = client.post(
            "/catalog/genre/create",
            data={"name": "Sci-Fi & <Fantasy>"},
        )

        assert response.status_code == 200
        assert "Sci-Fi &amp; &lt;Fantasy&gt;" in response.text
        assert "&amp;amp;" not in response.text
        [genre] = await genre_repo.find()
        assert genre.name == "Sci-Fi &amp; &lt;Fantasy&gt;"


class TestGenreDetail:
    @pytest.mark.asyncio
    async def test_detail_lists_books(
        self,
        client: TestClient,
        genre_repo: MemoryGenreRepository,
        book_repo: MemoryBookRepository,
    ) -> None:
        await genre_repo.insert(
            GenreFactory.build(genre_id="genre-1", name="Romance")
        )
        await book_repo.insert(
            BookFactory.build(title="Persuasion", genre_ids=["genre-1"])
        )
        await book_repo.insert(BookFactory.build(title="Dracula"))

        response = client.get("/catalog/genre/genre-1")

        assert response.status_code == 200
        assert "Genre: Romance" in response.text
        assert "Persuasion" in response.text
        assert "Dracula" not in response.text

    def test_missing_genre_is_not_found(self, client: TestClient) -> None:
        response = client.get("/catalog/genre/genre-missing")

        assert response.status_code == 404
        assert "Genre not found" in response.text


class TestGenreDelete:
    @pytest.mark.asyncio
    async def test_blocked_while_books_use_it(
        self,
        client: TestClient,
        genre_repo: MemoryGenreRepository,
        book_repo: MemoryBookRepository,
    ) -> None:
        await genre_repo.insert(GenreFactory.build(genre_id="genre-1"))
        await book_repo.insert(BookFactory.build(genre_ids=["genre-1"]))

        response = client.post(
            "/catalog/genre/genre-1/delete", follow_redirects=False
        )

        assert response.status_code == 200
        assert "Delete the following books" in response.text
        assert await genre_repo.get("genre-1") is not None

    @pytest.mark.asyncio
    async def test_deletes_unused_genre(
        self, client: TestClient, genre_repo: MemoryGenreRepository
    ) -> None:
        await genre_repo.insert(GenreFactory.build(genre_id="genre-1"))

        response = client.post(
            "/catalog/genre/genre-1/delete", follow_redirects=False
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/genres"
        assert await genre_repo.count() == 0


class TestGenreUpdate:
    @pytest.mark.asyncio
    async def test_rename(
        self, client: TestClient, genre_repo: MemoryGenreRepository
    ) -> None:
        await genre_repo.insert(
            GenreFactory.build(genre_id="genre-1", name="Scifi")
        )

        form = client.get("/catalog/genre/genre-1/update")
        assert 'value="Scifi"' in form.text

        response = client.post(
            "/catalog/genre/genre-1/update",
            data={"name": "Science Fiction"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/genre/genre-1"
        genre = await genre_repo.get("genre-1")
        assert genre is not None
        assert genre.name == "Science Fiction"
