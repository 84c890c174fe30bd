"""
Tests for the book instance (copy) pages router.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from library_catalog.domain import BookInstanceStatus
from library_catalog.domain.tests.factories import (
    BookFactory,
    BookInstanceFactory,
)
from library_catalog.repositories.memory import (
    MemoryBookInstanceRepository,
    MemoryBookRepository,
)


class TestBookInstanceList:
    @pytest.mark.asyncio
    async def test_lists_copies_with_titles(
        self,
        client: TestClient,
        book_repo: MemoryBookRepository,
        book_instance_repo: MemoryBookInstanceRepository,
    ) -> None:
        await book_repo.insert(BookFactory.build(book_id="book-1", title="Emma"))
        await book_instance_repo.insert(
            BookInstanceFactory.build(
                book_id="book-1",
                status=BookInstanceStatus.LOANED,
                due_back=date(2026, 11, 1),
            )
        )

        response = client.get("/catalog/bookinstances")

        assert response.status_code == 200
        assert "Emma" in response.text
        assert "Loaned" in response.text
        assert "November 1st, 2026" in response.text


class TestBookInstanceCreate:
    @pytest.mark.asyncio
    async def test_form_offers_books_and_statuses(
        self, client: TestClient, book_repo: MemoryBookRepository
    ) -> None:
        await book_repo.insert(BookFactory.build(book_id="book-1", title="Emma"))

        response = client.get("/catalog/bookinstance/create")

        assert response.status_code == 200
        assert '<option value="book-1">Emma</option>' in response.text
        for status in BookInstanceStatus:
            assert f'<option value="{status.value}">' in response.text

    @pytest.mark.asyncio
    async def test_create_copy(
        self,
        client: TestClient,
        book_repo: MemoryBookRepository,
        book_instance_repo: MemoryBookInstanceRepository,
    ) -> None:
        await book_repo.insert(BookFactory.build(book_id="book-1"))

        response = client.post(
            "/catalog/bookinstance/create",
            data={
                "book_id": "book-1",
                "imprint": "Penguin, 2003",
                "status": "Reserved",
                "due_back": "2026-12-24",
            },
            follow_redirects=False,
        )

        assert response.status_code == 302
        [copy] = await book_instance_repo.find()
        assert response.headers["location"] == (
            f"/catalog/bookinstance/{copy.book_instance_id}"
        )
        assert copy.status is BookInstanceStatus.RESERVED
        assert copy.due_back == date(2026, 12, 24)

    @pytest.mark.asyncio
    async def test_invalid_submission_re_renders(
        self,
        client: TestClient,
        book_instance_repo: MemoryBookInstanceRepository,
    ) -> None:
        response = client.post(
            "/catalog/bookinstance/create",
            data={"book_id": "", "imprint": "Penguin", "status": "Lost"},
            follow_redirects=False,
        )

        assert response.status_code == 200
        assert "Book must be specified" in response.text
        assert "Invalid status" in response.text
        assert await book_instance_repo.count() == 0


class TestBookInstanceDelete:
    @pytest.mark.asyncio
    async def test_delete_copy(
        self,
        client: TestClient,
        book_instance_repo: MemoryBookInstanceRepository,
    ) -> None:
        await book_instance_repo.insert(
            BookInstanceFactory.build(book_instance_id="bookinstance-1")
        )

        form = client.get("/catalog/bookinstance/bookinstance-1/delete")
        assert "Do you really want to delete this BookInstance?" in form.text

        response = client.post(
            "/catalog/bookinstance/bookinstance-1/delete",
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/bookinstances"
        assert await book_instance_repo.count() == 0

    def test_delete_of_missing_copy_redirects(
        self, client: TestClient
    ) -> None:
        response = client.post(
            "/catalog/bookinstance/bookinstance-missing/delete",
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/bookinstances"


class TestBookInstanceUpdate:
    @pytest.mark.asyncio
    async def test_update_form_is_prefilled(
        self,
        client: TestClient,
        book_repo: MemoryBookRepository,
        book_instance_repo: MemoryBookInstanceRepository,
    ) -> None:
        await book_repo.insert(BookFactory.build(book_id="book-1", title="Emma"))
        await book_instance_repo.insert(
            BookInstanceFactory.build(
                book_instance_id="bookinstance-1",
                book_id="book-1",
                status=BookInstanceStatus.LOANED,
            )
        )

        response = client.get("/catalog/bookinstance/bookinstance-1/update")

        assert response.status_code == 200
        assert '<option value="book-1" selected>Emma</option>' in response.text
        assert '<option value="Loaned" selected>' in response.text
        assert 'value="2026-10-18"' in response.text

    def test_update_of_missing_copy_is_not_found(
        self, client: TestClient
    ) -> None:
        response = client.post(
            "/catalog/bookinstance/bookinstance-missing/update",
            data={"book_id": "book-1", "imprint": "Penguin"},
            follow_redirects=False,
        )

        assert response.status_code == 404
        assert "Book copy not found" in response.text
