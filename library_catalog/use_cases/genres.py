"""
Genre workflows: list, detail, create, delete and update.

Genre names are kept unique by the create workflow, which redirects to an
existing genre of the same name instead of inserting a second one. A genre
may not be deleted while any book is filed under it.
"""

import logging
from typing import Any, List, Mapping

from library_catalog.domain import Book, Genre
from library_catalog.domain.display import (
    GENRE_LIST_URL,
    book_display,
    genre_display,
    genre_url,
)
from library_catalog.domain.forms import FormResult, GenreForm, validate_form
from library_catalog.repositories import BookRepository, GenreRepository
from library_catalog.validation import ensure_repository_protocol
from .aggregate import fetch_all
from .guard import can_delete
from .outcomes import NotFoundError, Outcome, Redirect, Render

logger = logging.getLogger(__name__)


class GenreUseCase:
    """Use case for browsing and maintaining genres."""

    def __init__(
        self, genre_repo: GenreRepository, book_repo: BookRepository
    ) -> None:
        self.genre_repo = ensure_repository_protocol(
            genre_repo, GenreRepository  # type: ignore[type-abstract]
        )
        self.book_repo = ensure_repository_protocol(
            book_repo, BookRepository  # type: ignore[type-abstract]
        )

    async def _books_in(self, genre_id: str) -> List[Book]:
        return await self.book_repo.find({"genre_ids": genre_id})

    async def _target_and_books(self, genre_id: str) -> Mapping[str, Any]:
        return await fetch_all(
            {
                "genre": lambda: self.genre_repo.get(genre_id),
                "genre_books": lambda: self._books_in(genre_id),
            }
        )

    async def list(self) -> Render:
        genres = await self.genre_repo.find(sort_by="name")
        return Render(
            view="genre_list.html",
            context={
                "title": "Genre List",
                "genre_list": [genre_display(g) for g in genres],
            },
        )

    async def detail(self, genre_id: str) -> Render:
        bundle = await self._target_and_books(genre_id)
        genre = bundle["genre"]
        if genre is None:
            raise NotFoundError("Genre", genre_id)

        return Render(
            view="genre_detail.html",
            context={
                "title": "Genre Detail",
                "genre": genre_display(genre),
                "genre_books": [book_display(b) for b in bundle["genre_books"]],
            },
        )

    async def create_form(self) -> Render:
        return Render(view="genre_form.html", context={"title": "Create Genre"})

    async def create(self, raw: Mapping[str, Any]) -> Outcome:
        """Create a genre, or redirect to the one already using the name."""
        result = validate_form(GenreForm, raw)
        if not result.is_valid:
            return self._form_with_errors("Create Genre", result)

        form = result.form
        assert isinstance(form, GenreForm)
        existing = await self.genre_repo.find_by_name(form.name)
        if existing is not None:
            logger.info(
                "Genre already exists",
                extra={"genre_id": existing.genre_id, "genre_name": form.name},
            )
            return Redirect(url=genre_url(existing.genre_id))

        genre = Genre(
            genre_id=await self.genre_repo.generate_id(), name=form.name
        )
        await self.genre_repo.insert(genre)

        logger.info("Genre created", extra={"genre_id": genre.genre_id})
        return Redirect(url=genre_url(genre.genre_id))

    async def delete_form(self, genre_id: str) -> Outcome:
        bundle = await self._target_and_books(genre_id)
        if bundle["genre"] is None:
            return Redirect(url=GENRE_LIST_URL)
        return self._confirm_delete(bundle["genre"], bundle["genre_books"])

    async def delete(self, genre_id: str) -> Outcome:
        """Delete the genre unless books are still filed under it."""
        bundle = await fetch_all(
            {
                "genre": lambda: self.genre_repo.get(genre_id),
                "guard": lambda: can_delete(genre_id, self._books_in),
            }
        )
        genre = bundle["genre"]
        if genre is None:
            return Redirect(url=GENRE_LIST_URL)

        guard = bundle["guard"]
        if guard.blocked:
            return self._confirm_delete(genre, guard.dependents)

        await self.genre_repo.delete(genre_id)
        logger.info("Genre deleted", extra={"genre_id": genre_id})
        return Redirect(url=GENRE_LIST_URL)

    async def update_form(self, genre_id: str) -> Render:
        genre = await self.genre_repo.get(genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return Render(
            view="genre_form.html",
            context={"title": "Update Genre", "genre": genre_display(genre)},
        )

    async def update(self, genre_id: str, raw: Mapping[str, Any]) -> Outcome:
        result = validate_form(GenreForm, raw)
        if not result.is_valid:
            return self._form_with_errors("Update Genre", result)

        form = result.form
        assert isinstance(form, GenreForm)
        updated = await self.genre_repo.update(
            genre_id, Genre(genre_id=genre_id, name=form.name)
        )
        if updated is None:
            raise NotFoundError("Genre", genre_id)

        logger.info("Genre updated", extra={"genre_id": genre_id})
        return Redirect(url=genre_url(genre_id))

    def _form_with_errors(self, title: str, result: FormResult) -> Render:
        return Render(
            view="genre_form.html",
            context={
                "title": title,
                "genre": result.values,
                "errors": result.errors,
            },
        )

    def _confirm_delete(self, genre: Genre, books: List[Book]) -> Render:
        return Render(
            view="genre_delete.html",
            context={
                "title": "Delete Genre",
                "genre": genre_display(genre),
                "genre_books": [book_display(b) for b in books],
            },
        )
