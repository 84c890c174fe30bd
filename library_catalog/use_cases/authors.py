"""
Author workflows: list, detail, create, delete and update.

An author may not be deleted while any book names it as its author.
"""

import logging
from typing import Any, List, Mapping

from library_catalog.domain import Author, Book
from library_catalog.domain.display import (
    AUTHOR_LIST_URL,
    author_display,
    author_url,
    book_display,
)
from library_catalog.domain.forms import AuthorForm, FormResult, validate_form
from library_catalog.repositories import AuthorRepository, BookRepository
from library_catalog.validation import ensure_repository_protocol
from .aggregate import fetch_all
from .guard import can_delete
from .outcomes import NotFoundError, Outcome, Redirect, Render

logger = logging.getLogger(__name__)


class AuthorUseCase:
    """
    Use case for browsing and maintaining authors.

    Each method is one step of a page workflow and returns a Render or a
    Redirect outcome; store failures propagate unchanged.
    """

    def __init__(
        self, author_repo: AuthorRepository, book_repo: BookRepository
    ) -> None:
        """Initialize author use case.

        Args:
            author_repo: Repository holding the authors
            book_repo: Repository holding the books, the authors' dependents
        """
        self.author_repo = ensure_repository_protocol(
            author_repo, AuthorRepository  # type: ignore[type-abstract]
        )
        self.book_repo = ensure_repository_protocol(
            book_repo, BookRepository  # type: ignore[type-abstract]
        )

    async def _books_by(self, author_id: str) -> List[Book]:
        return await self.book_repo.find({"author_id": author_id})

    async def _target_and_books(self, author_id: str) -> Mapping[str, Any]:
        return await fetch_all(
            {
                "author": lambda: self.author_repo.get(author_id),
                "author_books": lambda: self._books_by(author_id),
            }
        )

    async def list(self) -> Render:
        authors = await self.author_repo.find(sort_by="family_name")
        return Render(
            view="author_list.html",
            context={
                "title": "Author List",
                "author_list": [author_display(a) for a in authors],
            },
        )

    async def detail(self, author_id: str) -> Render:
        bundle = await self._target_and_books(author_id)
        author = bundle["author"]
        if author is None:
            raise NotFoundError("Author", author_id)

        return Render(
            view="author_detail.html",
            context={
                "title": "Author Detail",
                "author": author_display(author),
                "author_books": [book_display(b) for b in bundle["author_books"]],
            },
        )

    async def create_form(self) -> Render:
        return Render(
            view="author_form.html", context={"title": "Create Author"}
        )

    async def create(self, raw: Mapping[str, Any]) -> Outcome:
        result = validate_form(AuthorForm, raw)
        if not result.is_valid:
            return self._form_with_errors("Create Author", result)

        form = result.form
        assert isinstance(form, AuthorForm)
        author = Author(
            author_id=await self.author_repo.generate_id(),
            first_name=form.first_name,
            family_name=form.family_name,
            date_of_birth=form.date_of_birth,
            date_of_death=form.date_of_death,
        )
        await self.author_repo.insert(author)

        logger.info(
            "Author created",
            extra={"author_id": author.author_id},
        )
        return Redirect(url=author_url(author.author_id))

    async def delete_form(self, author_id: str) -> Outcome:
        bundle = await self._target_and_books(author_id)
        if bundle["author"] is None:
            return Redirect(url=AUTHOR_LIST_URL)
        return self._confirm_delete(bundle["author"], bundle["author_books"])

    async def delete(self, author_id: str) -> Outcome:
        """Delete the author unless books still reference it."""
        bundle = await fetch_all(
            {
                "author": lambda: self.author_repo.get(author_id),
                "guard": lambda: can_delete(author_id, self._books_by),
            }
        )
        author = bundle["author"]
        if author is None:
            return Redirect(url=AUTHOR_LIST_URL)

        guard = bundle["guard"]
        if guard.blocked:
            return self._confirm_delete(author, guard.dependents)

        await self.author_repo.delete(author_id)
        logger.info("Author deleted", extra={"author_id": author_id})
        return Redirect(url=AUTHOR_LIST_URL)

    async def update_form(self, author_id: str) -> Render:
        author = await self.author_repo.get(author_id)
        if author is None:
            raise NotFoundError("Author", author_id)
        return Render(
            view="author_form.html",
            context={"title": "Update Author", "author": author_display(author)},
        )

    async def update(self, author_id: str, raw: Mapping[str, Any]) -> Outcome:
        result = validate_form(AuthorForm, raw)
        if not result.is_valid:
            return self._form_with_errors("Update Author", result)

        form = result.form
        assert isinstance(form, AuthorForm)
        replacement = Author(
            author_id=author_id,
            first_name=form.first_name,
            family_name=form.family_name,
            date_of_birth=form.date_of_birth,
            date_of_death=form.date_of_death,
        )
        updated = await self.author_repo.update(author_id, replacement)
        if updated is None:
            raise NotFoundError("Author", author_id)

        logger.info("Author updated", extra={"author_id": author_id})
        return Redirect(url=author_url(author_id))

    def _form_with_errors(self, title: str, result: FormResult) -> Render:
        return Render(
            view="author_form.html",
            context={
                "title": title,
                "author": result.values,
                "errors": result.errors,
            },
        )

    def _confirm_delete(self, author: Author, books: List[Book]) -> Render:
        return Render(
            view="author_delete.html",
            context={
                "title": "Delete Author",
                "author": author_display(author),
                "author_books": [book_display(b) for b in books],
            },
        )
