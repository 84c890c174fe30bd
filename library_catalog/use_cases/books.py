"""
Book workflows: list, detail, create, delete and update.

Book pages show the book's author and genres resolved from their ids, and
the create and update forms offer every author and genre for selection. A
book may not be deleted while copies of it exist.
"""

import logging
from typing import Any, Iterable, List, Mapping

from library_catalog.domain import Book, BookInstance
from library_catalog.domain.display import (
    BOOK_LIST_URL,
    author_display,
    book_display,
    book_instance_display,
    book_url,
    genre_choices,
)
from library_catalog.domain.forms import BookForm, FormResult, validate_form
from library_catalog.repositories import (
    AuthorRepository,
    BookInstanceRepository,
    BookRepository,
    GenreRepository,
)
from library_catalog.validation import ensure_repository_protocol
from .aggregate import fetch_all
from .guard import can_delete
from .outcomes import NotFoundError, Outcome, Redirect, Render
from .population import populate_book, populate_books

logger = logging.getLogger(__name__)


class BookUseCase:
    """
    Use case for browsing and maintaining books.

    Reads that need several independent queries (a book and its copies, a
    book and the author and genre lists for its form) go through
    ``fetch_all`` so the queries run concurrently.
    """

    def __init__(
        self,
        book_repo: BookRepository,
        author_repo: AuthorRepository,
        genre_repo: GenreRepository,
        book_instance_repo: BookInstanceRepository,
    ) -> None:
        self.book_repo = ensure_repository_protocol(
            book_repo, BookRepository  # type: ignore[type-abstract]
        )
        self.author_repo = ensure_repository_protocol(
            author_repo, AuthorRepository  # type: ignore[type-abstract]
        )
        self.genre_repo = ensure_repository_protocol(
            genre_repo, GenreRepository  # type: ignore[type-abstract]
        )
        self.book_instance_repo = ensure_repository_protocol(
            book_instance_repo,
            BookInstanceRepository,  # type: ignore[type-abstract]
        )

    async def _copies_of(self, book_id: str) -> List[BookInstance]:
        return await self.book_instance_repo.find({"book_id": book_id})

    async def _target_and_copies(self, book_id: str) -> Mapping[str, Any]:
        return await fetch_all(
            {
                "book": lambda: self.book_repo.get(book_id),
                "book_instances": lambda: self._copies_of(book_id),
            }
        )

    async def _choices(self) -> Mapping[str, Any]:
        return await fetch_all(
            {
                "authors": lambda: self.author_repo.find(sort_by="family_name"),
                "genres": lambda: self.genre_repo.find(sort_by="name"),
            }
        )

    def _form(
        self,
        title: str,
        book: Any,
        choices: Mapping[str, Any],
        selected_genre_ids: Iterable[str],
        errors: Any = None,
    ) -> Render:
        context = {
            "title": title,
            "book": book,
            "authors": [author_display(a) for a in choices["authors"]],
            "genres": genre_choices(choices["genres"], selected_genre_ids),
        }
        if errors:
            context["errors"] = errors
        return Render(view="book_form.html", context=context)

    async def _form_with_errors(
        self, title: str, result: FormResult
    ) -> Render:
        choices = await self._choices()
        return self._form(
            title,
            result.values,
            choices,
            result.values.get("genre_ids", []),
            result.errors,
        )

    async def list(self) -> Render:
        books = await self.book_repo.find()
        return Render(
            view="book_list.html",
            context={
                "title": "Book List",
                "book_list": await populate_books(
                    books, self.author_repo, self.genre_repo
                ),
            },
        )

    async def detail(self, book_id: str) -> Render:
        bundle = await self._target_and_copies(book_id)
        book = bundle["book"]
        if book is None:
            raise NotFoundError("Book", book_id)

        return Render(
            view="book_detail.html",
            context={
                "title": book.title,
                "book": await populate_book(
                    book, self.author_repo, self.genre_repo
                ),
                "book_instances": [
                    book_instance_display(i) for i in bundle["book_instances"]
                ],
            },
        )

    async def create_form(self) -> Render:
        choices = await self._choices()
        return self._form("Create Book", None, choices, ())

    async def create(self, raw: Mapping[str, Any]) -> Outcome:
        result = validate_form(BookForm, raw)
        if not result.is_valid:
            return await self._form_with_errors("Create Book", result)

        form = result.form
        assert isinstance(form, BookForm)
        book = Book(
            book_id=await self.book_repo.generate_id(),
            title=form.title,
            author_id=form.author_id,
            summary=form.summary,
            isbn=form.isbn,
            genre_ids=form.genre_ids,
        )
        await self.book_repo.insert(book)

        logger.info("Book created", extra={"book_id": book.book_id})
        return Redirect(url=book_url(book.book_id))

    async def delete_form(self, book_id: str) -> Outcome:
        bundle = await self._target_and_copies(book_id)
        if bundle["book"] is None:
            return Redirect(url=BOOK_LIST_URL)
        return await self._confirm_delete(
            bundle["book"], bundle["book_instances"]
        )

    async def delete(self, book_id: str) -> Outcome:
        """Delete the book unless copies of it still exist."""
        bundle = await fetch_all(
            {
                "book": lambda: self.book_repo.get(book_id),
                "guard": lambda: can_delete(book_id, self._copies_of),
            }
        )
        book = bundle["book"]
        if book is None:
            return Redirect(url=BOOK_LIST_URL)

        guard = bundle["guard"]
        if guard.blocked:
            return await self._confirm_delete(book, guard.dependents)

        await self.book_repo.delete(book_id)
        logger.info("Book deleted", extra={"book_id": book_id})
        return Redirect(url=BOOK_LIST_URL)

    async def update_form(self, book_id: str) -> Render:
        bundle = await fetch_all(
            {
                "book": lambda: self.book_repo.get(book_id),
                "choices": self._choices,
            }
        )
        book = bundle["book"]
        if book is None:
            raise NotFoundError("Book", book_id)

        return self._form(
            "Update Book", book_display(book), bundle["choices"], book.genre_ids
        )

    async def update(self, book_id: str, raw: Mapping[str, Any]) -> Outcome:
        result = validate_form(BookForm, raw)
        if not result.is_valid:
            return await self._form_with_errors("Update Book", result)

        form = result.form
        assert isinstance(form, BookForm)
        replacement = Book(
            book_id=book_id,
            title=form.title,
            author_id=form.author_id,
            summary=form.summary,
            isbn=form.isbn,
            genre_ids=form.genre_ids,
        )
        updated = await self.book_repo.update(book_id, replacement)
        if updated is None:
            raise NotFoundError("Book", book_id)

        logger.info("Book updated", extra={"book_id": book_id})
        return Redirect(url=book_url(book_id))

    async def _confirm_delete(
        self, book: Book, copies: List[BookInstance]
    ) -> Render:
        return Render(
            view="book_delete.html",
            context={
                "title": "Delete Book",
                "book": await populate_book(
                    book, self.author_repo, self.genre_repo
                ),
                "book_instances": [book_instance_display(i) for i in copies],
            },
        )
