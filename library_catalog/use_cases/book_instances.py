"""
Book instance (copy) workflows: list, detail, create, delete and update.

Nothing references a copy, so deleting one needs no guard: the delete goes
ahead once the copy is found, and a copy that is already gone redirects to
the list.
"""

import logging
from typing import Any, Mapping, Optional

from library_catalog.domain import BookInstance, BookInstanceStatus
from library_catalog.domain.display import (
    BOOK_INSTANCE_LIST_URL,
    book_display,
    book_instance_url,
)
from library_catalog.domain.forms import (
    BookInstanceForm,
    FormResult,
    validate_form,
)
from library_catalog.repositories import BookInstanceRepository, BookRepository
from library_catalog.validation import ensure_repository_protocol
from .aggregate import fetch_all
from .outcomes import NotFoundError, Outcome, Redirect, Render
from .population import populate_book_instances

logger = logging.getLogger(__name__)

STATUS_CHOICES = [status.value for status in BookInstanceStatus]


class BookInstanceUseCase:
    """Use case for browsing and maintaining the copies of books."""

    def __init__(
        self,
        book_instance_repo: BookInstanceRepository,
        book_repo: BookRepository,
    ) -> None:
        self.book_instance_repo = ensure_repository_protocol(
            book_instance_repo,
            BookInstanceRepository,  # type: ignore[type-abstract]
        )
        self.book_repo = ensure_repository_protocol(
            book_repo, BookRepository  # type: ignore[type-abstract]
        )

    async def _populated(self, book_instance_id: str) -> Optional[Any]:
        instance = await self.book_instance_repo.get(book_instance_id)
        if instance is None:
            return None
        displays = await populate_book_instances([instance], self.book_repo)
        return displays[0]

    def _form(
        self,
        title: str,
        book_instance: Any,
        books: Any,
        selected_book: str,
        errors: Any = None,
    ) -> Render:
        context = {
            "title": title,
            "bookinstance": book_instance,
            "book_list": [book_display(b) for b in books],
            "selected_book": selected_book,
            "statuses": STATUS_CHOICES,
        }
        if errors:
            context["errors"] = errors
        return Render(view="bookinstance_form.html", context=context)

    async def _form_with_errors(
        self, title: str, result: FormResult
    ) -> Render:
        books = await self.book_repo.find(sort_by="title")
        return self._form(
            title,
            result.values,
            books,
            result.values.get("book_id", ""),
            result.errors,
        )

    async def list(self) -> Render:
        instances = await self.book_instance_repo.find()
        return Render(
            view="bookinstance_list.html",
            context={
                "title": "Book Instance List",
                "bookinstance_list": await populate_book_instances(
                    instances, self.book_repo
                ),
            },
        )

    async def detail(self, book_instance_id: str) -> Render:
        display = await self._populated(book_instance_id)
        if display is None:
            raise NotFoundError("Book copy", book_instance_id)

        title = f"Copy: {display.book.title}" if display.book else "Copy"
        return Render(
            view="bookinstance_detail.html",
            context={"title": title, "bookinstance": display},
        )

    async def create_form(self) -> Render:
        books = await self.book_repo.find(sort_by="title")
        return self._form("Create BookInstance", None, books, "")

    async def create(self, raw: Mapping[str, Any]) -> Outcome:
        result = validate_form(BookInstanceForm, raw)
        if not result.is_valid:
            return await self._form_with_errors("Create BookInstance", result)

        form = result.form
        assert isinstance(form, BookInstanceForm)
        instance = BookInstance(
            book_instance_id=await self.book_instance_repo.generate_id(),
            book_id=form.book_id,
            imprint=form.imprint,
            status=form.status,
        )
        if form.due_back is not None:
            instance.due_back = form.due_back
        await self.book_instance_repo.insert(instance)

        logger.info(
            "Book instance created",
            extra={"book_instance_id": instance.book_instance_id},
        )
        return Redirect(url=book_instance_url(instance.book_instance_id))

    async def delete_form(self, book_instance_id: str) -> Outcome:
        display = await self._populated(book_instance_id)
        if display is None:
            return Redirect(url=BOOK_INSTANCE_LIST_URL)
        return Render(
            view="bookinstance_delete.html",
            context={"title": "Delete BookInstance", "bookinstance": display},
        )

    async def delete(self, book_instance_id: str) -> Outcome:
        """Delete the copy; a copy that is already gone is not an error."""
        instance = await self.book_instance_repo.get(book_instance_id)
        if instance is not None:
            await self.book_instance_repo.delete(book_instance_id)
            logger.info(
                "Book instance deleted",
                extra={"book_instance_id": book_instance_id},
            )
        return Redirect(url=BOOK_INSTANCE_LIST_URL)

    async def update_form(self, book_instance_id: str) -> Render:
        bundle = await fetch_all(
            {
                "bookinstance": lambda: self._populated(book_instance_id),
                "books": lambda: self.book_repo.find(sort_by="title"),
            }
        )
        display = bundle["bookinstance"]
        if display is None:
            raise NotFoundError("Book copy", book_instance_id)

        return self._form(
            "Update BookInstance", display, bundle["books"], display.book_id
        )

    async def update(
        self, book_instance_id: str, raw: Mapping[str, Any]
    ) -> Outcome:
        result = validate_form(BookInstanceForm, raw)
        if not result.is_valid:
            return await self._form_with_errors("Update BookInstance", result)

        form = result.form
        assert isinstance(form, BookInstanceForm)
        replacement = BookInstance(
            book_instance_id=book_instance_id,
            book_id=form.book_id,
            imprint=form.imprint,
            status=form.status,
        )
        if form.due_back is not None:
            replacement.due_back = form.due_back
        updated = await self.book_instance_repo.update(
            book_instance_id, replacement
        )
        if updated is None:
            raise NotFoundError("Book copy", book_instance_id)

        logger.info(
            "Book instance updated",
            extra={"book_instance_id": book_instance_id},
        )
        return Redirect(url=book_instance_url(book_instance_id))
