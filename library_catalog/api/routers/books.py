"""
Book pages router.

Routes (mounted with the '/catalog' prefix):
- GET  /catalog/books - Book list with authors
- GET|POST /catalog/book/create - Book form offering authors and genres
- GET  /catalog/book/{book_id} - Book detail with its copies
- GET|POST /catalog/book/{book_id}/delete - Delete unless copies remain
- GET|POST /catalog/book/{book_id}/update - Replace the book's fields
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from library_catalog.api.dependencies import get_book_use_case
from library_catalog.api.forms import read_form
from library_catalog.api.rendering import to_response
from library_catalog.use_cases import BookUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/books", response_class=HTMLResponse)
async def book_list(
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    logger.info("Book list requested")
    return to_response(await use_case.list())


@router.get("/book/create", response_class=HTMLResponse)
async def book_create_form(
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    return to_response(await use_case.create_form())


@router.post("/book/create")
async def book_create(
    request: Request,
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    logger.info("Book create submitted")
    return to_response(await use_case.create(await read_form(request)))


@router.get("/book/{book_id}", response_class=HTMLResponse)
async def book_detail(
    book_id: str,
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    logger.info("Book detail requested", extra={"book_id": book_id})
    return to_response(await use_case.detail(book_id))


@router.get("/book/{book_id}/delete", response_class=HTMLResponse)
async def book_delete_form(
    book_id: str,
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    return to_response(await use_case.delete_form(book_id))


@router.post("/book/{book_id}/delete")
async def book_delete(
    book_id: str,
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    logger.info("Book delete submitted", extra={"book_id": book_id})
    return to_response(await use_case.delete(book_id))


@router.get("/book/{book_id}/update", response_class=HTMLResponse)
async def book_update_form(
    book_id: str,
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    return to_response(await use_case.update_form(book_id))


@router.post("/book/{book_id}/update")
async def book_update(
    book_id: str,
    request: Request,
    use_case: BookUseCase = Depends(get_book_use_case),
) -> Response:
    logger.info("Book update submitted", extra={"book_id": book_id})
    return to_response(await use_case.update(book_id, await read_form(request)))
