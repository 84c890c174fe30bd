"""
Book instance (copy) pages router.

Routes (mounted with the '/catalog' prefix):
- GET  /catalog/bookinstances - Every copy with its book and status
- GET|POST /catalog/bookinstance/create - Copy form offering the books
- GET  /catalog/bookinstance/{book_instance_id} - Copy detail
- GET|POST /catalog/bookinstance/{book_instance_id}/delete - Delete a copy
- GET|POST /catalog/bookinstance/{book_instance_id}/update - Edit a copy
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from library_catalog.api.dependencies import get_book_instance_use_case
from library_catalog.api.forms import read_form
from library_catalog.api.rendering import to_response
from library_catalog.use_cases import BookInstanceUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/bookinstances", response_class=HTMLResponse)
async def book_instance_list(
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    logger.info("Book instance list requested")
    return to_response(await use_case.list())


@router.get("/bookinstance/create", response_class=HTMLResponse)
async def book_instance_create_form(
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    return to_response(await use_case.create_form())


@router.post("/bookinstance/create")
async def book_instance_create(
    request: Request,
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    logger.info("Book instance create submitted")
    return to_response(await use_case.create(await read_form(request)))


@router.get("/bookinstance/{book_instance_id}", response_class=HTMLResponse)
async def book_instance_detail(
    book_instance_id: str,
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    logger.info(
        "Book instance detail requested",
        extra={"book_instance_id": book_instance_id},
    )
    return to_response(await use_case.detail(book_instance_id))


@router.get(
    "/bookinstance/{book_instance_id}/delete", response_class=HTMLResponse
)
async def book_instance_delete_form(
    book_instance_id: str,
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    return to_response(await use_case.delete_form(book_instance_id))


@router.post("/bookinstance/{book_instance_id}/delete")
async def book_instance_delete(
    book_instance_id: str,
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    logger.info(
        "Book instance delete submitted",
        extra={"book_instance_id": book_instance_id},
    )
    return to_response(await use_case.delete(book_instance_id))


@router.get(
    "/bookinstance/{book_instance_id}/update", response_class=HTMLResponse
)
async def book_instance_update_form(
    book_instance_id: str,
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    return to_response(await use_case.update_form(book_instance_id))


@router.post("/bookinstance/{book_instance_id}/update")
async def book_instance_update(
    book_instance_id: str,
    request: Request,
    use_case: BookInstanceUseCase = Depends(get_book_instance_use_case),
) -> Response:
    logger.info(
        "Book instance update submitted",
        extra={"book_instance_id": book_instance_id},
    )
    return to_response(
        await use_case.update(book_instance_id, await read_form(request))
    )
