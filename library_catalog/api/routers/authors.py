"""
Author pages router.

Routes (mounted with the '/catalog' prefix):
- GET  /catalog/authors - Author list
- GET  /catalog/author/create - Empty author form
- POST /catalog/author/create - Create an author
- GET  /catalog/author/{author_id} - Author detail with their books
- GET  /catalog/author/{author_id}/delete - Delete confirmation
- POST /catalog/author/{author_id}/delete - Delete unless books remain
- GET  /catalog/author/{author_id}/update - Pre-filled author form
- POST /catalog/author/{author_id}/update - Replace the author's fields
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from library_catalog.api.dependencies import get_author_use_case
from library_catalog.api.forms import read_form
from library_catalog.api.rendering import to_response
from library_catalog.use_cases import AuthorUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/authors", response_class=HTMLResponse)
async def author_list(
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    logger.info("Author list requested")
    return to_response(await use_case.list())


@router.get("/author/create", response_class=HTMLResponse)
async def author_create_form(
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    return to_response(await use_case.create_form())


@router.post("/author/create")
async def author_create(
    request: Request,
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    logger.info("Author create submitted")
    return to_response(await use_case.create(await read_form(request)))


@router.get("/author/{author_id}", response_class=HTMLResponse)
async def author_detail(
    author_id: str,
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    logger.info("Author detail requested", extra={"author_id": author_id})
    return to_response(await use_case.detail(author_id))


@router.get("/author/{author_id}/delete", response_class=HTMLResponse)
async def author_delete_form(
    author_id: str,
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    return to_response(await use_case.delete_form(author_id))


@router.post("/author/{author_id}/delete")
async def author_delete(
    author_id: str,
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    logger.info("Author delete submitted", extra={"author_id": author_id})
    return to_response(await use_case.delete(author_id))


@router.get("/author/{author_id}/update", response_class=HTMLResponse)
async def author_update_form(
    author_id: str,
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    return to_response(await use_case.update_form(author_id))


@router.post("/author/{author_id}/update")
async def author_update(
    author_id: str,
    request: Request,
    use_case: AuthorUseCase = Depends(get_author_use_case),
) -> Response:
    logger.info("Author update submitted", extra={"author_id": author_id})
    return to_response(
        await use_case.update(author_id, await read_form(request))
    )
