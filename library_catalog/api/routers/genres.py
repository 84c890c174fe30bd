"""
Genre pages router.

Routes (mounted with the '/catalog' prefix):
- GET  /catalog/genres - Genre list
- GET|POST /catalog/genre/create - Genre form; an existing name redirects
  to that genre
- GET  /catalog/genre/{genre_id} - Genre detail with its books
- GET|POST /catalog/genre/{genre_id}/delete - Delete unless books use it
- GET|POST /catalog/genre/{genre_id}/update - Rename the genre
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from library_catalog.api.dependencies import get_genre_use_case
from library_catalog.api.forms import read_form
from library_catalog.api.rendering import to_response
from library_catalog.use_cases import GenreUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/genres", response_class=HTMLResponse)
async def genre_list(
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    logger.info("Genre list requested")
    return to_response(await use_case.list())


@router.get("/genre/create", response_class=HTMLResponse)
async def genre_create_form(
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    return to_response(await use_case.create_form())


@router.post("/genre/create")
async def genre_create(
    request: Request,
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    logger.info("Genre create submitted")
    return to_response(await use_case.create(await read_form(request)))


@router.get("/genre/{genre_id}", response_class=HTMLResponse)
async def genre_detail(
    genre_id: str,
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    logger.info("Genre detail requested", extra={"genre_id": genre_id})
    return to_response(await use_case.detail(genre_id))


@router.get("/genre/{genre_id}/delete", response_class=HTMLResponse)
async def genre_delete_form(
    genre_id: str,
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    return to_response(await use_case.delete_form(genre_id))


@router.post("/genre/{genre_id}/delete")
async def genre_delete(
    genre_id: str,
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    logger.info("Genre delete submitted", extra={"genre_id": genre_id})
    return to_response(await use_case.delete(genre_id))


@router.get("/genre/{genre_id}/update", response_class=HTMLResponse)
async def genre_update_form(
    genre_id: str,
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    return to_response(await use_case.update_form(genre_id))


@router.post("/genre/{genre_id}/update")
async def genre_update(
    genre_id: str,
    request: Request,
    use_case: GenreUseCase = Depends(get_genre_use_case),
) -> Response:
    logger.info("Genre update submitted", extra={"genre_id": genre_id})
    return to_response(
        await use_case.update(genre_id, await read_form(request))
    )
