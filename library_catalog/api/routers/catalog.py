"""
Catalog home page router.

Routes (mounted with the '/catalog' prefix):
- GET /catalog - Counts of books, copies, authors and genres
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from library_catalog.api.dependencies import get_catalog_index_use_case
from library_catalog.api.rendering import to_response
from library_catalog.use_cases import CatalogIndexUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_class=HTMLResponse)
async def catalog_home(
    use_case: CatalogIndexUseCase = Depends(get_catalog_index_use_case),
) -> Response:
    logger.info("Catalog home requested")
    return to_response(await use_case.summary())
