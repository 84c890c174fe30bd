"""
FastAPI application for the library catalog.

This module wires the page routers together and turns the two error
conditions that end a request into error pages:

- NotFoundError: the requested author, book, genre or copy does not exist
  (404);
- any other exception, typically a store failure: logged with its
  traceback and reported with a generic message (500).

Validation failures and blocked deletes are not errors; the use cases
handle them by re-rendering the page.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse, Response

from library_catalog import __version__
from library_catalog.api.rendering import REDIRECT_STATUS, render_page
from library_catalog.api.routers import (
    authors,
    book_instances,
    books,
    catalog,
    genres,
    system,
)
from library_catalog.config import setup_logging
from library_catalog.domain.display import CATALOG_PREFIX
from library_catalog.use_cases import NotFoundError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong while loading this page."


async def not_found_handler(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, NotFoundError)
    logger.warning(
        "Entity not found",
        extra={
            "path": request.url.path,
            "entity": exc.entity,
            "entity_id": exc.entity_id,
        },
    )
    return render_page(
        "error.html",
        {"title": "Not Found", "message": str(exc), "status_code": 404},
        status_code=404,
    )


async def internal_error_handler(request: Request, exc: Exception) -> Response:
    logger.error(
        "Request failed",
        exc_info=exc,
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "error_message": str(exc),
        },
    )
    return render_page(
        "error.html",
        {
            "title": "Error",
            "message": INTERNAL_ERROR_MESSAGE,
            "status_code": 500,
        },
        status_code=500,
    )


def create_app() -> FastAPI:
    """Create the catalog application with every router mounted."""
    app = FastAPI(
        title="Local Library Catalog",
        description="Catalog of the authors, books, genres and copies held "
        "by a lending library",
        version=__version__,
    )

    app.include_router(system.router)
    app.include_router(catalog.router, prefix=CATALOG_PREFIX)
    app.include_router(authors.router, prefix=CATALOG_PREFIX)
    app.include_router(genres.router, prefix=CATALOG_PREFIX)
    app.include_router(books.router, prefix=CATALOG_PREFIX)
    app.include_router(book_instances.router, prefix=CATALOG_PREFIX)

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(CATALOG_PREFIX, status_code=REDIRECT_STATUS)

    return app


# Setup logging when module is imported
setup_logging()

app = create_app()
