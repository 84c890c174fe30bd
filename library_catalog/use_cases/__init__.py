"""
Use cases for the library catalog.

Each use case class groups the page workflows of one entity type and
returns Render or Redirect outcomes for the API layer to turn into
responses.
"""

from .aggregate import fetch_all
from .authors import AuthorUseCase
from .book_instances import BookInstanceUseCase
from .books import BookUseCase
from .genres import GenreUseCase
from .guard import GuardResult, can_delete
from .index import CatalogIndexUseCase
from .outcomes import NotFoundError, Outcome, Redirect, Render

__all__ = [
    "AuthorUseCase",
    "BookInstanceUseCase",
    "BookUseCase",
    "CatalogIndexUseCase",
    "GenreUseCase",
    "GuardResult",
    "NotFoundError",
    "Outcome",
    "Redirect",
    "Render",
    "can_delete",
    "fetch_all",
]
