"""
Domain layer for library_catalog.

Entities are Pydantic models with no framework dependencies. Display
projections and form rule sets live beside them as pure functions and
models.
"""

from .author import Author
from .book import Book
from .book_instance import BookInstance, BookInstanceStatus
from .genre import Genre

__all__ = [
    "Author",
    "Book",
    "BookInstance",
    "BookInstanceStatus",
    "Genre",
]
