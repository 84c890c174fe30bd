"""
Read-time projections of catalog entities.

Values such as an author's display name, lifespan or an entity's canonical
URL are derived from a stored snapshot and never persisted. Each function
here is a pure projection: it takes an entity (plus any references the caller
already resolved) and returns a display model for the views.
"""

from datetime import date
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from .author import Author
from .book import Book
from .book_instance import BookInstance, BookInstanceStatus
from .genre import Genre

CATALOG_PREFIX = "/catalog"

AUTHOR_LIST_URL = f"{CATALOG_PREFIX}/authors"
BOOK_LIST_URL = f"{CATALOG_PREFIX}/books"
GENRE_LIST_URL = f"{CATALOG_PREFIX}/genres"
BOOK_INSTANCE_LIST_URL = f"{CATALOG_PREFIX}/bookinstances"


def author_url(author_id: str) -> str:
    return f"{CATALOG_PREFIX}/author/{author_id}"


def genre_url(genre_id: str) -> str:
    return f"{CATALOG_PREFIX}/genre/{genre_id}"


def book_url(book_id: str) -> str:
    return f"{CATALOG_PREFIX}/book/{book_id}"


def book_instance_url(book_instance_id: str) -> str:
    return f"{CATALOG_PREFIX}/bookinstance/{book_instance_id}"


def format_slash_date(value: Optional[date]) -> str:
    """Format as ``YYYY/MM/DD``, empty string when absent."""
    return value.strftime("%Y/%m/%d") if value else ""


def format_input_date(value: Optional[date]) -> str:
    """Format as ``YYYY-MM-DD`` for ``<input type="date">`` values."""
    return value.isoformat() if value else ""


def ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_long_date(value: Optional[date]) -> str:
    """Format as e.g. ``October 18th, 2026``."""
    if value is None:
        return ""
    return (
        f"{value.strftime('%B')} {value.day}{ordinal_suffix(value.day)}, "
        f"{value.year}"
    )


def full_name(first_name: str, family_name: str) -> str:
    """``"family_name, first_name"``, or empty if either part is missing."""
    if first_name and family_name:
        return f"{family_name}, {first_name}"
    return ""


def lifespan(date_of_birth: Optional[date], date_of_death: Optional[date]) -> str:
    """Birth and death dates as ``YYYY/MM/DD - YYYY/MM/DD``.

    The birth part is empty when unknown; the `` - death`` suffix only
    appears when a death date is known.
    """
    born = format_slash_date(date_of_birth)
    if date_of_death is None:
        return born
    return f"{born} - {format_slash_date(date_of_death)}"


class AuthorDisplay(BaseModel):
    author_id: str
    first_name: str
    family_name: str
    name: str
    lifespan: str
    url: str
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None
    date_of_birth_input: str = ""
    date_of_death_input: str = ""


class GenreDisplay(BaseModel):
    genre_id: str
    name: str
    url: str
    checked: bool = False


class BookDisplay(BaseModel):
    book_id: str
    title: str
    summary: str
    isbn: str
    url: str
    author_id: str
    author: Optional[AuthorDisplay] = None
    genre_ids: List[str] = Field(default_factory=list)
    genres: List[GenreDisplay] = Field(default_factory=list)


class BookInstanceDisplay(BaseModel):
    book_instance_id: str
    book_id: str
    imprint: str
    status: BookInstanceStatus
    url: str
    due_back: date
    due_back_formatted: str
    due_back_input: str
    book: Optional[BookDisplay] = None


def author_display(author: Author) -> AuthorDisplay:
    return AuthorDisplay(
        author_id=author.author_id,
        first_name=author.first_name,
        family_name=author.family_name,
        name=full_name(author.first_name, author.family_name),
        lifespan=lifespan(author.date_of_birth, author.date_of_death),
        url=author_url(author.author_id),
        date_of_birth=author.date_of_birth,
        date_of_death=author.date_of_death,
        date_of_birth_input=format_input_date(author.date_of_birth),
        date_of_death_input=format_input_date(author.date_of_death),
    )


def genre_display(
    genre: Genre, selected_ids: Iterable[str] = ()
) -> GenreDisplay:
    return GenreDisplay(
        genre_id=genre.genre_id,
        name=genre.name,
        url=genre_url(genre.genre_id),
        checked=genre.genre_id in set(selected_ids),
    )


def genre_choices(
    genres: Iterable[Genre], selected_ids: Iterable[str] = ()
) -> List[GenreDisplay]:
    """Genres for a selection input, with the selected ones checked."""
    selected = set(selected_ids)
    return [genre_display(genre, selected) for genre in genres]


def book_display(
    book: Book,
    author: Optional[Author] = None,
    genres: Iterable[Genre] = (),
) -> BookDisplay:
    return BookDisplay(
        book_id=book.book_id,
        title=book.title,
        summary=book.summary,
        isbn=book.isbn,
        url=book_url(book.book_id),
        author_id=book.author_id,
        author=author_display(author) if author is not None else None,
        genre_ids=list(book.genre_ids),
        genres=[genre_display(genre) for genre in genres],
    )


def book_instance_display(
    instance: BookInstance, book: Optional[BookDisplay] = None
) -> BookInstanceDisplay:
    return BookInstanceDisplay(
        book_instance_id=instance.book_instance_id,
        book_id=instance.book_id,
        imprint=instance.imprint,
        status=instance.status,
        url=book_instance_url(instance.book_instance_id),
        due_back=instance.due_back,
        due_back_formatted=format_long_date(instance.due_back),
        due_back_input=format_input_date(instance.due_back),
        book=book,
    )
