"""
Read-time resolution of references between catalog entities.

Books hold an author id and genre ids; copies hold a book id. The list and
detail pages show the referenced entities, so the ids are resolved here
with one concurrent lookup per distinct id. A reference to an entity that
no longer exists resolves to absent: the page still renders, without it.
"""

import logging
from typing import Any, Dict, Iterable, List, Sequence

from library_catalog.domain import Book, BookInstance
from library_catalog.domain.display import (
    BookDisplay,
    BookInstanceDisplay,
    book_display,
    book_instance_display,
)
from library_catalog.repositories import (
    AuthorRepository,
    BookRepository,
    DocumentRepository,
    GenreRepository,
)
from .aggregate import fetch_all

logger = logging.getLogger(__name__)


async def get_many(
    repo: DocumentRepository, ids: Iterable[str]
) -> Dict[str, Any]:
    """Fetch the entities with the given ids concurrently.

    Returns a mapping from each distinct id to its entity, or None where no
    entity has that id.
    """
    distinct = list(dict.fromkeys(ids))
    return await fetch_all(
        {entity_id: _getter(repo, entity_id) for entity_id in distinct}
    )


def _getter(repo: DocumentRepository, entity_id: str):
    return lambda: repo.get(entity_id)


async def populate_books(
    books: Sequence[Book],
    author_repo: AuthorRepository,
    genre_repo: GenreRepository,
) -> List[BookDisplay]:
    """Project books with their author and genres resolved."""
    bundle = await fetch_all(
        {
            "authors": lambda: get_many(
                author_repo, (book.author_id for book in books)
            ),
            "genres": lambda: get_many(
                genre_repo,
                (genre_id for book in books for genre_id in book.genre_ids),
            ),
        }
    )
    authors = bundle["authors"]
    genres = bundle["genres"]

    displays = []
    for book in books:
        author = authors.get(book.author_id)
        if author is None:
            logger.debug(
                "Book references a missing author",
                extra={"book_id": book.book_id, "author_id": book.author_id},
            )
        resolved_genres = [
            genres[genre_id]
            for genre_id in book.genre_ids
            if genres.get(genre_id) is not None
        ]
        displays.append(book_display(book, author, resolved_genres))
    return displays


async def populate_book(
    book: Book,
    author_repo: AuthorRepository,
    genre_repo: GenreRepository,
) -> BookDisplay:
    """Project a single book with its author and genres resolved."""
    displays = await populate_books([book], author_repo, genre_repo)
    return displays[0]


async def populate_book_instances(
    instances: Sequence[BookInstance], book_repo: BookRepository
) -> List[BookInstanceDisplay]:
    """Project copies with the book they are a copy of."""
    books = await get_many(book_repo, (i.book_id for i in instances))
    displays = []
    for instance in instances:
        book = books.get(instance.book_id)
        displays.append(
            book_instance_display(
                instance, book_display(book) if book is not None else None
            )
        )
    return displays
