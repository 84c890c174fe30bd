#!/usr/bin/env python3
"""
CLI for seeding the configured store with a sample catalog.

Every entity is created through the catalog's create use cases, exactly as
if it had been submitted through the web forms, so sanitization and
validation apply and genres are not duplicated when the command is run
twice. Run it against the minio backend; a memory store only lives as long
as this process.
"""

import asyncio
import logging
from typing import Any, Dict, List, Mapping

import click

from library_catalog.api.dependencies import DependencyContainer
from library_catalog.config import Settings, StorageBackend, setup_logging
from library_catalog.use_cases import (
    AuthorUseCase,
    BookInstanceUseCase,
    BookUseCase,
    GenreUseCase,
    Redirect,
)

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS: List[Dict[str, str]] = [
    {
        "first_name": "Patrick",
        "family_name": "Rothfuss",
        "date_of_birth": "1973-06-06",
    },
    {
        "first_name": "Ben",
        "family_name": "Bova",
        "date_of_birth": "1932-11-08",
    },
    {
        "first_name": "Isaac",
        "family_name": "Asimov",
        "date_of_birth": "1920-01-02",
        "date_of_death": "1992-04-06",
    },
    {"first_name": "Bob", "family_name": "Billings"},
    {
        "first_name": "Jim",
        "family_name": "Jones",
        "date_of_birth": "1971-12-16",
    },
]

SAMPLE_GENRES = ["Fantasy", "Science Fiction", "French Poetry"]

# author and genres are indexes into the lists above
SAMPLE_BOOKS: List[Dict[str, Any]] = [
    {
        "title": "The Name of the Wind (The Kingkiller Chronicle, #1)",
        "summary": "I have stolen princesses back from sleeping barrow "
        "kings. I burned down the town of Trebon.",
        "isbn": "9781473211896",
        "author": 0,
        "genres": [0],
    },
    {
        "title": "The Wise Man's Fear (The Kingkiller Chronicle, #2)",
        "summary": "Picking up the tale of Kvothe Kingkiller once again.",
        "isbn": "9788401352836",
        "author": 0,
        "genres": [0],
    },
    {
        "title": "The Slow Regard of Silent Things",
        "summary": "Deep below the University, there is a dark place.",
        "isbn": "9780756411336",
        "author": 0,
        "genres": [0],
    },
    {
        "title": "Apes and Angels",
        "summary": "Humankind headed out to the stars not for conquest, "
        "nor exploration, nor even for curiosity.",
        "isbn": "9780765379528",
        "author": 1,
        "genres": [1],
    },
    {
        "title": "Death Wave",
        "summary": "In Ben Bova's previous novel New Earth, Jordan Kell "
        "led the first human mission beyond the solar system.",
        "isbn": "9780765379504",
        "author": 1,
        "genres": [1],
    },
    {
        "title": "Test Book 1",
        "summary": "Summary of test book 1",
        "isbn": "ISBN111111",
        "author": 4,
        "genres": [0, 1],
    },
    {
        "title": "Test Book 2",
        "summary": "Summary of test book 2",
        "isbn": "ISBN222222",
        "author": 3,
        "genres": [],
    },
]

TOR_2016 = "New York Tom Doherty Associates, 2016."
TOR_2015 = "New York, NY Tom Doherty Associates, LLC, 2015."

# book is an index into SAMPLE_BOOKS
SAMPLE_COPIES: List[Dict[str, Any]] = [
    {"book": 0, "imprint": "London Gollancz, 2014.", "status": "Available"},
    {"book": 1, "imprint": "Gollancz, 2011.", "status": "Loaned"},
    {"book": 2, "imprint": "Gollancz, 2015."},
    {"book": 3, "imprint": TOR_2016, "status": "Available"},
    {"book": 3, "imprint": TOR_2016, "status": "Available"},
    {"book": 3, "imprint": TOR_2016, "status": "Available"},
    {"book": 4, "imprint": TOR_2015, "status": "Available"},
    {"book": 4, "imprint": TOR_2015, "status": "Maintenance"},
    {"book": 4, "imprint": TOR_2015, "status": "Loaned"},
    {"book": 0, "imprint": "Imprint XXX2"},
    {"book": 1, "imprint": "Imprint XXX3"},
]


class PopulateError(click.ClickException):
    """A sample entity was rejected by the create use case."""


async def create_entity(use_case: Any, raw: Mapping[str, Any]) -> str:
    """Submit ``raw`` to a create use case and return the new entity's id."""
    outcome = await use_case.create(raw)
    if not isinstance(outcome, Redirect):
        errors = outcome.context.get("errors", [])
        raise PopulateError(
            "Sample entity rejected: "
            + "; ".join(error.message for error in errors)
        )
    return outcome.url.rsplit("/", 1)[-1]


async def populate(container: DependencyContainer) -> Dict[str, int]:
    """Create the sample catalog and return how many of each were created."""
    author_repo = await container.get_repository("author")
    book_repo = await container.get_repository("book")
    genre_repo = await container.get_repository("genre")
    book_instance_repo = await container.get_repository("book_instance")

    authors = AuthorUseCase(author_repo=author_repo, book_repo=book_repo)
    genres = GenreUseCase(genre_repo=genre_repo, book_repo=book_repo)
    books = BookUseCase(
        book_repo=book_repo,
        author_repo=author_repo,
        genre_repo=genre_repo,
        book_instance_repo=book_instance_repo,
    )
    copies = BookInstanceUseCase(
        book_instance_repo=book_instance_repo, book_repo=book_repo
    )

    author_ids = [await create_entity(authors, raw) for raw in SAMPLE_AUTHORS]
    genre_ids = [
        await create_entity(genres, {"name": name}) for name in SAMPLE_GENRES
    ]

    book_ids = []
    for sample in SAMPLE_BOOKS:
        raw = {
            "title": sample["title"],
            "summary": sample["summary"],
            "isbn": sample["isbn"],
            "author_id": author_ids[sample["author"]],
            "genre_ids": [genre_ids[i] for i in sample["genres"]],
        }
        book_ids.append(await create_entity(books, raw))

    for sample in SAMPLE_COPIES:
        raw = {
            "book_id": book_ids[sample["book"]],
            "imprint": sample["imprint"],
            "status": sample.get("status", ""),
        }
        await create_entity(copies, raw)

    counts = {
        "authors": len(author_ids),
        "genres": len(genre_ids),
        "books": len(book_ids),
        "copies": len(SAMPLE_COPIES),
    }
    logger.info("Sample catalog created", extra=counts)
    return counts


async def _main() -> None:
    settings = Settings.from_env()
    setup_logging(settings)

    if settings.storage_backend is StorageBackend.MEMORY:
        click.echo(
            "Warning: the memory backend is not persistent; set "
            "CATALOG_STORAGE_BACKEND=minio to keep the sample catalog."
        )

    counts = await populate(DependencyContainer(settings))
    for name, count in counts.items():
        click.echo(f"Created {count} {name}")


@click.command()
def main() -> None:
    """Seed the configured store with a sample catalog."""
    asyncio.run(_main())


if __name__ == "__main__":
    main()
