"""
Book domain model.

A book references exactly one author and any number of genres by id. The
referenced entities are resolved at read time, never embedded.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Book(BaseModel):
    """A catalogued title."""

    book_id: str
    title: str
    author_id: str
    summary: str
    isbn: str
    genre_ids: List[str] = Field(default_factory=list)

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @field_validator("title", "author_id", "summary", "isbn")
    @classmethod
    def required_text_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Required book fields cannot be empty")
        return v.strip()
