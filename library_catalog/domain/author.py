"""
Author domain model.

An author writes zero or more books. Display-only values (full name,
lifespan, URL) are not stored; see ``display.py``.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

NAME_MAX_LENGTH = 100


class Author(BaseModel):
    """A book author."""

    author_id: str
    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    family_name: str = Field(max_length=NAME_MAX_LENGTH)
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @field_validator("first_name", "family_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Author names cannot be empty")
        return v.strip()
