"""
Genre domain model.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Genre(BaseModel):
    """A category books can be filed under.

    Names are treated as unique: the create workflow looks up an existing
    genre by name before inserting a new one.
    """

    genre_id: str
    name: str

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Genre name cannot be empty")
        return v.strip()
