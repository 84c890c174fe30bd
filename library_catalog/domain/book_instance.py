"""
BookInstance domain model: one physical, lendable copy of a book.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class BookInstanceStatus(str, Enum):
    """Lending status of a copy."""

    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


def _today() -> date:
    return datetime.now(timezone.utc).date()


class BookInstance(BaseModel):
    """A physical copy of a book."""

    book_instance_id: str
    book_id: str
    imprint: str
    status: BookInstanceStatus = BookInstanceStatus.MAINTENANCE
    due_back: date = Field(default_factory=_today)

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @field_validator("book_id", "imprint")
    @classmethod
    def required_text_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Book and imprint cannot be empty")
        return v.strip()
