"""
Submitted-form sanitization and validation.

Form bodies arrive loosely typed: a multi-valued field may be missing, a
single string or a list of strings depending on how many boxes were
ticked. Each form model declares which of its fields are free text (trimmed
and HTML-escaped), multi-valued (normalized with ``coerce_to_list`` and
escaped per entry) or dates (trimmed, blank meaning absent). Sanitization
always runs first so that the submitted values can be echoed back on a
failed validation; the Pydantic model then enforces the rule set and
reports failures in field order.
"""

import logging
import re
from datetime import date, datetime
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
)

from markupsafe import escape
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .author import NAME_MAX_LENGTH
from .book_instance import BookInstanceStatus

logger = logging.getLogger(__name__)

ALPHANUMERIC = re.compile(r"^[A-Za-z0-9]+$")


def coerce_to_list(value: Any) -> List[Any]:
    """Normalize a possibly multi-valued field to a list.

    Absent (``None``) becomes ``[]``, a scalar becomes a one-element list and
    any list or tuple is copied into a new list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def sanitize_text(value: Any) -> str:
    """Trim and HTML-escape a submitted text value."""
    if value is None:
        return ""
    return str(escape(str(value).strip()))


def form_error(message: str) -> PydanticCustomError:
    return PydanticCustomError("catalog_form", message)


def require_text(value: str, message: str) -> str:
    if not value:
        raise form_error(message)
    return value


def parse_iso_date(value: Any, message: str) -> Optional[date]:
    """Parse an optional ISO-8601 date; blank means absent."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise form_error(message)
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise form_error(message)


class FormError(BaseModel):
    """One failed validation rule."""

    field: str
    message: str


class CatalogForm(BaseModel):
    """Base class for entity forms."""

    text_fields: ClassVar[Tuple[str, ...]] = ()
    list_fields: ClassVar[Tuple[str, ...]] = ()
    date_fields: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def sanitize(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """Apply the sanitization rules, returning a new mapping."""
        values: Dict[str, Any] = {}
        for name in cls.text_fields:
            values[name] = sanitize_text(raw.get(name))
        for name in cls.list_fields:
            values[name] = [
                str(escape(item)) for item in coerce_to_list(raw.get(name))
            ]
        for name in cls.date_fields:
            value = raw.get(name)
            values[name] = value.strip() if isinstance(value, str) else value
        return values


class FormResult(BaseModel):
    """Outcome of validating a submitted form.

    ``values`` always holds the sanitized submission; ``form`` is only set
    when ``errors`` is empty.
    """

    values: Dict[str, Any]
    errors: List[FormError]
    form: Optional[CatalogForm] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_form(
    form_class: Type[CatalogForm], raw: Mapping[str, Any]
) -> FormResult:
    """Sanitize and validate a raw submission against ``form_class``."""
    values = form_class.sanitize(raw)
    try:
        form = form_class.model_validate(values)
    except ValidationError as e:
        errors = [
            FormError(
                field=".".join(str(part) for part in error["loc"]),
                message=error["msg"],
            )
            for error in e.errors()
        ]
        logger.info(
            "Form validation failed",
            extra={
                "form": form_class.__name__,
                "error_fields": [error.field for error in errors],
            },
        )
        return FormResult(values=values, errors=errors)

    return FormResult(values=values, errors=[], form=form)


class AuthorForm(CatalogForm):
    text_fields: ClassVar[Tuple[str, ...]] = ("first_name", "family_name")
    date_fields: ClassVar[Tuple[str, ...]] = ("date_of_birth", "date_of_death")

    first_name: str
    family_name: str
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None

    @field_validator("first_name")
    @classmethod
    def first_name_rules(cls, v: str) -> str:
        require_text(v, "First name must be specified.")
        if not ALPHANUMERIC.match(v):
            raise form_error("First name has non-alphanumeric characters")
        if len(v) > NAME_MAX_LENGTH:
            raise form_error("First name is too long")
        return v

    @field_validator("family_name")
    @classmethod
    def family_name_rules(cls, v: str) -> str:
        require_text(v, "Family name must be specified.")
        if not ALPHANUMERIC.match(v):
            raise form_error("Family name has non-alphanumeric characters")
        if len(v) > NAME_MAX_LENGTH:
            raise form_error("Family name is too long")
        return v

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def parse_date_of_birth(cls, v: Any) -> Optional[date]:
        return parse_iso_date(v, "Invalid date of birth")

    @field_validator("date_of_death", mode="before")
    @classmethod
    def parse_date_of_death(cls, v: Any) -> Optional[date]:
        return parse_iso_date(v, "Invalid date of death")


class GenreForm(CatalogForm):
    text_fields: ClassVar[Tuple[str, ...]] = ("name",)

    name: str

    @field_validator("name")
    @classmethod
    def name_rules(cls, v: str) -> str:
        return require_text(v, "Genre name required")


class BookForm(CatalogForm):
    text_fields: ClassVar[Tuple[str, ...]] = (
        "title",
        "author_id",
        "summary",
        "isbn",
    )
    list_fields: ClassVar[Tuple[str, ...]] = ("genre_ids",)

    title: str
    author_id: str
    summary: str
    isbn: str
    genre_ids: List[str] = []

    @field_validator("title")
    @classmethod
    def title_rules(cls, v: str) -> str:
        return require_text(v, "Title must not be empty.")

    @field_validator("author_id")
    @classmethod
    def author_rules(cls, v: str) -> str:
        return require_text(v, "Author must not be empty.")

    @field_validator("summary")
    @classmethod
    def summary_rules(cls, v: str) -> str:
        return require_text(v, "Summary must not be empty.")

    @field_validator("isbn")
    @classmethod
    def isbn_rules(cls, v: str) -> str:
        return require_text(v, "ISBN must not be empty")


class BookInstanceForm(CatalogForm):
    text_fields: ClassVar[Tuple[str, ...]] = ("book_id", "imprint", "status")
    date_fields: ClassVar[Tuple[str, ...]] = ("due_back",)

    book_id: str
    imprint: str
    due_back: Optional[date] = None
    status: BookInstanceStatus = BookInstanceStatus.MAINTENANCE

    @field_validator("book_id")
    @classmethod
    def book_rules(cls, v: str) -> str:
        return require_text(v, "Book must be specified")

    @field_validator("imprint")
    @classmethod
    def imprint_rules(cls, v: str) -> str:
        return require_text(v, "Imprint must be specified")

    @field_validator("due_back", mode="before")
    @classmethod
    def parse_due_back(cls, v: Any) -> Optional[date]:
        return parse_iso_date(v, "Invalid date")

    @field_validator("status", mode="before")
    @classmethod
    def status_rules(cls, v: Any) -> BookInstanceStatus:
        # Blank selects the default status
        if v is None or v == "":
            return BookInstanceStatus.MAINTENANCE
        try:
            return BookInstanceStatus(v)
        except ValueError:
            raise form_error("Invalid status")
