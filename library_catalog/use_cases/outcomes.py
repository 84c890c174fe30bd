"""
Results returned by the catalog use cases.

Every workflow step ends in exactly one of two outcomes: render a named
view with a context, or redirect to a URL. The API layer turns them into
HTTP responses. A lookup of a missing entity where the page cannot be
shown at all raises ``NotFoundError`` instead.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel, Field


class Render(BaseModel):
    """Render the template ``view`` with ``context``."""

    view: str
    context: Dict[str, Any] = Field(default_factory=dict)


class Redirect(BaseModel):
    """Send the client to ``url``."""

    url: str


Outcome = Union[Render, Redirect]


class NotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
