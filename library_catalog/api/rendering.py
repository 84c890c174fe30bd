"""
Turning use case outcomes into HTTP responses.

Templates live in ``library_catalog/templates`` and are rendered with a
Jinja2 environment that autoescapes HTML. Free text is HTML-escaped once,
when a form is submitted, and stored that way; templates print such values
through the ``stored`` filter so they are not escaped a second time.
"""

import logging
from pathlib import Path
from typing import Any, Mapping

from fastapi.responses import HTMLResponse, RedirectResponse, Response
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from library_catalog.domain.display import (
    AUTHOR_LIST_URL,
    BOOK_INSTANCE_LIST_URL,
    BOOK_LIST_URL,
    CATALOG_PREFIX,
    GENRE_LIST_URL,
)
from library_catalog.use_cases.outcomes import Outcome, Redirect

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# Redirects after a successful POST switch the browser to GET
REDIRECT_STATUS = 302


def stored_text(value: Any) -> Markup:
    """Mark text that was HTML-escaped on input as safe to print."""
    if value is None:
        return Markup("")
    return Markup(str(value))


def create_environment(template_dir: Path = TEMPLATE_DIR) -> Environment:
    """Create the Jinja2 environment used for every page."""
    if not template_dir.exists():
        raise FileNotFoundError(
            f"Template directory not found: {template_dir}"
        )

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["stored"] = stored_text
    env.globals.update(
        catalog_url=CATALOG_PREFIX,
        author_list_url=AUTHOR_LIST_URL,
        book_list_url=BOOK_LIST_URL,
        genre_list_url=GENRE_LIST_URL,
        book_instance_list_url=BOOK_INSTANCE_LIST_URL,
    )
    return env


environment = create_environment()


def render_page(
    view: str, context: Mapping[str, Any], status_code: int = 200
) -> HTMLResponse:
    """Render the named template into an HTML response."""
    template = environment.get_template(view)
    return HTMLResponse(template.render(**context), status_code=status_code)


def to_response(outcome: Outcome) -> Response:
    """Convert a use case outcome into the matching HTTP response."""
    if isinstance(outcome, Redirect):
        logger.debug("Redirecting", extra={"url": outcome.url})
        return RedirectResponse(outcome.url, status_code=REDIRECT_STATUS)
    return render_page(outcome.view, outcome.context)
