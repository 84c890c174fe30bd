"""
Reading submitted form bodies.
"""

from typing import Any, Dict

from fastapi import Request


async def read_form(request: Request) -> Dict[str, Any]:
    """Read a url-encoded or multipart form body into a plain mapping.

    A key submitted once maps to its value; a key repeated (ticked
    checkboxes) maps to the list of its values. File uploads are ignored.
    """
    form = await request.form()
    values: Dict[str, Any] = {}
    for key in form.keys():
        items = [item for item in form.getlist(key) if isinstance(item, str)]
        if not items:
            continue
        values[key] = items[0] if len(items) == 1 else items
    return values
