"""
API routers for the library catalog.

``system`` is mounted at the root; the entity routers are mounted under
``/catalog``.
"""
