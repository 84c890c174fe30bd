"""
Catalog management for a small lending library.

Tracks authors, books, genres and the physical copies of books, and exposes
list/detail/create/update/delete workflows over HTTP with server-rendered
views.
"""

__version__ = "0.1.0"
