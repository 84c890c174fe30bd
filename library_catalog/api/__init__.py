"""
HTTP layer for the library catalog: a FastAPI application serving HTML
pages rendered from Jinja2 templates.
"""
