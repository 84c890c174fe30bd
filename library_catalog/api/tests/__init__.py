"""
Tests for the library_catalog API layer.
"""
