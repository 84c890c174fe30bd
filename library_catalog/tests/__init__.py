"""
Tests for package-level modules of library_catalog.
"""
