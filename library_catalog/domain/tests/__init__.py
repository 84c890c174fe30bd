"""
Tests for library_catalog domain models, projections and forms.
"""
