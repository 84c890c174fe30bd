"""
Tests for the catalog page routers.
"""
