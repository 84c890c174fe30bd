"""Tests shared by every repository implementation."""
