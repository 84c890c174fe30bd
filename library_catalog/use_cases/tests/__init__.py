"""Tests for the catalog use cases."""
