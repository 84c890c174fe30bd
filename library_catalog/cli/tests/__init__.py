"""
Tests for the catalog command line programs.
"""
