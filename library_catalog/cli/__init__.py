"""
Command line programs for the library catalog.
"""
