"""Parsing, hand-sorting, intersecting and de-duplicating arrays of integers."""

__version__ = "0.1.0"