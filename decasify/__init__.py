"""Locale aware case conversion for prose, with style guide support for title case."""

__version__ = "0.10.2"