"""Markdown Toggle - keep styled text and markdown syntax in sync."""

__version__ = "0.1.0"
