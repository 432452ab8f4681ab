"""Folio - a validated, slug-keyed store for Markdown articles with front matter."""

__version__ = "0.1.0"
