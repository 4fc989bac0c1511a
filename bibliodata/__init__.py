"""Bibliographic record types (authors, articles, chapters, books) and a sample command."""

__version__ = "0.1.0"
__all__ = ["article", "author", "book", "chapter", "cli"]