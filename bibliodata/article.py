"""Journal articles."""

from __future__ import annotations

from dataclasses import dataclass, field

from bibliodata.author import Author


@dataclass
class Article:
    """An article published in a journal."""

    title: str = ""
    author: Author = field(default_factory=Author)
    publication_year: int = 0
    journal: str = ""