"""Books made of chapters."""

from __future__ import annotations

from dataclasses import dataclass, field

from bibliodata.author import Author
from bibliodata.chapter import Chapter


@dataclass
class Book:
    """A book with an author, a publication year and an ordered list of chapters."""

    title: str = ""
    author: Author = field(default_factory=Author)
    publication_year: int = 0
    chapters: list[Chapter] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.chapters = list(self.chapters)

    def add_chapter(self, chapter: Chapter) -> None:
        """Append a chapter to the end of the book."""
        self.chapters.append(chapter)