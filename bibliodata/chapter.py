"""Book chapters."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from bibliodata.article import Article
from bibliodata.author import Author


@dataclass
class Chapter:
    """A numbered chapter of a book."""

    title: str = ""
    author: Author = field(default_factory=Author)
    chapter_number: int = 1

    @classmethod
    def from_article(cls, article: Article) -> Chapter:
        """Make a first chapter with the article's title and author."""
        author = Author(article.author.name, article.author.surname)
        return cls(article.title, author, 1)

    def describe(self) -> str:
        """Return a one-line description of the chapter."""
        return (
            f"Chapter {self.chapter_number}: {self.title} "
            f"by {self.author.name} {self.author.surname}"
        )

    def display_info(self, file: TextIO | None = None) -> None:
        """Write the chapter's description followed by a newline."""
        print(self.describe(), file=file if file is not None else sys.stdout)