"""Command that prints a sample book built from an article."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from bibliodata.article import Article
from bibliodata.author import Author
from bibliodata.book import Book
from bibliodata.chapter import Chapter


def _sample_book() -> Book:
    author = Author("Jan", "Kowalski")
    article = Article("Sample Article", author, 2024, "Sample Journal")
    chapter = Chapter.from_article(article)
    return Book("Przykladowa Ksiazka", author, 2024, [chapter])


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample book and its chapters; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bibliodata", description="Print a sample book and its chapters."
    )
    parser.parse_args(argv)

    book = _sample_book()
    print(f"Tytul ksiazki: {book.title}")
    print(f"Autor ksiazki: {book.author.name} {book.author.surname}")
    print(f"Rok wydania: {book.publication_year}")
    print("Rozdzialy:")
    for chapter in book.chapters:
        chapter.display_info()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())