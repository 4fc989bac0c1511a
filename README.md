# bibliodata

A small library of bibliographic record types, each a dataclass:

- `bibliodata.author.Author` has `name` and `surname` (both default to `""`).
  `str(author)` gives `"Name Surname"`, and `author.display(file=None)` writes
  that text and a newline to `file`, or to standard output when no file is given.
- `bibliodata.article.Article` has `title`, `author`, `publication_year`
  (default `0`) and `journal`.
- `bibliodata.chapter.Chapter` has `title`, `author` and `chapter_number`
  (default `1`).
  - `Chapter.from_article(article)` makes chapter 1 with the article's title
    and a copy of its author.
  - `chapter.describe()` returns `"Chapter <number>: <title> by <name> <surname>"`.
  - `chapter.display_info(file=None)` writes that line and a newline to `file`,
    or to standard output.
- `bibliodata.book.Book` has `title`, `author`, `publication_year` (default `0`)
  and `chapters`, a list (default empty). The list passed in is copied, so
  `book.add_chapter(chapter)` appends to the book's own list only.

Records whose fields are equal compare equal with `==`.

## Installation

```
pip install .
```

## Usage

```python
from bibliodata.author import Author
from bibliodata.article import Article
from bibliodata.chapter import Chapter
from bibliodata.book import Book

author = Author("John", "Doe")
article = Article("Sample Article", author, 2023, "Sample Journal")

chapter = Chapter.from_article(article)
print(chapter.describe())      # Chapter 1: Sample Article by John Doe

book = Book("Sample Title", author, 2023, [chapter])
book.add_chapter(Chapter("Another Chapter", author, 2))
for ch in book.chapters:
    ch.display_info()
```

## Command line

```
bibliodata
```

This builds an example book from a sample article and prints, with Polish
labels, its title (`Tytul ksiazki`), author (`Autor ksiazki`), year of
publication (`Rok wydania`) and chapter list (`Rozdzialy`). It takes no
options other than `-h`/`--help`, and exits with status 0.

## What it does not do

The package only holds records in memory. It does not read or write
bibliography files, store records anywhere, or search or format citations;
the command prints one fixed example book.

## Running the tests

```
pip install ".[test]"
pytest
```