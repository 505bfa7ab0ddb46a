# librarydesk

A small console program for running a library's book catalog. Books are kept
in a binary search tree ordered by title and stored in a plain text file. The
file is read when the program starts and written back when you choose to exit.

## Installing

```
pip install .
```

## Running

```
librarydesk
librarydesk --file books.txt
```

The catalog file defaults to `data.txt` in the current directory; `-f` /
`--file` names another one. A missing file simply starts an empty catalog.

The main menu offers:

```
==== Library Management System ====
1. Add a new book
2. Search a book
3. Checkout a book
4. Return a book
5. List all books' info
6. Exit this system
===================================
```

- **Add a new book** asks for a title and an author (at most 20 characters
  each), the number of available copies and the publication year. A book with
  the same title, author and year that is already in the catalog is not added
  again.
- **Search a book** offers a second menu: search by title, by author or by
  publication year. Every match is listed.
- **Checkout a book** asks for title, author and year and lowers the
  available copies of that book by one, as long as a copy is left.
- **Return a book** asks for the same details and raises the available copies
  by one.
- **List all books' info** shows every book, ordered by title.
- **Exit this system** saves the catalog to the data file and quits.

Numbers that cannot be read, or negative counts and years, are asked for
again. A menu choice with no matching screen prints
`Not a valid operation...` and returns to the main menu.

When the input ends (for example on Ctrl-D) the program stops without
saving; only **Exit this system** writes the data file.

## Data file

Each book takes five lines: title, author, publication year, available
copies, and a separator line of eight dashes:

```
Dune
Frank Herbert
1965
3
--------
```

Reading stops at the first line longer than 24 characters. A separator that
follows fewer than four fields raises `ValueError`. Books read from the file
are inserted so that the tree comes out balanced.

## Using it from Python

```python
from librarydesk.book import Book
from librarydesk.catalog import Catalog

catalog = Catalog("data.txt")
catalog.load()
catalog.insert(Book("Dune", "Frank Herbert", 1965, 3))
for book in catalog.search_by_author("Frank Herbert"):
    print(book)
catalog.save()
```

- `Book` is a dataclass with `title`, `author`, `publish_year` and
  `available_copies`, plus `borrow_one()` and `return_one()`.
- `Catalog` offers `insert`, `search_by_title`, `search_by_author`,
  `search_by_public_year`, `search_by_all(title, year, author)`, `load`,
  `save` and `clear`. Iterating it yields books in title order; `len()` and
  `in` work as expected (`in` matches on title, author and year).
- `librarydesk.app.LibraryApp(catalog, stdin, stdout).run()` runs the menu
  over any pair of text streams.

## Running the tests

```
pip install .[test]
pytest
```