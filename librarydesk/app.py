"""Interactive text menu for managing the library catalog."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence, TextIO

from .book import Book
from .catalog import DEFAULT_PATH, Catalog

MAX_FIELD_LENGTH = 20
RULE = "===================================\n"
DIVIDER = "-----------------------------------\n"
BOOKS_HEADER = "======== Books information ========\n"
BACK_TO_MAIN = "Navigate back to main page...\n\n"


class Screen(IntEnum):
    """Menu targets, numbered as the user selects them."""

    ADD = 1
    SEARCH = 2
    CHECKOUT = 3
    RETURN = 4
    LIST_ALL = 5
    EXIT = 6
    ENTRY = 7
    TITLE = 8
    AUTHOR = 9
    PUBLIC_YEAR = 10


_MESSAGES = {
    Screen.ADD: "Please enter the info of the book\n",
    Screen.CHECKOUT: "Please enter the book's information to checkout\n",
    Screen.RETURN: "Please enter the book's information to return\n",
    Screen.LIST_ALL: BOOKS_HEADER + DIVIDER,
    Screen.SEARCH: (
        "Choose your search criteria\n"
        "1. Search by title\n"
        "2. Search by author\n"
        "3. Search by public year\n"
    ),
    Screen.ENTRY: (
        "==== Library Management System ====\n"
        "1. Add a new book\n"
        "2. Search a book\n"
        "3. Checkout a book\n"
        "4. Return a book\n"
        "5. List all books' info\n"
        "6. Exit this system\n" + RULE
    ),
}


class LibraryApp:
    """Runs the menu loop over a catalog, reading from and writing to text streams."""

    def __init__(self, catalog: Catalog, stdin: TextIO, stdout: TextIO) -> None:
        self.catalog = catalog
        self.stdin = stdin
        self.stdout = stdout

    # -- input helpers -------------------------------------------------

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_text(self, prompt: str) -> str:
        self._write(prompt)
        while True:
            text = self._read_line()
            if len(text) <= MAX_FIELD_LENGTH:
                return text
            self._write(f"length > {MAX_FIELD_LENGTH}, invaild. Try again: ")

    def _read_int(self, prompt: str, *, non_negative: bool = True) -> int:
        self._write(prompt)
        while True:
            try:
                value = int(self._read_line().strip())
            except ValueError:
                pass
            else:
                if not non_negative or value >= 0:
                    return value
            self._write("Invalid number. Try again: ")

    def _read_identity(self) -> tuple[str, str, int]:
        title = self._read_text("> Title: ")
        author = self._read_text("> Author: ")
        year = self._read_int("> Public Year: ")
        return title, author, year

    # -- output --------------------------------------------------------

    def show_message(self, screen: int) -> None:
        """Print the heading or menu belonging to a screen, if it has one."""
        try:
            message = _MESSAGES.get(Screen(screen))
        except ValueError:
            message = None
        if message:
            self._write(message)

    def show_books(self, books: Iterable[Book]) -> None:
        """Print a framed list of books."""
        self._write(BOOKS_HEADER + DIVIDER)
        for book in books:
            self._write(str(book))
            self._write(DIVIDER)
        self._write(RULE)

    # -- screens -------------------------------------------------------

    def add(self) -> None:
        """Ask for a new book and add it unless an identical one exists."""
        self.show_message(Screen.ADD)
        title = self._read_text("> Title: ")
        author = self._read_text("> Author: ")
        copies = self._read_int("> Available copies: ")
        year = self._read_int("> Public Year: ")
        book = Book(title, author, year, copies)
        if book in self.catalog:
            self._write("The book has already existed\n")
        else:
            self.catalog.insert(book)
            self._write("Success!\n")
        self._write(BACK_TO_MAIN)

    def checkout(self) -> None:
        """Lend one copy of a book if one is available."""
        self.show_message(Screen.CHECKOUT)
        found = self.catalog.search_by_all(*self._identity_args())
        if not found:
            self._write("No such book in this library\n")
        elif found[0].available_copies == 0:
            self._write("No more avaliable copy\n")
        else:
            found[0].borrow_one()
            self._write("Success!\n")
        self._write(BACK_TO_MAIN)

    def return_book(self) -> None:
        """Take back one copy of a book."""
        self.show_message(Screen.RETURN)
        found = self.catalog.search_by_all(*self._identity_args())
        if not found:
            self._write("No such book in this library\n")
        else:
            found[0].return_one()
            self._write("Success!\n")
        self._write(BACK_TO_MAIN)

    def _identity_args(self) -> tuple[str, int, str]:
        title, author, year = self._read_identity()
        return title, year, author

    def list_all(self) -> None:
        """Print every book in title order."""
        self.show_message(Screen.LIST_ALL)
        for book in self.catalog:
            self._write(str(book))
            self._write(DIVIDER)
        self._write(RULE + BACK_TO_MAIN)

    def search(self) -> int:
        """Show the search menu and return the screen the choice leads to."""
        self.show_message(Screen.SEARCH)
        choice = self._read_int("> Enter your choice: ", non_negative=False)
        return choice + Screen.ENTRY

    def _show_results(self, books: Sequence[Book]) -> None:
        if books:
            self.show_books(books)
        else:
            self._write("No such book in the library\n")
        self._write(BACK_TO_MAIN)

    def search_by_title(self) -> None:
        """Ask for a title and list the matching books."""
        title = self._read_text("> Title: ")
        self._show_results(self.catalog.search_by_title(title))

    def search_by_author(self) -> None:
        """Ask for an author and list the matching books."""
        author = self._read_text("> Author: ")
        self._show_results(self.catalog.search_by_author(author))

    def search_by_public_year(self) -> None:
        """Ask for a publication year and list the matching books."""
        year = self._read_int("> Public Year: ")
        self._show_results(self.catalog.search_by_public_year(year))

    def _entry(self) -> int:
        self.show_message(Screen.ENTRY)
        return self._read_int("> Enter your choice: ", non_negative=False)

    def _exit(self) -> None:
        self.catalog.save()
        self.catalog.clear()
        self._write("Good Bye\n")

    # -- main loop -----------------------------------------------------

    def run(self) -> None:
        """Run the menu until the user exits or the input ends."""
        actions: dict[Screen, Callable[[], None]] = {
            Screen.ADD: self.add,
            Screen.CHECKOUT: self.checkout,
            Screen.RETURN: self.return_book,
            Screen.LIST_ALL: self.list_all,
            Screen.TITLE: self.search_by_title,
            Screen.AUTHOR: self.search_by_author,
            Screen.PUBLIC_YEAR: self.search_by_public_year,
        }
        target: int = Screen.ENTRY
        try:
            while True:
                if target == Screen.ENTRY:
                    target = self._entry()
                elif target == Screen.SEARCH:
                    target = self.search()
                elif target == Screen.EXIT:
                    self._exit()
                    return
                elif target in actions:
                    actions[Screen(target)]()
                    target = Screen.ENTRY
                else:
                    self._write("Not a valid operation...\n")
                    target = Screen.ENTRY
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the catalog and run the interactive menu."""
    parser = argparse.ArgumentParser(description="Library management system")
    parser.add_argument(
        "-f", "--file", default=DEFAULT_PATH, help="catalog data file"
    )
    args = parser.parse_args(argv)
    catalog = Catalog(args.file)
    catalog.load()
    LibraryApp(catalog, sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())