"""A binary search tree of books keyed by title, persisted to a text file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from .book import Book

DEFAULT_PATH = "data.txt"
RECORD_SEPARATOR = "--------"
# Lines longer than this end the reading of the data file.
_MAX_LINE = 24


@dataclass(eq=False)
class _Node:
    book: Book
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _inorder(node: Optional[_Node]) -> Iterator[_Node]:
    stack: list[_Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def _preorder(node: Optional[_Node]) -> Iterator[_Node]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


class Catalog:
    """Books ordered by title; equal titles are placed to the right."""

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._root: Optional[_Node] = None

    def insert(self, book: Book) -> None:
        """Add a book to the tree."""
        node = _Node(book)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if book.title >= current.book.title:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def _find_title(self, title: str) -> Optional[_Node]:
        current = self._root
        while current is not None:
            if title == current.book.title:
                return current
            current = current.right if title > current.book.title else current.left
        return None

    def search_by_title(self, title: str) -> list[Book]:
        """Return every book with exactly this title."""
        found = self._find_title(title)
        return [n.book for n in _preorder(found) if n.book.title == title]

    def search_by_all(self, title: str, year: int, author: str) -> list[Book]:
        """Return the books matching title, publication year and author."""
        return [
            book
            for book in self.search_by_title(title)
            if book.publish_year == year and book.author == author
        ]

    def search_by_author(self, author: str) -> list[Book]:
        """Return every book by this author, in title order."""
        return [book for book in self if book.author == author]

    def search_by_public_year(self, year: int) -> list[Book]:
        """Return every book published in this year, in title order."""
        return [book for book in self if book.publish_year == year]

    def __iter__(self) -> Iterator[Book]:
        return (node.book for node in _inorder(self._root))

    def __len__(self) -> int:
        return sum(1 for _ in _inorder(self._root))

    def __contains__(self, book: object) -> bool:
        if not isinstance(book, Book):
            return False
        return bool(self.search_by_all(book.title, book.publish_year, book.author))

    def load(self) -> None:
        """Read books from the data file and insert them as a balanced tree."""
        try:
            handle = open(self.path, encoding="utf-8")
        except FileNotFoundError:
            return
        books: list[Book] = []
        fields: list[str] = []
        with handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if len(line) > _MAX_LINE:
                    break
                if line == RECORD_SEPARATOR:
                    if len(fields) < 4:
                        raise ValueError(f"incomplete book record in {self.path}")
                    title, author, year, copies = fields[:4]
                    books.append(Book(title, author, int(year), int(copies)))
                    fields = []
                    continue
                fields.append(line)
        self._insert_balanced(books, 0, len(books) - 1)

    def _insert_balanced(self, books: list[Book], start: int, end: int) -> None:
        if start > end:
            return
        mid = (start + end) // 2
        self.insert(books[mid])
        self._insert_balanced(books, start, mid - 1)
        self._insert_balanced(books, mid + 1, end)

    def save(self) -> None:
        """Write all books to the data file in title order."""
        with open(self.path, "w", encoding="utf-8") as out:
            for book in self:
                out.write(
                    f"{book.title}\n{book.author}\n{book.publish_year}\n"
                    f"{book.available_copies}\n{RECORD_SEPARATOR}\n"
                )

    def clear(self) -> None:
        """Drop every book."""
        self._root = None