"""A single book record held by the library catalog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Book:
    """A book with its bibliographic data and the number of copies on the shelf."""

    title: str
    author: str
    publish_year: int
    available_copies: int

    def borrow_one(self) -> None:
        """Take one copy off the shelf."""
        self.available_copies -= 1

    def return_one(self) -> None:
        """Put one copy back on the shelf."""
        self.available_copies += 1

    def __str__(self) -> str:
        return (
            f"Title: {self.title}\n"
            f"Author: {self.author}\n"
            f"Public Year: {self.publish_year}\n"
            f"avaliable copies: {self.available_copies}\n"
        )