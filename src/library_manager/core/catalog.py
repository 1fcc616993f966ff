"""In-memory book catalog."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import MAX_BOOKS, MAX_BORROW_PER_USER, MIN_SEARCH_LENGTH
from .errors import (
    AlreadyCheckedOutError,
    BookCheckedOutError,
    BookNotFoundError,
    BorrowLimitExceededError,
    CapacityExceededError,
    DuplicateTitleError,
    EmptyInputError,
    NotCheckedOutError,
    NotOwnerError,
    TermTooShortError,
)
from .models import Book

logger = logging.getLogger(__name__)


class Catalog:
    """Ordered, capacity-bounded collection of books.

    Titles are unique ignoring case, and every lookup compares titles
    case-insensitively. Failed operations leave the catalog unchanged.
    """

    def __init__(
        self,
        capacity: int = MAX_BOOKS,
        borrow_limit: int = MAX_BORROW_PER_USER,
        min_search_length: int = MIN_SEARCH_LENGTH,
    ):
        self.capacity = capacity
        self.borrow_limit = borrow_limit
        self.min_search_length = min_search_length
        self._books: list[Book] = []

    def __len__(self) -> int:
        return len(self._books)

    @property
    def is_empty(self) -> bool:
        return not self._books

    @property
    def is_full(self) -> bool:
        return len(self._books) >= self.capacity

    @staticmethod
    def _clean(value: str, field: str = "title") -> str:
        """Strip surrounding whitespace, rejecting blank input."""
        value = (value or "").strip()
        if not value:
            raise EmptyInputError(field)
        return value

    def _lookup(self, title: str) -> Optional[Book]:
        for book in self._books:
            if book.matches(title):
                return book
        return None

    def find(self, title: str) -> Book:
        """Get the book with this title."""
        title = self._clean(title)
        book = self._lookup(title)
        if book is None:
            raise BookNotFoundError(title)
        return book

    def add(self, title: str) -> Book:
        """Append a new, unborrowed book."""
        title = self._clean(title)
        if self.is_full:
            raise CapacityExceededError(self.capacity)
        if self._lookup(title) is not None:
            raise DuplicateTitleError(title)

        book = Book(title=title)
        self._books.append(book)
        logger.debug("Added %r (%d/%d)", title, len(self._books), self.capacity)
        return book

    def remove(self, title: str) -> Book:
        """Remove a book that is not checked out."""
        book = self.find(title)
        if book.is_checked_out:
            raise BookCheckedOutError(book.title, book.borrower)

        self._books.remove(book)
        logger.debug("Removed %r", book.title)
        return book

    def search(self, term: str) -> list[Book]:
        """Find books whose title contains ``term``, ignoring case.

        Results keep catalog order. No match is an empty list, not an error.
        """
        term = self._clean(term, field="search term")
        if len(term) < self.min_search_length:
            raise TermTooShortError(term, self.min_search_length)

        needle = term.casefold()
        return [book for book in self._books if needle in book.title.casefold()]

    def list_books(self) -> list[Book]:
        """All books in insertion order."""
        return list(self._books)

    def borrowed_count(self, user: str) -> int:
        """How many books ``user`` currently holds."""
        user = user.casefold()
        return sum(
            1
            for book in self._books
            if book.is_checked_out and book.borrower.casefold() == user
        )

    def can_borrow(self, user: str) -> bool:
        return self.borrowed_count(user) < self.borrow_limit

    def borrow(self, title: str, user: str) -> Book:
        """Check a book out to ``user``."""
        user = self._clean(user, field="user")
        book = self.find(title)
        if book.is_checked_out:
            raise AlreadyCheckedOutError(book.title, book.borrower)
        if not self.can_borrow(user):
            raise BorrowLimitExceededError(user, self.borrow_limit)

        book.borrower = user
        logger.debug("%s borrowed %r", user, book.title)
        return book

    def check_in(self, title: str, user: str, override: bool = False) -> Book:
        """Return a borrowed book.

        Only the borrower may check a book in, unless ``override`` is set
        (the admin may check in anything).
        """
        user = self._clean(user, field="user")
        book = self.find(title)
        if not book.is_checked_out:
            raise NotCheckedOutError(book.title)
        if not override and book.borrower.casefold() != user.casefold():
            raise NotOwnerError(book.title, user)

        logger.debug("%s checked in %r (borrowed by %s)", user, book.title, book.borrower)
        book.borrower = None
        return book
