"""Exception hierarchy for library-manager.

Every failure a user can trigger from the menus is a ``LibraryError``. The
message of each error is the text shown to the user; the shell reports it and
carries on with the session.
"""

from __future__ import annotations

__all__ = [
    "AlreadyCheckedOutError",
    "BookCheckedOutError",
    "BookNotFoundError",
    "BorrowLimitExceededError",
    "CapacityExceededError",
    "CatalogEmptyError",
    "DuplicateTitleError",
    "EmptyInputError",
    "InvalidChoiceError",
    "LibraryError",
    "NotCheckedOutError",
    "NotOwnerError",
    "TermTooShortError",
]


class LibraryError(Exception):
    """Base exception for all catalog and session errors.

    A failed operation never changes the catalog.
    """


class CapacityExceededError(LibraryError):
    """Raised when adding a book to a full catalog.

    Attributes:
        capacity: The maximum number of books the catalog holds
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(
            f"The library is full ({capacity} books). No more books can be added."
        )


class DuplicateTitleError(LibraryError):
    """Raised when a title already exists, ignoring case.

    Attributes:
        title: The title that was rejected
    """

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'A book titled "{title}" already exists in the catalog.')


class BookNotFoundError(LibraryError):
    """Raised when no book matches the given title.

    Attributes:
        title: The title that was looked up
    """

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'Book not found: "{title}".')


class BookCheckedOutError(LibraryError):
    """Raised when removing a book that someone has borrowed.

    Attributes:
        title: The book's title
        borrower: Who currently has it
    """

    def __init__(self, title: str, borrower: str) -> None:
        self.title = title
        self.borrower = borrower
        super().__init__(f'Cannot remove "{title}": it is checked out by {borrower}.')


class NotCheckedOutError(LibraryError):
    """Raised when checking in a book nobody has borrowed."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'"{title}" is not checked out.')


class NotOwnerError(LibraryError):
    """Raised when a member checks in a book borrowed by someone else.

    Attributes:
        title: The book's title
        user: The account that attempted the check-in
    """

    def __init__(self, title: str, user: str) -> None:
        self.title = title
        self.user = user
        super().__init__(f'You cannot check in "{title}": you did not borrow it.')


class AlreadyCheckedOutError(LibraryError):
    """Raised when borrowing a book that is already out.

    Attributes:
        title: The book's title
        borrower: Who currently has it
    """

    def __init__(self, title: str, borrower: str) -> None:
        self.title = title
        self.borrower = borrower
        super().__init__(f'"{title}" is already checked out by {borrower}.')


class BorrowLimitExceededError(LibraryError):
    """Raised when a user already holds the maximum number of books.

    Attributes:
        user: The borrowing account
        limit: Books one account may hold at a time
    """

    def __init__(self, user: str, limit: int) -> None:
        self.user = user
        self.limit = limit
        super().__init__(
            f"Borrow limit reached. You may borrow up to {limit} books at a time."
        )


class TermTooShortError(LibraryError):
    """Raised when a search term is below the minimum length.

    Attributes:
        term: The rejected term
        minimum: Shortest accepted length
    """

    def __init__(self, term: str, minimum: int) -> None:
        self.term = term
        self.minimum = minimum
        super().__init__(f"Please enter at least {minimum} characters to search.")


class EmptyInputError(LibraryError):
    """Raised when a required value is blank.

    Attributes:
        field: What was being asked for (e.g. "title")
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"No {field} entered. Operation cancelled.")


class InvalidChoiceError(LibraryError):
    """Raised when menu input matches no available option.

    Attributes:
        choice: The raw input
    """

    def __init__(self, choice: str) -> None:
        self.choice = choice
        super().__init__("Invalid choice. Please try again.")


class CatalogEmptyError(LibraryError):
    """Raised when an operation needs books and the catalog has none."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"The library is empty. No books to {action}.")
