"""Tests for the library exception hierarchy."""

from library_manager.core.errors import (
    AlreadyCheckedOutError,
    BookCheckedOutError,
    BookNotFoundError,
    BorrowLimitExceededError,
    CapacityExceededError,
    CatalogEmptyError,
    DuplicateTitleError,
    EmptyInputError,
    InvalidChoiceError,
    LibraryError,
    NotCheckedOutError,
    NotOwnerError,
    TermTooShortError,
)


class TestLibraryErrors:
    """Tests for error classes and their messages."""

    def all_errors(self) -> list[LibraryError]:
        return [
            CapacityExceededError(5),
            DuplicateTitleError("Dune"),
            BookNotFoundError("Dune"),
            BookCheckedOutError("Dune", "bob"),
            NotCheckedOutError("Dune"),
            NotOwnerError("Dune", "steve"),
            AlreadyCheckedOutError("Dune", "bob"),
            BorrowLimitExceededError("bob", 3),
            TermTooShortError("du", 3),
            EmptyInputError("title"),
            InvalidChoiceError("9"),
            CatalogEmptyError("borrow"),
        ]

    def test_all_derive_from_library_error(self):
        for error in self.all_errors():
            assert isinstance(error, LibraryError)

    def test_messages_are_distinct(self):
        messages = [str(error) for error in self.all_errors()]
        assert all(messages)
        assert len(set(messages)) == len(messages)

    def test_attributes(self):
        assert CapacityExceededError(5).capacity == 5
        assert AlreadyCheckedOutError("Dune", "bob").borrower == "bob"
        assert BorrowLimitExceededError("bob", 3).limit == 3
        assert TermTooShortError("du", 3).term == "du"
        assert InvalidChoiceError("9").choice == "9"

    def test_messages_name_the_details(self):
        assert "5" in str(CapacityExceededError(5))
        assert "Dune" in str(BookNotFoundError("Dune"))
        assert "bob" in str(AlreadyCheckedOutError("Dune", "bob"))
        assert "3 characters" in str(TermTooShortError("du", 3))
        assert str(CatalogEmptyError("check in")) == "The library is empty. No books to check in."
