"""Tests for the in-memory catalog."""

import pytest

from library_manager.core import Catalog
from library_manager.core.errors import (
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


def titles(catalog: Catalog) -> list[str]:
    return [book.title for book in catalog.list_books()]


class TestAdd:
    """Tests for Catalog.add."""

    def test_add_appends_available_book(self, catalog):
        """A new book is unborrowed and listed last."""
        catalog.add("Dune")
        book = catalog.add("Emma")
        assert book.borrower is None
        assert titles(catalog) == ["Dune", "Emma"]

    def test_add_strips_whitespace(self, catalog):
        catalog.add("  Dune  ")
        assert titles(catalog) == ["Dune"]

    def test_capacity_is_five(self, catalog):
        """The sixth add fails and leaves the catalog unchanged."""
        for title in ["A1", "B2", "C3", "D4", "E5"]:
            catalog.add(title)

        with pytest.raises(CapacityExceededError) as exc:
            catalog.add("F6")

        assert exc.value.capacity == 5
        assert len(catalog) == 5
        assert titles(catalog) == ["A1", "B2", "C3", "D4", "E5"]
        assert catalog.is_full

    def test_duplicate_title_ignores_case(self, catalog):
        catalog.add("Dune")
        with pytest.raises(DuplicateTitleError):
            catalog.add("dUNE")
        assert titles(catalog) == ["Dune"]

    def test_blank_title_rejected(self, catalog):
        with pytest.raises(EmptyInputError):
            catalog.add("   ")
        assert catalog.is_empty

    def test_custom_capacity(self):
        catalog = Catalog(capacity=1)
        catalog.add("Dune")
        with pytest.raises(CapacityExceededError):
            catalog.add("Emma")


class TestRemoveAndFind:
    """Tests for Catalog.remove and Catalog.find."""

    def test_find_ignores_case(self, catalog):
        catalog.add("The Hobbit")
        assert catalog.find("the HOBBIT").title == "The Hobbit"

    def test_find_missing(self, catalog):
        with pytest.raises(BookNotFoundError) as exc:
            catalog.find("Dune")
        assert exc.value.title == "Dune"

    def test_remove(self, catalog):
        catalog.add("Dune")
        catalog.add("Emma")
        removed = catalog.remove("DUNE")
        assert removed.title == "Dune"
        assert titles(catalog) == ["Emma"]

    def test_remove_missing(self, catalog):
        catalog.add("Dune")
        with pytest.raises(BookNotFoundError):
            catalog.remove("Emma")
        assert titles(catalog) == ["Dune"]

    def test_remove_checked_out_book_fails(self, catalog):
        """The book stays in the catalog and stays checked out."""
        catalog.add("Dune")
        catalog.borrow("Dune", "bob")

        with pytest.raises(BookCheckedOutError) as exc:
            catalog.remove("Dune")

        assert exc.value.borrower == "bob"
        assert catalog.find("Dune").borrower == "bob"
        assert len(catalog) == 1


class TestSearch:
    """Tests for Catalog.search."""

    def test_term_too_short(self, catalog):
        catalog.add("Absalom")
        with pytest.raises(TermTooShortError) as exc:
            catalog.search("ab")
        assert exc.value.minimum == 3

    def test_term_too_short_on_empty_catalog(self, catalog):
        with pytest.raises(TermTooShortError):
            catalog.search("ab")

    def test_substring_match_in_catalog_order(self, catalog):
        for title in ["The Hobbit", "Dune", "Hobbit Homes", "Emma"]:
            catalog.add(title)
        catalog.borrow("Hobbit Homes", "steve")

        results = catalog.search("HOB")

        assert [book.title for book in results] == ["The Hobbit", "Hobbit Homes"]
        assert [book.status for book in results] == ["Available", "Checked out by steve"]

    def test_no_match_is_empty(self, catalog):
        catalog.add("Dune")
        assert catalog.search("zzz") == []

    def test_blank_term(self, catalog):
        with pytest.raises(EmptyInputError):
            catalog.search("  ")


class TestBorrowAndCheckIn:
    """Tests for borrowing and returning books."""

    def test_borrow_limit(self, catalog):
        """A user holding three books cannot borrow a fourth."""
        for title in ["A1", "B2", "C3", "D4"]:
            catalog.add(title)
        for title in ["A1", "B2", "C3"]:
            catalog.borrow(title, "bob")

        with pytest.raises(BorrowLimitExceededError) as exc:
            catalog.borrow("D4", "bob")

        assert exc.value.limit == 3
        assert catalog.borrowed_count("bob") == 3
        assert catalog.find("D4").borrower is None

    def test_limit_is_per_user(self, catalog):
        for title in ["A1", "B2", "C3", "D4"]:
            catalog.add(title)
        for title in ["A1", "B2", "C3"]:
            catalog.borrow(title, "bob")

        catalog.borrow("D4", "steve")
        assert catalog.borrowed_count("steve") == 1

    def test_borrow_missing(self, catalog):
        with pytest.raises(BookNotFoundError):
            catalog.borrow("Dune", "bob")

    def test_already_checked_out_reports_borrower(self, catalog):
        catalog.add("Dune")
        catalog.borrow("Dune", "steve")
        with pytest.raises(AlreadyCheckedOutError) as exc:
            catalog.borrow("dune", "bob")
        assert exc.value.borrower == "steve"
        assert "steve" in str(exc.value)

    def test_check_in_missing(self, catalog):
        catalog.add("Dune")
        with pytest.raises(BookNotFoundError) as exc:
            catalog.check_in("Emma", "bob")
        assert exc.value.title == "Emma"

    @pytest.mark.parametrize("user", ["", "   "])
    def test_blank_user_rejected(self, catalog, user):
        """A blank borrower never marks a book as checked out."""
        catalog.add("Dune")
        with pytest.raises(EmptyInputError):
            catalog.borrow("Dune", user)
        assert not catalog.find("Dune").is_checked_out

        catalog.borrow("Dune", "bob")
        with pytest.raises(EmptyInputError):
            catalog.check_in("Dune", user)
        assert catalog.find("Dune").borrower == "bob"

    def test_check_in_not_checked_out(self, catalog):
        catalog.add("Dune")
        with pytest.raises(NotCheckedOutError):
            catalog.check_in("Dune", "bob")

    def test_check_in_by_other_member(self, catalog):
        catalog.add("X")
        catalog.borrow("X", "steve")
        with pytest.raises(NotOwnerError):
            catalog.check_in("X", "bob")
        assert catalog.find("X").borrower == "steve"

    def test_admin_override(self, catalog):
        catalog.add("X")
        catalog.borrow("X", "steve")
        catalog.check_in("x", "librarian", override=True)
        assert catalog.find("X").borrower is None

    def test_round_trip_leaves_catalog_empty(self, catalog):
        catalog.add("T")
        catalog.borrow("T", "bob")
        catalog.check_in("T", "bob")
        catalog.remove("T")
        assert catalog.is_empty

    def test_dune_scenario(self, catalog):
        """Listing labels follow the book through borrow and check-in."""
        assert catalog.list_books() == []

        catalog.add("Dune")
        assert [b.label for b in catalog.list_books()] == ["Dune (available)"]

        catalog.borrow("Dune", "bob")
        assert [b.label for b in catalog.list_books()] == ["Dune (checked out by bob)"]

        with pytest.raises(AlreadyCheckedOutError):
            catalog.borrow("Dune", "steve")
        with pytest.raises(NotOwnerError):
            catalog.check_in("Dune", "steve")

        catalog.check_in("Dune", "bob")
        assert [b.label for b in catalog.list_books()] == ["Dune (available)"]
