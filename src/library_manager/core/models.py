"""Data models for the library catalog."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Command(str, Enum):
    """A menu command."""
    ADD = "add"
    REMOVE = "remove"
    SEARCH = "search"
    LIST = "list"
    BORROW = "borrow"
    CHECKIN = "checkin"
    EXIT = "exit"


class Role(str, Enum):
    """What an account is allowed to do."""
    ADMIN = "admin"      # Manages the catalog
    MEMBER = "member"    # Borrows and returns books

    @property
    def commands(self) -> tuple[Command, ...]:
        """Commands available to this role, in menu order."""
        return ROLE_COMMANDS[self]


ROLE_COMMANDS: dict[Role, tuple[Command, ...]] = {
    Role.ADMIN: (Command.ADD, Command.REMOVE, Command.SEARCH, Command.LIST, Command.EXIT),
    Role.MEMBER: (Command.BORROW, Command.CHECKIN, Command.SEARCH, Command.EXIT),
}


class Account(BaseModel):
    """One of the fixed user accounts."""
    id: str
    display_name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def commands(self) -> tuple[Command, ...]:
        return self.role.commands


class Book(BaseModel):
    """A title in the catalog and who, if anyone, has it."""
    title: str
    borrower: Optional[str] = None

    @property
    def is_checked_out(self) -> bool:
        return self.borrower is not None

    @property
    def status(self) -> str:
        """Availability as shown in search results."""
        if self.is_checked_out:
            return f"Checked out by {self.borrower}"
        return "Available"

    @property
    def label(self) -> str:
        """Title annotated with its checkout state, as shown in listings."""
        if self.is_checked_out:
            return f"{self.title} (checked out by {self.borrower})"
        return f"{self.title} (available)"

    def matches(self, title: str) -> bool:
        """Case-insensitive exact title match."""
        return self.title.casefold() == title.casefold()
