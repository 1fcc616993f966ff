"""Account sessions and menu dispatch.

The session is a small state machine with no I/O of its own::

    SELECTING_ACCOUNT --valid account--> IN_MENU
    IN_MENU --exit--> CONFIRMING_EXIT
    CONFIRMING_EXIT --return--> SELECTING_ACCOUNT
    CONFIRMING_EXIT --quit--> TERMINATED
    CONFIRMING_EXIT --anything else--> IN_MENU

Invalid input raises ``InvalidChoiceError`` and leaves the state as it was.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, TypeVar, Union

from ..config import ACCOUNTS
from .catalog import Catalog
from .errors import (
    BorrowLimitExceededError,
    CapacityExceededError,
    CatalogEmptyError,
    InvalidChoiceError,
    LibraryError,
)
from .models import Account, Book, Command, Role

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Enum)


class SessionState(str, Enum):
    """Where the session is in the menu flow."""
    SELECTING_ACCOUNT = "selecting_account"
    IN_MENU = "in_menu"
    CONFIRMING_EXIT = "confirming_exit"
    TERMINATED = "terminated"


class ExitChoice(str, Enum):
    """Options offered when leaving a role menu."""
    RETURN = "return"    # Back to account selection
    QUIT = "quit"        # End the program


# Verb used in "The library is empty. No books to <verb>."
EMPTY_CATALOG_ACTIONS = {
    Command.REMOVE: "remove",
    Command.SEARCH: "search",
    Command.BORROW: "borrow",
    Command.CHECKIN: "check in",
}

# Commands that operate on a title or search term typed by the user
TEXT_COMMANDS = (Command.ADD, Command.REMOVE, Command.SEARCH, Command.BORROW, Command.CHECKIN)


def build_accounts() -> list[Account]:
    """Create the fixed accounts from configuration."""
    return [
        Account(id=entry["id"], display_name=entry["display_name"], role=Role(entry["role"]))
        for entry in ACCOUNTS
    ]


def menu_index(text: str, count: int) -> Optional[int]:
    """0-based index for a 1-based menu number, or None if ``text`` is not one."""
    if not text.isdecimal():
        return None
    try:
        number = int(text)
    except ValueError:
        return None
    if 1 <= number <= count:
        return number - 1
    return None


def parse_choice(raw: str, options: Sequence[T]) -> T:
    """Map menu input to an option.

    Accepts a 1-based position in ``options`` or an option's value,
    case-insensitively.
    """
    text = (raw or "").strip().casefold()
    index = menu_index(text, len(options))
    if index is not None:
        return options[index]
    for option in options:
        if text == option.value:
            return option
    raise InvalidChoiceError(raw)


class AppContext:
    """State shared by every session of one program run."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        accounts: Optional[list[Account]] = None,
    ):
        self.catalog = catalog if catalog is not None else Catalog()
        self.accounts = accounts if accounts is not None else build_accounts()

    def find_account(self, raw: str) -> Account:
        """Look up an account by menu position, id or display name."""
        text = (raw or "").strip().casefold()
        index = menu_index(text, len(self.accounts))
        if index is not None:
            return self.accounts[index]
        if text:
            for account in self.accounts:
                if text in (account.id.casefold(), account.display_name.casefold()):
                    return account
        raise InvalidChoiceError(raw)


class Session:
    """Tracks the active account and routes its commands to the catalog."""

    def __init__(self, context: AppContext):
        self.context = context
        self.state = SessionState.SELECTING_ACCOUNT
        self.account: Optional[Account] = None

    @property
    def catalog(self) -> Catalog:
        return self.context.catalog

    @property
    def commands(self) -> tuple[Command, ...]:
        """Commands legal for the active account."""
        self._expect(SessionState.IN_MENU)
        return self.account.commands

    @property
    def is_terminated(self) -> bool:
        return self.state is SessionState.TERMINATED

    def _expect(self, *states: SessionState) -> None:
        if self.state not in states:
            raise RuntimeError(f"Operation not allowed in state {self.state.value}")

    def _move(self, state: SessionState) -> None:
        logger.debug("Session %s -> %s", self.state.value, state.value)
        self.state = state

    def select_account(self, raw: str) -> Account:
        """Activate the account chosen on the account menu."""
        self._expect(SessionState.SELECTING_ACCOUNT)
        self.account = self.context.find_account(raw)
        logger.info("Logged in as %s", self.account.id)
        self._move(SessionState.IN_MENU)
        return self.account

    def choose_command(self, raw: str) -> Command:
        """Parse a role-menu choice. Choosing exit asks for confirmation."""
        self._expect(SessionState.IN_MENU)
        command = parse_choice(raw, self.commands)
        if command is Command.EXIT:
            self._move(SessionState.CONFIRMING_EXIT)
        return command

    def confirm_exit(self, raw: str) -> SessionState:
        """Resolve the exit prompt and return the resulting state."""
        self._expect(SessionState.CONFIRMING_EXIT)
        try:
            choice = parse_choice(raw, (ExitChoice.RETURN, ExitChoice.QUIT))
        except InvalidChoiceError:
            self._move(SessionState.IN_MENU)
            return self.state

        if choice is ExitChoice.RETURN:
            logger.info("Logged out %s", self.account.id)
            self.account = None
            self._move(SessionState.SELECTING_ACCOUNT)
        else:
            self._move(SessionState.TERMINATED)
        return self.state

    def precheck(self, command: Command) -> None:
        """Reject a command up front, before asking for its input."""
        self._expect(SessionState.IN_MENU)
        if command is Command.ADD and self.catalog.is_full:
            raise CapacityExceededError(self.catalog.capacity)
        if command in EMPTY_CATALOG_ACTIONS and self.catalog.is_empty:
            raise CatalogEmptyError(EMPTY_CATALOG_ACTIONS[command])
        if command is Command.BORROW and not self.catalog.can_borrow(self.account.id):
            raise BorrowLimitExceededError(self.account.id, self.catalog.borrow_limit)

    def execute(self, command: Command, text: str = "") -> Union[Book, list[Book]]:
        """Run a catalog command on behalf of the active account.

        Returns the affected book, or the matching books for ``search`` and
        ``list``.
        """
        self._expect(SessionState.IN_MENU)
        if command not in self.commands or command is Command.EXIT:
            raise InvalidChoiceError(command.value)

        user = self.account.id
        catalog = self.catalog
        try:
            if command is Command.ADD:
                return catalog.add(text)
            if command is Command.REMOVE:
                return catalog.remove(text)
            if command is Command.SEARCH:
                return catalog.search(text)
            if command is Command.LIST:
                return catalog.list_books()
            if command is Command.BORROW:
                return catalog.borrow(text, user)
            return catalog.check_in(text, user, override=self.account.is_admin)
        except LibraryError as e:
            logger.info("%s by %s rejected: %s", command.value, user, e)
            raise
