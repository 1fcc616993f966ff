"""Interactive console loop for Library Manager."""

from __future__ import annotations

import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from .config import APP_NAME
from .core import AppContext, Book, Command, Session, SessionState
from .core.errors import LibraryError
from .core.models import Account
from .core.session import TEXT_COMMANDS

logger = logging.getLogger(__name__)

MENU_LABELS = {
    Command.ADD: "Add a book",
    Command.REMOVE: "Remove a book",
    Command.SEARCH: "Search for a book",
    Command.LIST: "List all books",
    Command.BORROW: "Borrow a book",
    Command.CHECKIN: "Check in a book",
    Command.EXIT: "Exit",
}

# Question asked before running a command that needs a title or term
TEXT_PROMPTS = {
    Command.ADD: "Enter the title of the book to add",
    Command.REMOVE: "Enter the title of the book to remove",
    Command.SEARCH: "Enter at least {minimum} characters of the book title to search for",
    Command.BORROW: "Enter the title of the book to borrow",
    Command.CHECKIN: "Enter the title of the book to check in",
}


def status_text(book: Book) -> Text:
    """Rich text for a book's availability."""
    return Text(book.status, style="yellow" if book.is_checked_out else "green")


class LibraryShell:
    """Reads menu choices from the console and drives a ``Session``."""

    def __init__(self, context: AppContext, console: Optional[Console] = None):
        self.context = context
        self.session = Session(context)
        self.console = console or Console()

    def ask(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console)

    def error(self, error: LibraryError) -> None:
        self.console.print(f"[red]{escape(str(error))}[/red]")

    def goodbye(self) -> None:
        self.console.print(f"\n[bold]Thank you for using the {APP_NAME}. Goodbye![/bold]")

    def run(self) -> None:
        """Run menus until the user quits or input ends."""
        catalog = self.context.catalog
        self.console.print(Panel(
            f"[bold cyan]Welcome to the {APP_NAME}[/bold cyan]\n\n"
            f"[dim]Up to {catalog.capacity} books | "
            f"{catalog.borrow_limit} loans per member | "
            f"searches need {catalog.min_search_length}+ characters[/dim]",
            border_style="cyan",
        ))

        try:
            while not self.session.is_terminated:
                self.step()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed in state %s", self.session.state.value)
            self.console.print()
            self.goodbye()

    def step(self) -> None:
        """Handle one prompt for the current session state."""
        state = self.session.state
        if state is SessionState.SELECTING_ACCOUNT:
            self.select_account()
        elif state is SessionState.IN_MENU:
            self.role_menu()
        elif state is SessionState.CONFIRMING_EXIT:
            self.confirm_exit()

    # Account menu

    def select_account(self) -> None:
        accounts = self.context.accounts
        self.console.print("\n[bold]--- Main Menu ---[/bold]")
        self.console.print("Select an account:")
        for i, account in enumerate(accounts, 1):
            self.console.print(f"  {i}. {escape(account.display_name)}")

        raw = self.ask(f"Enter your choice (1-{len(accounts)} or account name)")
        try:
            account = self.session.select_account(raw)
        except LibraryError as e:
            self.error(e)
            return
        self.console.print(f"\n[green]Logged in as: {escape(account.display_name)}[/green]")

    # Role menu

    def render_menu(self, account: Account, commands: tuple[Command, ...]) -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan")
        table.add_column(justify="left")
        for i, command in enumerate(commands, 1):
            table.add_row(f"{i}.", MENU_LABELS[command])

        self.console.print(Panel(
            table,
            title=f"{escape(account.display_name)}'s Menu",
            title_align="left",
            border_style="cyan",
            box=box.ROUNDED,
            expand=False,
        ))

    def role_menu(self) -> None:
        commands = self.session.commands
        self.render_menu(self.session.account, commands)

        raw = self.ask(f"Enter your choice (1-{len(commands)} or command name)")
        try:
            command = self.session.choose_command(raw)
            if command is not Command.EXIT:
                self.run_command(command)
        except LibraryError as e:
            self.error(e)

    def run_command(self, command: Command) -> None:
        """Ask for the command's input, run it and show the outcome."""
        self.session.precheck(command)

        text = ""
        if command in TEXT_COMMANDS:
            prompt = TEXT_PROMPTS[command].format(
                minimum=self.context.catalog.min_search_length
            )
            text = self.ask(prompt)

        result = self.session.execute(command, text)

        if command is Command.LIST:
            self.show_catalog(result)
        elif command is Command.SEARCH:
            self.show_search(text.strip(), result)
        elif command is Command.ADD:
            self.console.print(f'[green]Added:[/green] "{escape(result.title)}"')
        elif command is Command.REMOVE:
            self.console.print(f'[green]Removed:[/green] "{escape(result.title)}"')
        elif command is Command.BORROW:
            self.console.print(
                f'[green]{escape(self.session.account.id)} successfully borrowed '
                f'"{escape(result.title)}".[/green]'
            )
        elif command is Command.CHECKIN:
            self.console.print(f'[green]Checked in:[/green] "{escape(result.title)}"')

    def show_catalog(self, books: list[Book]) -> None:
        if not books:
            self.console.print("\n[bold]Catalog:[/bold] [dim](empty)[/dim]")
            return

        table = Table(title="Catalog", show_header=True)
        table.add_column("#", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Status")
        for i, book in enumerate(books, 1):
            table.add_row(str(i), escape(book.title), status_text(book))
        self.console.print(table)

    def show_search(self, term: str, books: list[Book]) -> None:
        if not books:
            self.console.print(f'[yellow]No books found matching "{escape(term)}".[/yellow]')
            return

        table = Table(
            title=f'Found {len(books)} book(s) matching "{escape(term)}"',
            show_header=True,
        )
        table.add_column("#", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Status")
        for i, book in enumerate(books, 1):
            table.add_row(str(i), escape(book.title), status_text(book))
        self.console.print(table)

    # Exit confirmation

    def confirm_exit(self) -> None:
        self.console.print("\nWhat would you like to do?")
        self.console.print("  1. Return to main menu")
        self.console.print("  2. Exit the program")

        state = self.session.confirm_exit(self.ask("Enter your choice (1 or 2)"))
        if state is SessionState.SELECTING_ACCOUNT:
            self.console.print("\n[dim]Returning to main menu...[/dim]")
        elif state is SessionState.TERMINATED:
            self.goodbye()
        else:
            self.console.print("\n[yellow]Invalid choice. Returning to your menu...[/yellow]")
