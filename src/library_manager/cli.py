"""Command-line interface for Library Manager."""

import typer
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_LOG_LEVEL, MAX_BOOKS, MAX_BORROW_PER_USER, MIN_SEARCH_LENGTH
from .core import AppContext, Catalog, Role
from .core.session import build_accounts
from .logging_setup import configure_logging
from .shell import LibraryShell

app = typer.Typer(
    name="library-manager",
    help="Library Manager - interactive library catalog",
)
console = Console()


def create_context() -> AppContext:
    """Build the catalog and accounts for one program run."""
    catalog = Catalog(
        capacity=MAX_BOOKS,
        borrow_limit=MAX_BORROW_PER_USER,
        min_search_length=MIN_SEARCH_LENGTH,
    )
    return AppContext(catalog=catalog, accounts=build_accounts())


def role_style(role: Role) -> str:
    """Get Rich style for an account role."""
    styles = {
        Role.ADMIN: "bold magenta",
        Role.MEMBER: "green",
    }
    return styles.get(role, "")


@app.command()
def shell():
    """Start the interactive library menus."""
    LibraryShell(create_context(), console=console).run()


@app.command()
def accounts():
    """List the built-in accounts and what each may do."""
    table = Table(title="Accounts", show_header=True)
    table.add_column("#", style="dim")
    table.add_column("Account", style="cyan")
    table.add_column("Name")
    table.add_column("Role")
    table.add_column("Commands", style="dim")

    for i, account in enumerate(build_accounts(), 1):
        style = role_style(account.role)
        table.add_row(
            str(i),
            account.id,
            account.display_name,
            f"[{style}]{account.role.value}[/{style}]",
            ", ".join(command.value for command in account.commands),
        )

    console.print(table)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level", "-l", help="Logging level (debug, info, warning, error)"
    ),
):
    """Library Manager - interactive library catalog."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    if ctx.invoked_subcommand is None:
        shell()


if __name__ == "__main__":
    app()
