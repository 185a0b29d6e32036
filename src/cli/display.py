"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.grantable import Group


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def _add_grantable_rows(table: Table, grantables: list, depth: int = 0) -> None:
    indent = "  " * depth
    for grantable in grantables:
        kind = type(grantable).__name__
        table.add_row(f"{indent}{kind}", escape(str(grantable)), escape(grantable.to_string()))
        if isinstance(grantable, Group):
            _add_grantable_rows(table, grantable.elements, depth + 1)


def display_grantables(grantables: list, title: str = "Rewards") -> None:
    """Display parsed grantables as a table, expanding groups.

    Args:
        grantables: Parsed grantables.
        title: Table title.
    """
    if not grantables:
        console.print("[dim]No rewards.[/dim]")
        return

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Canonical", style="green")
    _add_grantable_rows(table, grantables)
    console.print(table)


def display_load_errors(errors: list[str]) -> None:
    """Display skipped reward entries.

    Args:
        errors: One message per skipped entry.
    """
    table = Table(title="Skipped entries", box=box.ROUNDED)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Problem", style="red")
    for i, error in enumerate(errors, 1):
        table.add_row(str(i), escape(error))
    console.print(table)
