"""Descriptor commands: parse and normalize reward strings."""

import typer

from src.cli.display import console, display_error, display_grantables
from src.grantable import GrantableError, parse_all

app = typer.Typer(help="Reward descriptor commands")


@app.command()
def parse(
    descriptor: str = typer.Argument(..., help="Reward descriptor, e.g. \"iron_sword, $5\""),
) -> None:
    """Parse a descriptor and show what it contains."""
    try:
        grantables = parse_all(descriptor)
    except GrantableError as e:
        display_error(str(e))
        raise typer.Exit(1)

    display_grantables(grantables)


@app.command()
def canonical(
    descriptor: str = typer.Argument(..., help="Reward descriptor"),
) -> None:
    """Print the canonical form of a descriptor."""
    try:
        grantables = parse_all(descriptor)
    except GrantableError as e:
        display_error(str(e))
        raise typer.Exit(1)

    console.print(", ".join(g.to_string() for g in grantables), markup=False, highlight=False)
