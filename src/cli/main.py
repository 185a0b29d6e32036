"""Main CLI application for reward descriptors."""

import logging

import typer
from rich.logging import RichHandler

from src.cli.commands import descriptor, file
from src.config import get_settings

# Create main app
app = typer.Typer(
    name="rewards",
    help="Parse and validate arena reward descriptors",
    add_completion=True,
)

# Add sub-commands
app.add_typer(descriptor.app, name="descriptor")
app.add_typer(file.app, name="file")


@app.command()
def parse(
    text: str = typer.Argument(..., help="Reward descriptor"),
) -> None:
    """Quick parse - shortcut for 'rewards descriptor parse'."""
    descriptor.parse(descriptor=text)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Rewards - describe arena rewards as short strings.

    Use 'rewards parse "iron_sword, $5"' to see how a descriptor is read,
    and 'rewards file check rewards.yaml' to validate a reward file.
    """
    settings = get_settings()
    level = "DEBUG" if verbose else settings.effective_log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
