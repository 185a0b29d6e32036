"""Reward file commands."""

from pathlib import Path
from typing import Optional

import typer

from src.cli.display import display_error, display_grantables, display_info, display_load_errors, display_success
from src.config import get_settings
from src.services.reward_loader import RewardLoadError, load_reward_file

app = typer.Typer(help="Reward file commands")


@app.command()
def check(
    path: Optional[Path] = typer.Argument(None, help="Reward file (.yaml, .yml or .json)"),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Stop at the first bad entry"),
    show: bool = typer.Option(False, "--show", help="Show the parsed rewards"),
) -> None:
    """Validate every descriptor in a reward file."""
    settings = get_settings()
    path = path or Path(settings.rewards_file)
    strict = settings.strict if strict is None else strict

    try:
        loaded = load_reward_file(path, strict=strict)
    except (FileNotFoundError, RewardLoadError) as e:
        display_error(str(e))
        raise typer.Exit(1)

    if show:
        for arena in loaded.arenas.values():
            for wave, rewards in arena.every.items():
                display_grantables(rewards, title=f"{arena.name}: every {wave}")
            for wave, rewards in arena.after.items():
                display_grantables(rewards, title=f"{arena.name}: after {wave}")
            if arena.completion:
                display_grantables(arena.completion, title=f"{arena.name}: completion")

    if loaded.errors:
        display_load_errors(loaded.errors)
        display_error(f"{len(loaded.errors)} invalid entries in {path}")
        raise typer.Exit(1)

    display_info(f"{len(loaded.arenas)} arenas checked")
    display_success(f"All rewards in {path} are valid")
