"""
cli.py

PURPOSE: Command-line interface for the digging adventure.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI is the line-reading front end around the engine:
- play: Play a game interactively
- config: Show the effective configuration
It reads one line per turn, hands it to the GameEngine and prints the
narration until the engine reports the player has left.
"""

import logging
import random
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from dig_adventure import __version__
from dig_adventure.config import Settings, get_settings
from dig_adventure.engine.engine import FAREWELL, GameEngine
from dig_adventure.ui import plain

app = typer.Typer(
    name="dig-adventure",
    help="Dig your way through an endless dungeon.",
    add_completion=False,
)

console = Console()


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr so they never mix with narration."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"dig-adventure version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Dig Adventure - a text adventure on a 3-D grid of rooms."""
    pass


@app.command()
def play(
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Seed for the items found in dug rooms",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Show world state after each turn",
        ),
    ] = False,
) -> None:
    """Play the game interactively."""
    settings = get_settings()
    configure_logging(settings)

    if seed is None:
        seed = settings.seed
    debug = debug or settings.debug

    engine = GameEngine(
        rng=random.Random(seed),
        extra_aliases=settings.extra_aliases,
    )

    plain.print_title("Dig Adventure")
    console.print()
    plain.print_message(engine.describe_current_room())
    console.print()

    # Main game loop
    while True:
        try:
            user_input = plain.print_prompt()
        except (EOFError, KeyboardInterrupt):
            console.print()
            plain.print_message(FAREWELL)
            break

        result = engine.process_input(user_input)

        if result.error:
            plain.print_error(result.message)
        else:
            plain.print_message(result.message)

        if result.game_over:
            break

        console.print()

        if debug:
            plain.print_debug(engine.world)
            console.print()


@app.command("config")
def config_cmd() -> None:
    """Show the current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    seed_status = settings.seed if settings.seed is not None else "(random)"
    console.print(f"  Seed: {seed_status}")
    console.print("[bold]Extra aliases:[/bold]")
    if not settings.extra_aliases:
        console.print("  (none)")
    for alias, command in sorted(settings.extra_aliases.items()):
        console.print(f"  {alias} -> {command}", markup=False)


if __name__ == "__main__":
    app()
