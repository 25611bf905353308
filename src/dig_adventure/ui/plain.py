"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
It handles:
- Room descriptions and narration
- Errors
- The world-state debug panel
"""

import json

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from dig_adventure.models.world import World

# Global console instance
console = Console()


def print_message(text: str) -> None:
    """Print a normal game message."""
    # Narration may contain "[" (never markup), so print it literally
    console.print(text, markup=False)


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(Text(text, style="red"))


def print_prompt() -> str:
    """Print the input prompt and get user input."""
    return console.input("[bold cyan]>[/bold cyan] ")


def print_title(title: str) -> None:
    """Print a game title in a panel."""
    panel = Panel(
        Text(title, justify="center", style="bold"),
        border_style="blue",
    )
    console.print(panel)


def print_debug(world: World) -> None:
    """Print the world state."""
    data = {
        "room": list(world.current_room),
        "ground": sorted(world.ground),
        "inventory": sorted(world.inventory),
        "equipped": world.equipped,
        "rooms": len(world.maze),
    }
    console.print("[dim]--- DEBUG ---[/dim]")
    console.print(Text(json.dumps(data, indent=2), style="dim"))
    console.print("[dim]-------------[/dim]")
