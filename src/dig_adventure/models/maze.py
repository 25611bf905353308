"""
maze.py

PURPOSE: The room graph - which coordinates are rooms and what lies in them.
DEPENDENCIES: coords

ARCHITECTURE NOTES:
The maze is a mapping from Coordinate to the frozenset of item tags on that
room's ground. A coordinate is a room iff it is a key; an empty frozenset is
an empty room, a missing key is solid rock. Exits are never stored: a room
has an exit in a direction whenever the neighbouring coordinate is a room.
"""

import random
from collections.abc import Mapping

from dig_adventure.models.coords import Coordinate, Direction, coordinate_at

Maze = Mapping[Coordinate, frozenset[str]]

# Item tags
SLEDGE = "sledge"
GOLD = "gold"
LADDER = "ladder"
LOTS_OF_GOLD = "lots-of-gold"

# Items that can appear in a freshly dug room
DIGGABLE_ITEMS: tuple[str, ...] = (GOLD, SLEDGE, LADDER)


def find_exits(coordinate: Coordinate, maze: Maze) -> list[Direction]:
    """
    Find the directions in which a neighbouring room exists.

    Returns:
        Directions in canonical order (north, west, south, east, up, down)
    """
    return [
        direction
        for direction in Direction
        if coordinate_at(coordinate, direction) in maze
    ]


def has_exit(coordinate: Coordinate, maze: Maze, direction: Direction) -> bool:
    """Check whether the room at coordinate has an exit towards direction."""
    return direction in find_exits(coordinate, maze)


def new_room_at(
    coordinate: Coordinate,
    direction: Direction,
    rng: random.Random,
) -> tuple[Coordinate, frozenset[str]]:
    """Create a room next to coordinate holding one randomly chosen item."""
    return coordinate_at(coordinate, direction), frozenset({rng.choice(DIGGABLE_ITEMS)})
