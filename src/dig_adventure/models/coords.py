"""
coords.py

PURPOSE: Directions and 3-D integer coordinates for the room grid.
DEPENDENCIES: None (pure Python + enum)

ARCHITECTURE NOTES:
A coordinate is a plain (x, y, z) tuple so it can be used directly as a
maze key. Each direction is bound to a fixed unit offset; UP and DOWN move
along the z-axis. Enum declaration order is the canonical exit order.
"""

from enum import Enum

Coordinate = tuple[int, int, int]

ORIGIN: Coordinate = (0, 0, 0)


class Direction(Enum):
    """The six directions a player can move or dig in."""

    NORTH = "north"
    WEST = "west"
    SOUTH = "south"
    EAST = "east"
    UP = "up"
    DOWN = "down"


DIRECTION_OFFSETS: dict[Direction, Coordinate] = {
    Direction.NORTH: (0, 1, 0),
    Direction.WEST: (-1, 0, 0),
    Direction.SOUTH: (0, -1, 0),
    Direction.EAST: (1, 0, 0),
    Direction.UP: (0, 0, 1),
    Direction.DOWN: (0, 0, -1),
}


def coordinate_at(origin: Coordinate, direction: Direction) -> Coordinate:
    """Return the coordinate one step from origin towards direction."""
    dx, dy, dz = DIRECTION_OFFSETS[direction]
    x, y, z = origin
    return (x + dx, y + dy, z + dz)


def parse_direction(word: str) -> Direction | None:
    """Look up a direction by its lowercase name, or None if unknown."""
    try:
        return Direction(word)
    except ValueError:
        return None
