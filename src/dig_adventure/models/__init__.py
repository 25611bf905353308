"""Domain models for the digging adventure."""

from dig_adventure.models.coords import (
    DIRECTION_OFFSETS,
    ORIGIN,
    Coordinate,
    Direction,
    coordinate_at,
    parse_direction,
)
from dig_adventure.models.maze import DIGGABLE_ITEMS, Maze, find_exits, has_exit, new_room_at
from dig_adventure.models.world import World

__all__ = [
    "DIGGABLE_ITEMS",
    "DIRECTION_OFFSETS",
    "ORIGIN",
    "Coordinate",
    "Direction",
    "Maze",
    "World",
    "coordinate_at",
    "find_exits",
    "has_exit",
    "new_room_at",
    "parse_direction",
]
