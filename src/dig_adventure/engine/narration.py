"""
narration.py

PURPOSE: Turn world state into descriptive text.
DEPENDENCIES: models

ARCHITECTURE NOTES:
These helpers are pure: they read a World (or parts of one) and return
strings. Item sets are unordered, so items are always narrated in the
order of ITEM_PHRASES to keep output stable.
"""

from collections.abc import Iterable

from dig_adventure.models.maze import GOLD, LADDER, LOTS_OF_GOLD, SLEDGE, find_exits
from dig_adventure.models.world import World

ITEM_PHRASES: dict[str, str] = {
    SLEDGE: "a sledge",
    GOLD: "some gold coins",
    LADDER: "a ladder lying down",
    LOTS_OF_GOLD: "LOTS of gold!",
}


class UnknownItemError(KeyError):
    """Raised when an item tag has no narration phrase."""


def item_phrase(item: str) -> str:
    """Get the phrase used to narrate a single item."""
    try:
        return ITEM_PHRASES[item]
    except KeyError:
        raise UnknownItemError(item) from None


def join_phrases(phrases: list[str]) -> str:
    """Join phrases as "a, b and c"."""
    if len(phrases) <= 1:
        return "".join(phrases)
    return ", ".join(phrases[:-1]) + f" and {phrases[-1]}"


def describe_items(items: Iterable[str]) -> str:
    """
    Describe a set of items.

    Example:
        {"ladder", "gold", "sledge"} -> "a sledge, some gold coins and a ladder lying down"
    """
    order = list(ITEM_PHRASES)
    tags = sorted(items, key=lambda tag: order.index(tag) if tag in order else len(order))
    return join_phrases([item_phrase(tag) for tag in tags])


def describe_ground(items: frozenset[str]) -> str:
    if not items:
        return ""
    return f" On the ground you can see: {describe_items(items)}."


def describe_exits(world: World) -> str:
    exits = [direction.value for direction in find_exits(world.current_room, world.maze)]
    if not exits:
        return ""
    if len(exits) == 1:
        return f" There is an exit {exits[0]}ward."
    return f" There are exits at {', '.join(exits)}."


def describe_room(world: World) -> str:
    """Describe the room the player is in: position, ground and exits."""
    position = " ".join(str(axis) for axis in world.current_room)
    return f"You are at {position}.{describe_ground(world.ground)}{describe_exits(world)}"


def describe_inventory(world: World) -> str:
    if not world.inventory:
        return "You are not carrying anything"
    return f"You are carrying: {describe_items(world.inventory)}"
