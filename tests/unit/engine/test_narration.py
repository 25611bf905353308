"""
TEST DOC: Narration

WHAT: Tests for room, item and inventory descriptions
WHY: Narration is the only output the player sees
HOW: Describe hand-built worlds and compare exact strings

CASES:
- Item lists joined with commas and "and"
- Room descriptions with ground items and exits
- Inventory listing

EDGE CASES:
- No items, no exits, a single exit
- Item tag with no phrase
"""

import pytest

from dig_adventure.engine.narration import (
    UnknownItemError,
    describe_inventory,
    describe_items,
    describe_room,
    join_phrases,
)
from dig_adventure.models.world import World


class TestDescribeItems:
    """Tests for item list narration."""

    def test_single_item(self):
        assert describe_items({"sledge"}) == "a sledge"

    def test_two_items(self):
        """Two items are joined with "and"."""
        assert describe_items({"gold", "sledge"}) == "a sledge and some gold coins"

    def test_three_items(self):
        """All but the last two are comma-separated."""
        assert (
            describe_items({"ladder", "gold", "sledge"})
            == "a sledge, some gold coins and a ladder lying down"
        )

    def test_four_items(self):
        assert describe_items({"lots-of-gold", "ladder", "gold", "sledge"}) == (
            "a sledge, some gold coins, a ladder lying down and LOTS of gold!"
        )

    def test_no_items(self):
        assert describe_items(set()) == ""

    def test_unknown_item(self):
        """An item without a phrase is a configuration error."""
        with pytest.raises(UnknownItemError):
            describe_items({"banana"})

    def test_join_phrases(self):
        assert join_phrases(["a", "b", "c"]) == "a, b and c"
        assert join_phrases(["a"]) == "a"


class TestDescribeRoom:
    """Tests for room narration."""

    def test_starting_room(self, world: World):
        """The origin shows its sledge and has no neighbours."""
        assert describe_room(world) == "You are at 0 0 0. On the ground you can see: a sledge."

    def test_empty_room_without_exits(self):
        world = World(maze={(2, -1, 0): frozenset()}, current_room=(2, -1, 0))
        assert describe_room(world) == "You are at 2 -1 0."

    def test_single_exit(self):
        world = World(maze={(0, 0, 0): frozenset(), (0, 1, 0): frozenset()})
        assert describe_room(world) == "You are at 0 0 0. There is an exit northward."

    def test_several_exits(self):
        world = World(
            maze={
                (0, 0, 0): frozenset({"gold"}),
                (1, 0, 0): frozenset(),
                (0, 0, -1): frozenset(),
                (0, 1, 0): frozenset(),
            }
        )
        assert describe_room(world) == (
            "You are at 0 0 0. On the ground you can see: some gold coins."
            " There are exits at north, east, down."
        )


class TestDescribeInventory:
    """Tests for inventory narration."""

    def test_empty(self, world: World):
        assert describe_inventory(world) == "You are not carrying anything"

    def test_with_items(self, world: World):
        world = world.evolve(inventory=frozenset({"ladder", "sledge"}))
        assert describe_inventory(world) == "You are carrying: a sledge and a ladder lying down"
