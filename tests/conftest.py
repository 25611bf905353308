"""
conftest.py

Shared pytest fixtures for dig_adventure tests.
"""

import random

import pytest

from dig_adventure.engine.engine import GameEngine, new_world
from dig_adventure.models.world import World


class FixedChoice(random.Random):
    """A random source whose choice() always returns the same item."""

    def __init__(self, item: str):
        super().__init__(0)
        self.item = item

    def choice(self, seq):  # noqa: ARG002
        return self.item


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def world() -> World:
    """The world a new game starts in."""
    return new_world()


@pytest.fixture
def armed_world(world: World) -> World:
    """Starting world with the sledge picked up and equipped."""
    return world.with_ground(frozenset(), inventory=frozenset({"sledge"}), equipped="sledge")


@pytest.fixture
def ladder_world(world: World) -> World:
    """A world with a ladder at the origin and a room directly above it."""
    return world.evolve(
        maze={
            (0, 0, 0): frozenset({"ladder"}),
            (0, 0, 1): frozenset({"gold"}),
        }
    )


@pytest.fixture
def ladder_rng() -> random.Random:
    """A random source that always finds a ladder."""
    return FixedChoice("ladder")


@pytest.fixture
def engine(rng: random.Random) -> GameEngine:
    """A game session with a seeded random source."""
    return GameEngine(rng=rng)
