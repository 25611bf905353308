"""
world.py

PURPOSE: The complete, immutable state of a game session.
DEPENDENCIES: pydantic, coords, maze

ARCHITECTURE NOTES:
World is a frozen value. Handlers never mutate it; they build a new World
with evolve(), which re-runs validation so the invariants below hold for
every World that exists:
- the current room is a room of the maze
- the equipped item, if any, is in the inventory
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dig_adventure.models.coords import ORIGIN, Coordinate
from dig_adventure.models.maze import LOTS_OF_GOLD, SLEDGE

# Where the treasure room sits in a new game
TREASURE_ROOM: Coordinate = (1, 1, 5)


class World(BaseModel):
    """
    Everything that changes during play.

    The alias table lives here too, so aliases created with the `alias`
    command are part of the session state.

    Frozen covers attribute assignment only: maze and aliases are plain
    dicts and must not be modified in place. evolve() and with_ground()
    always build new dicts.
    """

    model_config = ConfigDict(frozen=True)

    maze: dict[Coordinate, frozenset[str]] = Field(
        ...,
        description="Ground items of every room, keyed by coordinate",
    )
    inventory: frozenset[str] = Field(
        default_factory=frozenset,
        description="Item tags carried by the player",
    )
    current_room: Coordinate = Field(default=ORIGIN, description="Where the player stands")
    equipped: str | None = Field(default=None, description="Item currently wielded")
    aliases: dict[str, str] = Field(
        default_factory=dict,
        description="Map of alias token -> command it expands to",
    )

    @field_validator("aliases")
    @classmethod
    def normalize_aliases(cls, v: dict[str, str]) -> dict[str, str]:
        """Input is lowercased before lookup, so aliases are stored lowercased."""
        return {key.lower(): command.lower() for key, command in v.items()}

    @model_validator(mode="after")
    def check_invariants(self) -> "World":
        if self.current_room not in self.maze:
            raise ValueError(f"Current room {self.current_room} is not in the maze")
        if self.equipped is not None and self.equipped not in self.inventory:
            raise ValueError(f"Equipped item '{self.equipped}' is not in the inventory")
        return self

    @classmethod
    def initial(cls, aliases: Mapping[str, str]) -> "World":
        """
        Create the world a new game starts in.

        The player stands at the origin next to a sledge; somewhere far
        above lies a room full of gold.
        """
        return cls(
            maze={
                ORIGIN: frozenset({SLEDGE}),
                TREASURE_ROOM: frozenset({LOTS_OF_GOLD}),
            },
            aliases=dict(aliases),
        )

    @property
    def ground(self) -> frozenset[str]:
        """Items lying in the current room."""
        return self.maze[self.current_room]

    def evolve(self, **changes: Any) -> "World":
        """Return a validated copy of this world with some fields replaced."""
        return type(self)(**{**dict(self), **changes})

    def with_ground(self, items: frozenset[str], **changes: Any) -> "World":
        """Return a copy with the current room's ground (and any other fields) replaced."""
        return self.evolve(maze={**self.maze, self.current_room: items}, **changes)
