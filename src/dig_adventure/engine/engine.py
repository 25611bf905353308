"""
engine.py

PURPOSE: Turn player input into world transitions.
DEPENDENCIES: models, parser, actions

ARCHITECTURE NOTES:
dispatch() is the pure core of a turn:
    raw input -> tokenize -> alias expansion -> action lookup
              -> arity check -> handler -> TurnResult
It never raises for bad input; unknown commands, wrong argument counts
and failed preconditions all come back as TurnResults carrying the world
they were given.

GameEngine is a thin session wrapper for front ends: it threads the World
returned by each turn into the next one and remembers when the player
has left.
"""

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass

from dig_adventure.engine.actions import ACTIONS
from dig_adventure.engine.narration import describe_room
from dig_adventure.models.world import World
from dig_adventure.parser.aliases import DEFAULT_ALIASES, split_keys, translate
from dig_adventure.parser.lexer import tokenize

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
FAREWELL = "See you next time!"


@dataclass
class TurnResult:
    """Result of processing a player turn."""

    message: str  # Narrative text to display
    world: World | None  # Next world, None once the player has left
    error: bool = False  # True if the command was rejected or failed

    @property
    def game_over(self) -> bool:
        return self.world is None


def new_world(extra_aliases: Mapping[str, str] | None = None) -> World:
    """
    Create the starting world with the default aliases.

    Args:
        extra_aliases: Additional aliases ("a|b" keys allowed), overriding defaults
    """
    aliases = {**DEFAULT_ALIASES, **split_keys(extra_aliases or {})}
    return World.initial(aliases)


def dispatch(user_input: str, world: World, rng: random.Random) -> TurnResult:
    """
    Process one line of player input against a world.

    Args:
        user_input: Raw text from the player
        world: The current world (never modified)
        rng: Random source used when digging

    Returns:
        TurnResult with narration and the next world
    """
    tokens = tokenize(user_input)
    if not tokens:
        return TurnResult(message="Hm?!", world=world)

    words = translate(tokens, world.aliases)
    if not words:
        return TurnResult(message="What do you mean?", world=world, error=True)

    name, args = words[0], words[1:]

    if name == EXIT_COMMAND:
        logger.debug("Player left the game")
        return TurnResult(message=FAREWELL, world=None)

    action = ACTIONS.get(name)
    if action is None:
        logger.debug(f"Unknown command '{name}'")
        return TurnResult(message="What do you mean?", world=world, error=True)

    if not args and action.prompt is not None:
        return TurnResult(message=action.prompt, world=world)

    if not action.accepts(args):
        logger.debug(f"Rejected {len(args)} arguments for '{name}'")
        return TurnResult(message="Invalid arguments", world=world, error=True)

    logger.debug(f"Dispatching '{name}' with {args}")
    result = action.handler(world, args, rng)

    return TurnResult(
        message=result.message,
        world=result.world,
        error=not result.success,
    )


class GameEngine:
    """
    A single game session.

    Holds the current World and replaces it after every turn.
    """

    def __init__(
        self,
        world: World | None = None,
        rng: random.Random | None = None,
        extra_aliases: Mapping[str, str] | None = None,
    ):
        """
        Initialize a session.

        Args:
            world: Optional starting world (defaults to a new game)
            rng: Optional random source (seed it for reproducible digging)
            extra_aliases: Aliases added to a new game's defaults
        """
        self.world = world or new_world(extra_aliases)
        self.rng = rng or random.Random()
        self.game_over = False

    def describe_current_room(self) -> str:
        """Get the description of the room the player is in."""
        return describe_room(self.world)

    def process_input(self, user_input: str) -> TurnResult:
        """
        Process a line of player input.

        This is the main entry point for the game loop.

        Args:
            user_input: Raw text from the player

        Returns:
            TurnResult with message and next world
        """
        if self.game_over:
            return TurnResult(message="The game is over.", world=None)

        result = dispatch(user_input, self.world, self.rng)
        if result.world is None:
            self.game_over = True
        else:
            self.world = result.world

        return result
