"""
actions.py

PURPOSE: Action handlers for game commands.
DEPENDENCIES: models, narration

ARCHITECTURE NOTES:
Each action has a handler that:
- Validates the action is possible
- Builds the next World
- Returns narrative text

Handlers are pure functions of (world, args, rng). They never mutate the
World they are given; a failed action returns it unchanged. The ACTIONS
registry is the closed set of commands the dispatcher knows, along with
how many arguments each accepts and what to ask when given none.
"""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass

from dig_adventure.engine.narration import describe_inventory, describe_room
from dig_adventure.models.coords import Direction, coordinate_at, parse_direction
from dig_adventure.models.maze import LADDER, SLEDGE, has_exit, new_room_at
from dig_adventure.models.world import World

logger = logging.getLogger(__name__)

# Argument meaning "every item" for take and drop
ALL = "all"


@dataclass(frozen=True)
class ActionResult:
    """Result of executing an action."""

    message: str
    world: World
    success: bool = True


def _fail(message: str, world: World) -> ActionResult:
    return ActionResult(message=message, world=world, success=False)


Handler = Callable[[World, list[str], random.Random], ActionResult]


@dataclass(frozen=True)
class Action:
    """
    A named command the player can issue.

    Attributes:
        name: Canonical command word
        handler: Function executing the command
        max_args: Most arguments the handler takes (None for unlimited)
        prompt: Question asked when called without arguments; None means
                the handler runs with no arguments instead
    """

    name: str
    handler: Handler
    max_args: int | None = 0
    prompt: str | None = None

    def accepts(self, args: list[str]) -> bool:
        """Check the argument count against this action's arity."""
        return self.max_args is None or len(args) <= self.max_args


def handle_look(world: World, _args: list[str], _rng: random.Random) -> ActionResult:
    """Handle LOOK: describe the current room."""
    return ActionResult(message=describe_room(world), world=world)


def handle_dig(world: World, args: list[str], rng: random.Random) -> ActionResult:
    """Handle DIG <direction>: carve a new room next to the current one."""
    direction = parse_direction(args[0])
    if direction is None:
        return _fail("Where?!", world)

    if has_exit(world.current_room, world.maze, direction):
        return _fail("There is already a room!", world)

    if world.equipped != SLEDGE:
        return _fail("You need to equip a sledge in order to dig the wall!", world)

    coordinate, ground = new_room_at(world.current_room, direction, rng)
    logger.info(f"Dug room at {coordinate} containing {sorted(ground)}")

    return ActionResult(
        message=f"You dig a new room {direction.value}ward.",
        world=world.evolve(maze={**world.maze, coordinate: ground}),
    )


def handle_move(world: World, args: list[str], _rng: random.Random) -> ActionResult:
    """Handle MOVE <direction>: walk into an adjacent room and describe it."""
    direction = parse_direction(args[0])
    if direction is None:
        return _fail("Where?!", world)

    if not has_exit(world.current_room, world.maze, direction):
        return _fail("There's no exit in that direction!", world)

    # Climbing needs a ladder in the room being left
    if direction is Direction.UP and LADDER not in world.ground:
        return _fail("You cannot go up if there's no ladder in the room.", world)

    moved = world.evolve(current_room=coordinate_at(world.current_room, direction))
    logger.info(f"Player moved {direction.value} to {moved.current_room}")

    return ActionResult(message=describe_room(moved), world=moved)


def handle_equip(world: World, args: list[str], _rng: random.Random) -> ActionResult:
    """Handle EQUIP <item>."""
    item = args[0]
    if item not in world.inventory:
        return _fail("You haven't such an item", world)

    return ActionResult(message="Equipped!", world=world.evolve(equipped=item))


def handle_drop(world: World, args: list[str], _rng: random.Random) -> ActionResult:
    """Handle DROP <item|all>: move items from the inventory to the ground."""
    item = args[0]

    if item == ALL:
        return ActionResult(
            message="Everything dropped!",
            world=world.with_ground(
                world.ground | world.inventory,
                inventory=frozenset(),
                equipped=None,
            ),
        )

    if item not in world.inventory:
        return _fail("You haven't such an item", world)

    return ActionResult(
        message="Item dropped!",
        world=world.with_ground(
            world.ground | {item},
            inventory=world.inventory - {item},
            equipped=None if world.equipped == item else world.equipped,
        ),
    )


def handle_take(world: World, args: list[str], _rng: random.Random) -> ActionResult:
    """Handle TAKE <item|all>: move items from the ground to the inventory."""
    item = args[0]

    if item == ALL:
        return ActionResult(
            message="Everything taken!",
            world=world.with_ground(frozenset(), inventory=world.inventory | world.ground),
        )

    if item not in world.ground:
        return _fail("There is not such item on the ground!", world)

    return ActionResult(
        message="Item taken!",
        world=world.with_ground(world.ground - {item}, inventory=world.inventory | {item}),
    )


def handle_inventory(world: World, _args: list[str], _rng: random.Random) -> ActionResult:
    """Handle INVENTORY: list carried items."""
    return ActionResult(message=describe_inventory(world), world=world)


def handle_alias(world: World, args: list[str], _rng: random.Random) -> ActionResult:
    """Handle ALIAS <alias> <command...>: add or replace an alias."""
    alias, words = args[0], args[1:]
    if not words:
        return _fail(f"Alias '{alias}' to what?", world)

    command = " ".join(words)
    logger.info(f"Alias '{alias}' -> '{command}'")

    return ActionResult(
        message=f"Alias created for the command {command}",
        world=world.evolve(aliases={**world.aliases, alias: command}),
    )


ACTIONS: dict[str, Action] = {
    action.name: action
    for action in (
        Action("look", handle_look),
        Action("dig", handle_dig, max_args=1, prompt="Where do you want to dig?"),
        Action("move", handle_move, max_args=1, prompt="Where do you want to go?"),
        Action("equip", handle_equip, max_args=1, prompt="What do you want to equip?"),
        Action("drop-item", handle_drop, max_args=1, prompt="What do you want to drop?"),
        Action("take-item", handle_take, max_args=1, prompt="What do you want to pick up?"),
        Action("inventory", handle_inventory),
        Action("alias-command", handle_alias, max_args=None, prompt="Alias what?"),
    )
}
