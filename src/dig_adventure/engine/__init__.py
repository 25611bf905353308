"""Game engine module."""

from dig_adventure.engine.actions import ACTIONS, Action, ActionResult
from dig_adventure.engine.engine import GameEngine, TurnResult, dispatch, new_world

__all__ = [
    "ACTIONS",
    "Action",
    "ActionResult",
    "GameEngine",
    "TurnResult",
    "dispatch",
    "new_world",
]
