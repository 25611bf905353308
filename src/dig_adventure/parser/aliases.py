"""
aliases.py

PURPOSE: Expand short command tokens into canonical commands.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The alias table maps a single token to a command string, which may be
several words ("n" -> "move north"). Only the first token of the input is
looked up. The default table is written compactly with "|" separating
alternative spellings of one alias; split_keys() expands it into one
entry per spelling.
"""

import re
from collections.abc import Mapping

ALIAS_DELIMITER = re.compile(r"\|")

# Default aliases, "a|b" meaning both "a" and "b"
DEFAULT_ALIAS_SPEC: dict[str, str] = {
    "drop": "drop-item",
    "get|take": "take-item",
    "i|inv": "inventory",
    "n|north": "move north",
    "w|west": "move west",
    "s|south": "move south",
    "e|east": "move east",
    "u|up": "move up",
    "d|down": "move down",
    "go": "move",
    "alias": "alias-command",
}


def split_keys(spec: Mapping[str, str], splitter: re.Pattern[str] = ALIAS_DELIMITER) -> dict[str, str]:
    """
    Expand delimited keys into one entry per alternative.

    Example:
        {"get|take": "take-item"} -> {"get": "take-item", "take": "take-item"}
    """
    result: dict[str, str] = {}
    for key, command in spec.items():
        for alternative in splitter.split(key):
            alternative = alternative.strip().lower()
            if alternative:
                result[alternative] = command.lower()
    return result


DEFAULT_ALIASES: dict[str, str] = split_keys(DEFAULT_ALIAS_SPEC)


def translate(tokens: list[str], aliases: Mapping[str, str]) -> list[str]:
    """
    Expand the first token through the alias table.

    The replacement's words are put in front of the remaining tokens. If
    the new first word is itself an alias it is expanded too, but no alias
    is used twice, so cyclic aliases terminate.

    Args:
        tokens: Sanitized input words
        aliases: The alias table

    Returns:
        The expanded word list (unchanged if the first word is no alias)
    """
    words = list(tokens)
    seen: set[str] = set()
    while words and words[0] in aliases and words[0] not in seen:
        seen.add(words[0])
        words = aliases[words[0]].split() + words[1:]
    return words
