"""Parser module: input sanitizing and alias expansion."""

from dig_adventure.parser.aliases import DEFAULT_ALIASES, split_keys, translate
from dig_adventure.parser.lexer import tokenize

__all__ = [
    "DEFAULT_ALIASES",
    "split_keys",
    "tokenize",
    "translate",
]
