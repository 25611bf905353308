"""
lexer.py

PURPOSE: Sanitize raw player input into word tokens.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Commands are plain whitespace-separated words, so tokenizing is just:
- Lowercasing
- Trimming
- Splitting on runs of whitespace (which drops empty tokens)
"""


def tokenize(text: str) -> list[str]:
    """
    Convert input text into a list of lowercase words.

    Args:
        text: Raw player input

    Returns:
        List of words, empty if the input was blank
    """
    return text.lower().strip().split()
