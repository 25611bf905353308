"""
Dig Adventure - a text adventure where you dig your own dungeon.

This package provides:
- An immutable world model of rooms on a 3-D grid
- Alias-driven command translation and dispatch
- A terminal front end for playing
"""

__version__ = "0.1.0"
