"""Riichi mahjong hand analysis: tile notation, shanten, waits, discard ordering, yaku tables and tenpai rates."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "discard_value",
    "results",
    "search",
    "shanten",
    "tenpai",
    "tiles",
    "yaku",
]