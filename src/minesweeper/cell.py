"""
Cell module for Minesweeper game.

Defines the integer encoding shared by the solution grid and the visible
board, plus the single-character glyphs used to print them.
"""
from enum import Enum, IntEnum


# ============================================================================
# Constants
# ============================================================================

MAX_NUMBER = 8


class CellState(IntEnum):
    """
    Non-numeric cell values.

    Revealed numbers (0-8) are stored as themselves, so every other value
    sits outside that range.
    """

    MINE = 9
    UNKNOWN = -1
    FLAG = -2
    QUESTION_MARK = -3
    EXPLOSION = -4


class Operation(Enum):
    """Player operations, keyed by their single-letter input code."""

    CLICK = "C"
    FLAG = "F"
    QUESTION_MARK = "Q"


_GLYPHS = {
    CellState.UNKNOWN: " ",
    CellState.FLAG: "F",
    CellState.QUESTION_MARK: "?",
    CellState.EXPLOSION: "#",
    CellState.MINE: "*",
}


# ============================================================================
# Helpers
# ============================================================================

def is_number(value: int) -> bool:
    """Check if value is a mine count (revealed or in the solution)."""
    return 0 <= int(value) <= MAX_NUMBER


def to_glyph(value: int) -> str:
    """
    Convert a cell value to the character printed for it.

    Args:
        value: Cell value from either grid.

    Returns:
        A single character.

    Raises:
        ValueError: If value is not a known encoding.
    """
    value = int(value)
    if is_number(value):
        return str(value)
    try:
        return _GLYPHS[CellState(value)]
    except ValueError:
        raise ValueError(f"Unknown cell value: {value}") from None
