"""
Board module for Minesweeper game.

Implements the square grid shared by the hidden solution and the visible
board, and the generator that seeds a solution with mines.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import CellState


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Side length of the square grid.
        num_mines: Number of mine draws. Draws may land on the same cell,
            so the board can end up with fewer mines than this.
    """

    size: int = 8
    num_mines: int = 5

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")


DEFAULT_CONFIG = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

@dataclass(eq=False)
class Board:
    """
    Square grid of encoded cell values.

    Values are mine counts (0-8) or CellState members, stored in an int8
    array indexed [row, col].
    """

    grid: np.ndarray

    def __post_init__(self) -> None:
        """Check the grid shape after dataclass creation."""
        if self.grid.ndim != 2 or self.grid.shape[0] != self.grid.shape[1]:
            raise ValueError("Board grid must be square")
        if self.grid.shape[0] < 1:
            raise ValueError("Board size must be positive")

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def empty(cls, size: int) -> "Board":
        """Create a visible board with every cell unknown."""
        grid = np.full((size, size), int(CellState.UNKNOWN), dtype=np.int8)
        return cls(grid)

    @classmethod
    def from_mines(
        cls, size: int, mines: Iterable[Tuple[int, int]]
    ) -> "Board":
        """
        Build a read-only solution board from explicit mine positions.

        Args:
            size: Side length of the grid.
            mines: (row, col) positions; repeated positions are allowed.

        Returns:
            Board where mines hold CellState.MINE and every other cell
            holds its adjacent mine count.

        Raises:
            ValueError: If a mine position lies outside the grid.
        """
        mine_mask = np.zeros((size, size), dtype=bool)
        for row, col in mines:
            if not (0 <= row < size and 0 <= col < size):
                raise ValueError(f"Mine position out of bounds: ({row}, {col})")
            mine_mask[row, col] = True

        counts = _count_adjacent_mines(mine_mask)
        grid = np.where(mine_mask, int(CellState.MINE), counts).astype(np.int8)
        grid.flags.writeable = False
        return cls(grid)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self.grid.shape[0]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up-to-8 surrounding cells.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Cell Access
    # ========================================================================

    def get(self, row: int, col: int) -> int:
        """Get the encoded value at a position."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Store an encoded value at a position."""
        self.grid[row, col] = value

    @property
    def mine_count(self) -> int:
        """Number of cells holding a mine."""
        return self.count(CellState.MINE)

    def count(self, value: int) -> int:
        """Number of cells holding the given value."""
        return int(np.count_nonzero(self.grid == value))


# ============================================================================
# Solution Generation
# ============================================================================

def _count_adjacent_mines(mine_mask: np.ndarray) -> np.ndarray:
    """Count mines in the 8-neighborhood of every cell, clipped at edges."""
    height, width = mine_mask.shape
    padded = np.pad(mine_mask.astype(np.int8), 1)
    counts = np.zeros((height, width), dtype=np.int8)
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            counts += padded[
                1 + delta_row:1 + delta_row + height,
                1 + delta_col:1 + delta_col + width,
            ]
    return counts


def generate_solution(
    config: Optional[BoardConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Generate a hidden solution board.

    Mines are drawn independently with replacement, so duplicate draws
    collapse into a single mine.

    Args:
        config: Board configuration (default: 8x8 with 5 mine draws).
        rng: Random generator used for placement (default: fresh, unseeded).

    Returns:
        Read-only solution board.
    """
    config = config or DEFAULT_CONFIG
    rng = rng if rng is not None else np.random.default_rng()
    draws = rng.integers(0, config.size, size=(config.num_mines, 2))
    mines = [(int(row), int(col)) for row, col in draws]
    return Board.from_mines(config.size, mines)
