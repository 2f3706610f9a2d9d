"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src (and the project root, for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minesweeper import Board, BoardConfig, Game


# ============================================================================
# Solution Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_solution() -> Board:
    """3x3 solution with a single mine in the top-left corner."""
    return Board.from_mines(3, [(0, 0)])


@pytest.fixture
def mine_free_solution() -> Board:
    """5x5 solution with no mines for cascade testing."""
    return Board.from_mines(5, [])


@pytest.fixture
def walled_solution() -> Board:
    """
    5x5 solution split by a column of mines.

    Column 2 is all mines, so columns 0 and 4 are zero regions that do
    not touch each other.
    """
    return Board.from_mines(5, [(row, 2) for row in range(5)])


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_game(corner_mine_solution: Board) -> Game:
    """Fresh game on the 3x3 corner-mine solution."""
    return Game(corner_mine_solution)


@pytest.fixture
def mine_free_game(mine_free_solution: Board) -> Game:
    """Fresh game on the mine-free 5x5 solution."""
    return Game(mine_free_solution)


@pytest.fixture
def walled_game(walled_solution: Board) -> Game:
    """Fresh game on the walled 5x5 solution."""
    return Game(walled_solution)


@pytest.fixture
def default_game() -> Game:
    """8x8 game generated with a fixed seed."""
    return Game.new(rng=np.random.default_rng(1234))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def default_config() -> BoardConfig:
    """Default 8x8 configuration with 5 mine draws."""
    return BoardConfig()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)
