"""
Game module for Minesweeper.

Owns the solution and visible boards for one game and applies player
operations to them: flagging, question marks, and flood-fill reveals.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .board import Board, BoardConfig, GameState, generate_solution
from .cell import CellState, Operation


class GameOverError(RuntimeError):
    """Raised when an operation is applied to a finished game."""


# ============================================================================
# Win Evaluation
# ============================================================================

def is_solved(board: Board, solution: Board) -> bool:
    """
    Check whether the visible board matches the solution.

    A cell matches when its visible value equals the solution value, or
    when it is flagged and the solution holds a mine.

    Args:
        board: Visible board.
        solution: Hidden solution board.

    Returns:
        True if every cell matches.
    """
    shown = board.grid
    truth = solution.grid
    flagged_mines = (shown == CellState.FLAG) & (truth == CellState.MINE)
    return bool(np.all((shown == truth) | flagged_mines))


# ============================================================================
# Game Class
# ============================================================================

@dataclass
class Game:
    """
    A single game of Minesweeper.

    Attributes:
        solution: Read-only solution board.
        board: Visible board, all unknown at the start.
        state: Current game state.
    """

    solution: Board
    board: Optional[Board] = None
    state: GameState = GameState.PLAYING

    def __post_init__(self) -> None:
        """Create the visible board if one was not supplied."""
        if self.board is None:
            self.board = Board.empty(self.solution.size)
        if self.board.size != self.solution.size:
            raise ValueError("Board and solution sizes differ")

    @classmethod
    def new(
        cls,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Game":
        """Start a game on a freshly generated solution."""
        return cls(generate_solution(config, rng))

    # ========================================================================
    # Operation Dispatch
    # ========================================================================

    def apply(self, operation: Operation, row: int, col: int) -> bool:
        """
        Apply a player operation to a cell.

        The win condition is checked afterwards whether or not the
        operation was valid.

        Args:
            operation: Operation to perform.
            row: Row index (Y).
            col: Column index (X).

        Returns:
            True if the operation was valid for the cell's current state,
            False otherwise.

        Raises:
            GameOverError: If the game has already ended.
        """
        self._ensure_playing()
        if not self.board.is_valid_position(row, col):
            return False

        valid = self._dispatch(operation, row, col)
        self._check_win_condition()
        return valid

    def _dispatch(self, operation: Operation, row: int, col: int) -> bool:
        """Mutate the cell according to its state and the operation."""
        current = self.board.get(row, col)

        if current == CellState.UNKNOWN:
            if operation is Operation.CLICK:
                self.reveal(row, col)
            elif operation is Operation.FLAG:
                self.board.set(row, col, CellState.FLAG)
            else:
                self.board.set(row, col, CellState.QUESTION_MARK)
            return True

        if operation is Operation.FLAG and current == CellState.FLAG:
            self.board.set(row, col, CellState.UNKNOWN)
            return True
        if (
            operation is Operation.QUESTION_MARK
            and current == CellState.QUESTION_MARK
        ):
            self.board.set(row, col, CellState.UNKNOWN)
            return True

        return False

    # ========================================================================
    # Reveal
    # ========================================================================

    def reveal(self, row: int, col: int) -> None:
        """
        Reveal a cell, cascading through zero-count cells.

        Does nothing if the cell is not unknown. Revealing a mine marks an
        explosion and loses the game. Otherwise the count is shown and every
        unknown neighbor whose count is zero is revealed in turn. Numbered
        cells are never uncovered by the cascade.

        Args:
            row: Row index (Y).
            col: Column index (X).

        Raises:
            GameOverError: If the game has already ended.
        """
        self._ensure_playing()
        if self.board.get(row, col) != CellState.UNKNOWN:
            return

        if self.solution.get(row, col) == CellState.MINE:
            self.board.set(row, col, CellState.EXPLOSION)
            self.state = GameState.LOST
            return

        pending = [(row, col)]
        while pending:
            cell_row, cell_col = pending.pop()
            if self.board.get(cell_row, cell_col) != CellState.UNKNOWN:
                continue

            value = self.solution.get(cell_row, cell_col)
            self.board.set(cell_row, cell_col, value)

            for neighbor in self.board.neighbors(cell_row, cell_col):
                if self.board.get(*neighbor) != CellState.UNKNOWN:
                    continue
                if self.solution.get(*neighbor) == 0:
                    pending.append(neighbor)

        self._check_win_condition()

    # ========================================================================
    # State Checks
    # ========================================================================

    def _ensure_playing(self) -> None:
        """Refuse to mutate a finished game."""
        if self.state is not GameState.PLAYING:
            raise GameOverError(f"Game is already over ({self.state.name})")

    def _check_win_condition(self) -> None:
        """Mark the game won if the visible board matches the solution."""
        if self.state is GameState.PLAYING and is_solved(
            self.board, self.solution
        ):
            self.state = GameState.WON

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.state is GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.state is GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.state is GameState.LOST
