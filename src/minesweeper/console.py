"""
Console front end for Minesweeper.

Renders boards as text, parses operation and coordinate input, and runs
the interactive turn loop.
"""
from typing import Callable, Tuple

from .board import Board, GameState
from .cell import Operation, to_glyph
from .game import Game


OPERATION_PROMPT = "Write operation: C (Click), F (Flag), Q (Question Mark)"
LOCATION_PROMPT = "Write location as: X Y"
WIN_MESSAGE = "YOU WON ! =D"
LOSS_MESSAGE = "YOU LOST, TRY AGAIN ! D="


class InputError(ValueError):
    """Raised when player input cannot be parsed."""


# ============================================================================
# Rendering
# ============================================================================

def render(board: Board) -> str:
    """
    Render a board as text.

    The first line is a column header; each following line starts with its
    row index.
    """
    header = "  " + "".join(str(col) for col in range(board.size))
    lines = [header]
    for row in range(board.size):
        glyphs = "".join(to_glyph(value) for value in board.grid[row])
        lines.append(f"{row} {glyphs}")
    return "\n".join(lines)


def state_label(state: GameState) -> str:
    """Banner printed above the board, e.g. '# Playing #'."""
    return f"# {state.name.capitalize()} #"


# ============================================================================
# Input Parsing
# ============================================================================

def parse_operation(text: str) -> Operation:
    """
    Parse an operation code.

    Args:
        text: Raw input line.

    Returns:
        The matching operation.

    Raises:
        InputError: If the code is not C, F or Q (case-sensitive).
    """
    token = text.strip()
    for operation in Operation:
        if operation.value == token:
            return operation
    raise InputError(f"{token} is not a valid option")


def _is_decimal(token: str) -> bool:
    return token.isascii() and token.isdigit()


def parse_location(text: str, size: int) -> Tuple[int, int]:
    """
    Parse a coordinate line of the form 'X Y'.

    Args:
        text: Raw input line.
        size: Board side length.

    Returns:
        (x, y) tuple, both in [0, size).

    Raises:
        InputError: If the line is not two unsigned decimal integers, or
            either is out of range.
    """
    format_error = InputError(
        f"{text.strip()!r} does not conform with the format: X Y"
    )
    tokens = text.split()
    if len(tokens) != 2 or not all(_is_decimal(token) for token in tokens):
        raise format_error
    x, y = int(tokens[0]), int(tokens[1])

    if x >= size or y >= size:
        raise InputError("Invalid coordinate")
    return x, y


# ============================================================================
# Turn Loop
# ============================================================================

class Console:
    """
    Interactive text loop around a single game.

    Args:
        game: Game to play.
        input_fn: Reads one line (default: built-in input).
        output_fn: Writes one message (default: built-in print).
    """

    def __init__(
        self,
        game: Game,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self.input_fn = input_fn
        self.output_fn = output_fn

    def _read(self, prompt: str) -> str:
        self.output_fn(prompt)
        return self.input_fn()

    def ask_operation(self) -> Operation:
        """Prompt until a valid operation code is entered."""
        while True:
            try:
                return parse_operation(self._read(OPERATION_PROMPT))
            except InputError as error:
                self.output_fn(str(error))

    def ask_location(self) -> Tuple[int, int]:
        """Prompt until a valid 'X Y' coordinate is entered."""
        while True:
            try:
                return parse_location(
                    self._read(LOCATION_PROMPT), self.game.board.size
                )
            except InputError as error:
                self.output_fn(str(error))

    def show(self) -> None:
        """Print the state banner and the visible board."""
        self.output_fn(state_label(self.game.state))
        self.output_fn(render(self.game.board))

    def play_turn(self) -> bool:
        """
        Read one operation and location and apply it.

        Returns:
            True if the operation was valid for the chosen cell.
        """
        operation = self.ask_operation()
        x, y = self.ask_location()
        valid = self.game.apply(operation, row=y, col=x)
        if not valid:
            self.output_fn(
                f"Invalid Operation {operation.name} for the position {x}, {y}"
            )
        self.show()
        return valid

    def play(self) -> GameState:
        """
        Run the game to completion.

        Prints the solution first, then loops over turns until the game is
        won or lost.

        Returns:
            The final game state.

        Raises:
            EOFError: If input ends before the game does.
        """
        self.output_fn("# Solution #")
        self.output_fn(render(self.game.solution))
        self.show()

        while self.game.is_playing:
            self.play_turn()

        if self.game.is_won:
            self.output_fn(WIN_MESSAGE)
        else:
            self.output_fn(LOSS_MESSAGE)
        return self.game.state
