"""
Minesweeper game module.

Provides the console Minesweeper game: cell encoding, board generation,
game rules and the text front end.
"""
from .cell import CellState, Operation, is_number, to_glyph
from .board import Board, BoardConfig, GameState, DEFAULT_CONFIG, generate_solution
from .game import Game, GameOverError, is_solved
from .console import Console, InputError, parse_location, parse_operation, render

__all__ = [
    "CellState",
    "Operation",
    "is_number",
    "to_glyph",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_CONFIG",
    "generate_solution",
    "Game",
    "GameOverError",
    "is_solved",
    "Console",
    "InputError",
    "parse_location",
    "parse_operation",
    "render",
]
