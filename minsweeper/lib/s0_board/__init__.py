"""Module s0_board : Plateau, cellules et état de partie."""

from .types import (
    EMPTY,
    MINE,
    UNKNOWN,
    BoardSize,
    Cell,
    CellState,
    CellType,
    ConventionalSize,
    GameStatus,
    InvalidBoardSizeError,
    Mine,
    Safe,
    Unknown,
)
from .board import CODE_EXPLODED, CODE_FLAG, CODE_UNREVEALED, Board, Coord
from .state import GameState
from .notation import format_board, format_cell, parse_board, parse_cell

__all__ = [
    # Types
    "CellState",
    "CellType",
    "Safe",
    "Mine",
    "Unknown",
    "EMPTY",
    "MINE",
    "UNKNOWN",
    "Cell",
    "GameStatus",
    "BoardSize",
    "ConventionalSize",
    "InvalidBoardSizeError",
    # Plateau
    "Board",
    "Coord",
    "CODE_UNREVEALED",
    "CODE_FLAG",
    "CODE_EXPLODED",
    "GameState",
    # Notation
    "parse_board",
    "format_board",
    "parse_cell",
    "format_cell",
]
