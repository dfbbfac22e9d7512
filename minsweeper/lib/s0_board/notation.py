"""
Notation texte des plateaux (vue joueur).

    '1'..'8'  cellule sûre révélée
    ' ' / '.' cellule vide révélée
    '!'       drapeau
    'O'       cellule inconnue
    'X'       mine révélée
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .board import Board
from .state import GameState
from .types import EMPTY, MINE, UNKNOWN, BoardSize, Cell, CellState, GameStatus, Safe

EMPTY_CHARS = (" ", ".")
FLAG_CHAR = "!"
UNKNOWN_CHAR = "O"
EXPLODED_CHAR = "X"


def parse_cell(char: str) -> Cell:
    """Convertit un caractère en cellule."""
    if "1" <= char <= "8":
        return Cell(Safe(int(char)), CellState.REVEALED)
    if char in EMPTY_CHARS:
        return Cell(EMPTY, CellState.REVEALED)
    if char == FLAG_CHAR:
        return Cell(UNKNOWN, CellState.FLAGGED)
    if char == UNKNOWN_CHAR:
        return Cell(UNKNOWN, CellState.UNKNOWN)
    if char == EXPLODED_CHAR:
        return Cell(MINE, CellState.REVEALED)
    raise ValueError(f"Caractère de plateau inconnu: {char!r}")


def format_cell(cell: Cell) -> str:
    if cell.state == CellState.FLAGGED:
        return FLAG_CHAR
    if cell.state == CellState.UNKNOWN:
        return UNKNOWN_CHAR
    if isinstance(cell.type, Safe):
        return str(cell.type.number) if cell.type.number else EMPTY_CHARS[1]
    return EXPLODED_CHAR


def parse_board(
    rows: Iterable[str],
    remaining_mines: int,
    status: GameStatus = GameStatus.PLAYING,
    mines: Optional[int] = None,
) -> GameState:
    """
    Construit un état de partie à partir de lignes de texte.

    Sans `mines` explicite, le nombre total de mines vaut `remaining_mines`
    plus les drapeaux posés.
    """
    lines = [row.rstrip("\n") for row in rows]
    lines = [line for line in lines if line.strip("\n")]
    if not lines:
        raise ValueError("Plateau vide")

    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("Toutes les lignes du plateau doivent avoir la même longueur")

    cells = [[parse_cell(char) for char in line] for line in lines]
    flags = sum(1 for row in cells for cell in row if cell.state == CellState.FLAGGED)
    total = mines if mines is not None else remaining_mines + flags
    if total <= 0:
        raise ValueError(
            f"Le plateau doit contenir au moins une mine (total calculé : {total})"
        )
    size = BoardSize(width, len(lines), total)
    return GameState(status, Board.from_rows(size, cells), remaining_mines)


def format_board(board: Board) -> List[str]:
    """Lignes de texte du plateau (inverse de `parse_board`)."""
    return ["".join(format_cell(cell) for cell in row) for row in board.rows]
