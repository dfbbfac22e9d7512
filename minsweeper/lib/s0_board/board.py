"""Plateau de jeu : grille de cellules indexée par (x, y)."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import numpy as np

from .types import EMPTY, UNKNOWN, BoardSize, Cell, CellState, Mine, Safe

Coord = Tuple[int, int]

# Codes du tableau numpy (même convention que les grilles du solver)
CODE_UNREVEALED = -1
CODE_FLAG = -2
CODE_EXPLODED = -3


class Board:
    """
    Plateau d'une partie.

    Stocké ligne par ligne : `rows[y][x]`. Les cellules sont immuables,
    seule la grille est mutable ; `clone()` suffit donc à isoler une copie.
    """

    def __init__(self, size: BoardSize, fill: Optional[Cell] = None):
        self.size = size
        fill = fill or Cell(EMPTY, CellState.UNKNOWN)
        self.rows: List[List[Cell]] = [[fill] * size.width for _ in range(size.height)]

    @classmethod
    def from_rows(cls, size: BoardSize, rows: List[List[Cell]]) -> "Board":
        """Construit un plateau à partir de lignes déjà remplies."""
        if len(rows) != size.height or any(len(row) != size.width for row in rows):
            raise ValueError(
                f"Dimensions des lignes incompatibles avec {size.width}x{size.height}"
            )
        board = cls.__new__(cls)
        board.size = size
        board.rows = [list(row) for row in rows]
        return board

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def get(self, x: int, y: int) -> Cell:
        return self.rows[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        self.rows[y][x] = cell

    def contains(self, x: int, y: int) -> bool:
        return self.size.contains(x, y)

    def around(self, x: int, y: int, radius: int = 1) -> Iterator[Coord]:
        """Coordonnées de la fenêtre carrée autour de (x, y), centre inclus."""
        for y2 in range(max(0, y - radius), min(self.height - 1, y + radius) + 1):
            for x2 in range(max(0, x - radius), min(self.width - 1, x + radius) + 1):
                yield x2, y2

    def neighbours(self, x: int, y: int) -> Iterator[Coord]:
        """Les (au plus) 8 voisins de (x, y)."""
        for x2, y2 in self.around(x, y):
            if (x2, y2) != (x, y):
                yield x2, y2

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                yield x, y, cell

    def count_around(self, x: int, y: int, state: CellState) -> int:
        return sum(1 for x2, y2 in self.around(x, y) if self.rows[y2][x2].state == state)

    def hide_mines(self) -> "Board":
        """Copie où toute cellule non révélée perd son type réel."""
        return Board.from_rows(self.size, [
            [cell if cell.state == CellState.REVEALED else Cell(UNKNOWN, cell.state) for cell in row]
            for row in self.rows
        ])

    def has_won(self) -> bool:
        """Aucune mine révélée et toutes les cellules sûres révélées."""
        for _, _, cell in self.cells():
            if isinstance(cell.type, Mine) and cell.state == CellState.REVEALED:
                return False
            if isinstance(cell.type, Safe) and cell.state != CellState.REVEALED:
                return False
        return True

    def to_array(self) -> np.ndarray:
        """
        Vue numérique (height, width) du plateau, côté joueur.

        -1 = non révélée, 0..8 = sûre révélée, -2 = drapeau, -3 = mine révélée.
        """
        codes = np.full((self.height, self.width), CODE_UNREVEALED, dtype=np.int8)
        for x, y, cell in self.cells():
            if cell.state == CellState.FLAGGED:
                codes[y, x] = CODE_FLAG
            elif cell.state == CellState.REVEALED:
                codes[y, x] = cell.type.number if isinstance(cell.type, Safe) else CODE_EXPLODED
        return codes

    def clone(self) -> "Board":
        return Board.from_rows(self.size, self.rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.rows == other.rows

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, mines={self.size.mines})"
