"""Parties dont l'état montré au joueur masque les mines."""

from __future__ import annotations

import random
from typing import Optional

from ..s0_board import MINE, Board, BoardSize, Cell, CellState, GameState, GameStatus, Safe
from .base import AbstractMinsweeper
from .types import GameCallback


class AbstractHidingMinsweeper(AbstractMinsweeper):
    """
    Masque le type des cellules non révélées tant que la partie est en cours.

    Après victoire ou défaite, l'état réel est rendu tel quel.
    """

    def get_game_state(self) -> GameState:
        if self.gamestate.status == GameStatus.PLAYING:
            return self.gamestate.hide_mines()
        return self.gamestate


class AbstractRandomMinsweeper(AbstractHidingMinsweeper):
    """Partie générée uniformément au hasard."""

    def __init__(
        self,
        size: BoardSize,
        on_win: GameCallback = None,
        on_lose: GameCallback = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(size, on_win, on_lose)
        self.rng = rng or random.Random()

    def start(self) -> GameState:
        self.gamestate = self.generate_game()
        return self.get_game_state()

    def generate_game(self) -> GameState:
        """Tire `size.mines` mines distinctes et calcule les nombres."""
        board = Board(self.size)
        mine_cell = Cell(MINE, CellState.UNKNOWN)
        for index in self.rng.sample(range(self.size.cell_count), self.size.mines):
            board.set(index % self.size.width, index // self.size.width, mine_cell)
        self._generate_numbers(board)
        return GameState(GameStatus.PLAYING, board, self.size.mines)

    @staticmethod
    def _generate_numbers(board: Board) -> None:
        for x, y, cell in list(board.cells()):
            if cell.is_safe:
                count = sum(1 for x2, y2 in board.neighbours(x, y) if board.get(x2, y2).is_mine)
                board.set(x, y, Cell(Safe(count), CellState.UNKNOWN))
