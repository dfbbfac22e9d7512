"""État d'une partie."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .board import Board
from .types import GameStatus


@dataclass(frozen=True)
class GameState:
    """Statut + plateau + mines restantes (mines - drapeaux posés)."""
    status: GameStatus
    board: Board
    remaining_mines: int

    def with_status(self, status: GameStatus) -> "GameState":
        return replace(self, status=status)

    def with_board(self, board: Board) -> "GameState":
        return replace(self, board=board)

    def with_remaining_mines(self, remaining_mines: int) -> "GameState":
        return replace(self, remaining_mines=remaining_mines)

    def hide_mines(self) -> "GameState":
        return replace(self, board=self.board.hide_mines())

    def clone(self) -> "GameState":
        return replace(self, board=self.board.clone())
