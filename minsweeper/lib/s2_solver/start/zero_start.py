"""Faux solveur garantissant un premier coup sur une cellule vide."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ...s0_board import EMPTY, GameState, GameStatus
from ..solver import MoveCallback, Solver
from ..types import Move, Result

if TYPE_CHECKING:
    from ...s1_game import Minsweeper


class ZeroStart(Solver):
    """
    Passé à `MinsweeperGame.start`, garantit que le premier `reveal` tombe
    sur un 0 (et ouvre donc une zone). Ne résout rien d'autre.
    """

    name = "Zero Start"
    description = "faux solveur qui garantit seulement un premier coup sur un 0"

    def solve(self, state: GameState) -> Optional[Move]:
        return None

    def solve_game(self, game: "Minsweeper", on_move: MoveCallback = None) -> Result:
        state = game.get_game_state()
        if state.status == GameStatus.LOST:
            return Result.LOST
        if state.status == GameStatus.WON:
            return Result.WON
        if state.status == GameStatus.PLAYING and any(
            cell.type == EMPTY for _, _, cell in state.board.cells()
        ):
            return Result.WON
        return Result.RESIGNED
