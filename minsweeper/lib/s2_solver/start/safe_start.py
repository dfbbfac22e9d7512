"""Faux solveur garantissant un premier coup sûr."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ...s0_board import GameState, GameStatus
from ..solver import MoveCallback, Solver
from ..types import Move, Result

if TYPE_CHECKING:
    from ...s1_game import Minsweeper


class SafeStart(Solver):
    """
    Passé à `MinsweeperGame.start`, garantit que le premier `reveal` tombe
    sur une cellule sûre. Ne résout rien d'autre.
    """

    name = "Safe Start"
    description = "faux solveur qui garantit seulement un premier coup sûr"

    def solve(self, state: GameState) -> Optional[Move]:
        return None

    def solve_game(self, game: "Minsweeper", on_move: MoveCallback = None) -> Result:
        if game.get_game_state().status == GameStatus.LOST:
            return Result.LOST
        return Result.WON
