"""Interface des solveurs et boucle de jeu commune."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from ...config import SOLVER_CONFIG
from ..s0_board import GameState, GameStatus
from .types import Action, Move, Result

if TYPE_CHECKING:
    from ..s1_game import Minsweeper

MoveCallback = Optional[Callable[[Move], None]]


class Solver(ABC):
    """
    Solveur de démineur.

    `solve` ne propose que des coups certains : jamais de devinette. Quand
    aucune déduction n'est possible, il renvoie None (abandon).
    """

    name: str = "Solver"
    description: str = ""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = {**SOLVER_CONFIG, **(config or {})}

    @abstractmethod
    def solve(self, state: GameState) -> Optional[Move]:
        """Coup certain pour l'état donné, ou None."""

    def play(self, game: "Minsweeper", on_move: MoveCallback = None) -> GameState:
        """
        Joue la partie tant que le solveur trouve des coups.

        Les clics d'un même coup sont appliqués ligne par ligne.
        """
        state = game.get_game_state()
        while state.status == GameStatus.PLAYING:
            move = self.solve(state)
            if move is None:
                break
            if on_move is not None:
                on_move(move)
            for click in sorted(move.clicks, key=lambda c: (c.point.y, c.point.x, c.action.value)):
                if click.action == Action.LEFT:
                    state = game.left_click(click.point.x, click.point.y)
                else:
                    state = game.right_click(click.point.x, click.point.y)
        return state

    def solve_game(self, game: "Minsweeper", on_move: MoveCallback = None) -> Result:
        """Joue la partie jusqu'au bout ou jusqu'à l'abandon."""
        return result_of(self.play(game, on_move))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def result_of(state: GameState) -> Result:
    """Issue correspondant au statut final d'une partie."""
    if state.status == GameStatus.WON:
        return Result.WON
    if state.status == GameStatus.LOST:
        return Result.LOST
    if state.status == GameStatus.PLAYING:
        return Result.RESIGNED
    raise ValueError("La partie n'a pas démarré")
