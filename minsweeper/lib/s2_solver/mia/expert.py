"""Solveur expert : force brute sur les petites frontières."""

from __future__ import annotations

from typing import List, Optional, Set

from ...s0_board import CellState, GameState
from ..brute_force import enumerate_configurations, find_frontier
from ..types import Action, Click, Move, Point, Reason
from .intermediate import IntermediateSolver
from .logic import MiaLogic


def brute_force_move(state: GameState, limit: int) -> Optional[Move]:
    """
    Coup déduit de toutes les configurations de la frontière.

    Ne s'applique que si la frontière compte moins de `limit` cases.
    """
    empties, adjacents = find_frontier(state)
    if not (len(empties) < limit and adjacents):
        return None

    configurations = list(enumerate_configurations(state, sorted(adjacents)))
    if not configurations:
        return None

    clicks: Set[Click] = set()
    for point in empties:
        if not any(c.is_mine(point) for c in configurations):
            clicks.add(Click(point, Action.LEFT))
        elif all(c.is_mine(point) for c in configurations):
            clicks.add(Click(point, Action.RIGHT))
    if clicks:
        return Move.of(clicks, Reason.of(MiaLogic.BRUTE_FORCE, empties))

    if all(c.remaining_mines == 0 for c in configurations):
        for x, y, cell in state.board.cells():
            point = Point(x, y)
            if cell.state == CellState.UNKNOWN and not any(c.is_mine(point) for c in configurations):
                clicks.add(Click(point, Action.LEFT))
    if clicks:
        return Move.of(clicks, Reason.of(MiaLogic.BRUTE_FORCE_EXHAUSTION, empties))
    return None


class ExpertSolver(IntermediateSolver):
    """Énumère toutes les configurations de mines possibles quand c'est raisonnable."""

    name = "Expert Solver"
    description = (
        "solveur qui énumère toutes les configurations de mines possibles "
        "dans des limites de temps raisonnables"
    )

    def solve(self, state: GameState) -> Optional[Move]:
        move = super().solve(state)
        if move is not None:
            return move
        return brute_force_move(state, self.config['expert_brute_force_limit'])
