"""Solveur débutant : drapeaux autour d'un nombre et chord."""

from __future__ import annotations

from typing import Optional

from ...s0_board import CellState, GameState, Safe
from ..solver import Solver
from ..types import Action, Move, Point, Reason
from .logic import MiaLogic, scan_around, unknowns


class BeginnerSolver(Solver):
    """Ne sait que marquer tous les voisins d'un nombre et faire des chords."""

    name = "Beginner Solver"
    description = "solveur qui sait seulement marquer tous les voisins et faire des chords"

    def solve(self, state: GameState) -> Optional[Move]:
        board = state.board
        for x, y, cell in board.cells():
            if not (isinstance(cell.type, Safe) and cell.state == CellState.REVEALED):
                continue
            number = cell.type.number
            flagged, flaggable = scan_around(board, x, y)

            if number == len(flagged) and len(flaggable) > len(flagged):
                return Move.single(x, y, Action.LEFT, Reason.of(MiaLogic.CHORD, flagged))
            if number == len(flaggable):
                hidden = unknowns(board, flaggable)
                if hidden:
                    related = set(flaggable) | {Point(x, y)}
                    return Move.single(
                        hidden[0].x, hidden[0].y, Action.RIGHT, Reason.of(MiaLogic.FLAG_CHORD, related)
                    )
            elif number < len(flagged):
                return Move.single(flagged[0].x, flagged[0].y, Action.RIGHT)
        return None
