"""Solveur intermédiaire : déductions à deux cellules (« multi flag »)."""

from __future__ import annotations

from typing import FrozenSet, Optional

from ...s0_board import Board, CellState, GameState, Safe
from ..types import Action, Move, Point, Reason
from .beginner import BeginnerSolver
from .logic import MiaLogic, scan_around, unknowns


def multi_flag(board: Board, x: int, y: int, mines: int, grid: FrozenSet[Point]) -> Optional[Move]:
    """
    Compare la cellule révélée (x, y) à un groupe `grid` de cases inconnues
    qui contient exactement `mines` mines.

    Si toutes les cases du groupe sont voisines de (x, y) et que le groupe
    suffit à compléter son nombre, ses autres voisins inconnus sont sûrs.
    Si le groupe plus les autres voisins inconnus tout juste suffisent,
    ces voisins sont des mines.
    """
    cell = board.get(x, y)
    if not isinstance(cell.type, Safe):
        return None
    number = cell.type.number

    neighbours = [Point(x2, y2) for x2, y2 in board.neighbours(x, y)]
    claimed = [p for p in neighbours if p in grid]
    others = [p for p in neighbours if p not in grid]
    strong_match = len(claimed) == len(grid)

    flagged = sum(1 for p in others if board.get(p.x, p.y).state == CellState.FLAGGED)
    hidden = unknowns(board, others)

    if strong_match and flagged + mines == number and hidden:
        target = hidden[0]
        return Move.single(target.x, target.y, Action.LEFT, Reason(MiaLogic.MULTI_FLAG_REVEAL, grid))
    if flagged + mines + len(hidden) == number and hidden:
        target = hidden[0]
        return Move.single(target.x, target.y, Action.RIGHT, Reason(MiaLogic.MULTI_FLAG_FLAG, grid))
    return None


class IntermediateSolver(BeginnerSolver):
    """Suit le nombre de mines de petites régions et en tire des déductions."""

    name = "Intermediate Solver"
    description = (
        "solveur qui suit le nombre de mines de régions individuelles "
        "et en tire des déductions logiques"
    )

    def solve(self, state: GameState) -> Optional[Move]:
        move = super().solve(state)
        if move is not None:
            return move

        board = state.board
        radius = self.config['multi_flag_radius']
        for x, y, cell in board.cells():
            if not (isinstance(cell.type, Safe) and cell.state == CellState.REVEALED):
                continue
            number = cell.type.number
            if number <= 0:
                continue
            flagged, flaggable = scan_around(board, x, y)
            grid = frozenset(unknowns(board, flaggable))
            if not (len(flagged) < number and grid):
                continue

            mines = number - len(flagged)
            for x2, y2 in board.around(x, y, radius):
                if board.get(x2, y2).state != CellState.REVEALED:
                    continue
                move = multi_flag(board, x2, y2, mines, grid)
                if move is not None:
                    return move

        if state.remaining_mines == 0:
            for x, y, cell in board.cells():
                if cell.state == CellState.UNKNOWN:
                    return Move.single(x, y, Action.LEFT, Reason(MiaLogic.ZERO_MINES_REMAINING))
        return None
