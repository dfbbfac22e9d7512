"""Solveur Mia : le plus complet des solveurs Mia, coups groupés."""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple

from ...s0_board import Board, CellState, GameState, GameStatus, Safe
from ..solver import Solver
from ..types import Action, Click, Move, Point, Reason
from .expert import brute_force_move
from .logic import MiaLogic, scan_around, unknowns

# (mines, cases inconnues) : la région contient exactement `mines` mines
Region = Tuple[int, FrozenSet[Point]]


def _clicks(points, action: Action):
    return [Click(p, action) for p in points]


class MiaSolver(Solver):
    """
    Enchaîne, dans l'ordre, et renvoie le premier coup trouvé :
        1. chord / drapeaux groupés / retrait de drapeaux en trop
        2. déduction par régions (inclusion et recouvrement)
        3. 0 mine restante : tout révéler
        4. force brute si la frontière est petite
    """

    name = "Mia Solver"
    description = "la meilleure tentative de solveur de démineur de Mia"

    def solve(self, state: GameState) -> Optional[Move]:
        board = state.board
        if state.status == GameStatus.PLAYING:
            move = self._solve_numbers(board) or self._solve_regions(board)
            if move is not None:
                return move

        if state.remaining_mines == 0:
            hidden = [Point(x, y) for x, y, cell in board.cells() if cell.state == CellState.UNKNOWN]
            if hidden:
                return Move.of(_clicks(hidden, Action.LEFT), Reason(MiaLogic.ZERO_MINES_REMAINING))

        return brute_force_move(state, self.config['mia_brute_force_limit'])

    def _solve_numbers(self, board: Board) -> Optional[Move]:
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
                    return Move.of(_clicks(hidden, Action.RIGHT), Reason.of(MiaLogic.FLAG_CHORD, related))
            elif number < len(flagged):
                return Move.of(_clicks(flagged, Action.RIGHT))
        return None

    @staticmethod
    def _initial_regions(board: Board) -> Dict[Region, None]:
        regions: Dict[Region, None] = {}
        for x, y, cell in board.cells():
            if not (isinstance(cell.type, Safe) and cell.state == CellState.REVEALED):
                continue
            flagged, flaggable = scan_around(board, x, y)
            required = cell.type.number - len(flagged)
            if required <= 0:
                continue
            hidden = frozenset(unknowns(board, flaggable))
            if hidden:
                regions[(required, hidden)] = None
        return regions

    def _solve_regions(self, board: Board) -> Optional[Move]:
        """
        Déduction par régions, itérée jusqu'à point fixe.

        Pour une région R incluse dans une région S, S \\ R contient
        mines(S) - mines(R) mines : 0 -> sûres, toutes -> minées, sinon une
        nouvelle région. Pour deux régions qui se recouvrent, si
        mines(S) - mines(R) égale la taille de S \\ R, ces cases sont minées.
        """
        regions = self._initial_regions(board)
        changed = True
        while changed:
            derived: Dict[Region, None] = {}
            for number, points in regions:
                for other_number, other_points in regions:
                    rest = points - other_points
                    if not rest or rest == points:
                        continue
                    remaining = number - other_number

                    if other_points <= points:
                        if remaining == 0:
                            return Move.of(
                                _clicks(rest, Action.LEFT),
                                Reason(MiaLogic.REGION_DEDUCTION_REVEAL, other_points),
                            )
                        if remaining == len(rest):
                            return Move.of(
                                _clicks(rest, Action.RIGHT),
                                Reason(MiaLogic.REGION_DEDUCTION_FLAG, other_points),
                            )
                        if 0 < remaining < len(rest):
                            derived[(remaining, rest)] = None
                    elif remaining == len(rest):
                        return Move.of(
                            _clicks(rest, Action.RIGHT),
                            Reason(MiaLogic.REGION_DEDUCTION_FLAG, other_points),
                        )
            new = [region for region in derived if region not in regions]
            regions.update(derived)
            changed = bool(new)
        return None
