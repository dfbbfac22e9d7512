"""
Force brute sur la frontière.

Énumère toutes les configurations de mines cohérentes avec les cellules
numérotées qui bordent une cellule inconnue. Les affectations sont gardées
dans un dictionnaire point -> mine ? plutôt qu'en copiant le plateau.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterator, List, Set, Tuple

from ..s0_board import CellState, GameState, Safe
from .types import Point


@dataclass(frozen=True)
class Configuration:
    """Une affectation cohérente des cellules de la frontière."""
    assignment: Dict[Point, bool]
    remaining_mines: int

    def is_mine(self, point: Point) -> bool:
        return self.assignment.get(point, False)


def find_frontier(state: GameState) -> Tuple[Set[Point], Set[Point]]:
    """
    Frontière du plateau.

    Returns:
        (inconnues voisines d'un nombre > 0, nombres > 0 voisins d'une inconnue)
    """
    board = state.board
    empties: Set[Point] = set()
    adjacents: Set[Point] = set()
    for x, y, cell in board.cells():
        if cell.state != CellState.UNKNOWN:
            continue
        for x2, y2 in board.around(x, y):
            neighbour = board.get(x2, y2)
            if isinstance(neighbour.type, Safe) and neighbour.type.number > 0:
                empties.add(Point(x, y))
                adjacents.add(Point(x2, y2))
    return empties, adjacents


def enumerate_configurations(state: GameState, points: List[Point]) -> Iterator[Configuration]:
    """Configurations feuilles cohérentes avec toutes les contraintes de `points`."""
    if not points:
        return
    yield from _recurse(state, points, 0, {}, state.remaining_mines)


def _recurse(
    state: GameState,
    points: List[Point],
    index: int,
    assignment: Dict[Point, bool],
    remaining: int,
) -> Iterator[Configuration]:
    board = state.board
    current = points[index]
    number = board.get(current.x, current.y).number

    empties: List[Point] = []
    flags = 0
    for x, y in board.around(current.x, current.y):
        point = Point(x, y)
        cell = board.get(x, y)
        if cell.state == CellState.FLAGGED or assignment.get(point, False):
            flags += 1
        elif cell.state == CellState.UNKNOWN and point not in assignment:
            empties.append(point)

    mines_to_flag = number - flags
    if mines_to_flag < 0 or mines_to_flag > remaining or mines_to_flag > len(empties):
        return

    last = index + 1 == len(points)
    for chosen in combinations(empties, mines_to_flag):
        branch = dict(assignment)
        for point in empties:
            branch[point] = point in chosen
        branch_remaining = remaining - mines_to_flag
        if last:
            yield Configuration(branch, branch_remaining)
        else:
            yield from _recurse(state, points, index + 1, branch, branch_remaining)
