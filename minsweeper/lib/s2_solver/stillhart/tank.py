"""
Solveur de Patrick Stillhart (https://github.com/arcs-/Minesweeper-Solver).

Déductions simples sur chaque nombre, puis solveur « tank » de LuckyToilet
(https://luckytoilet.wordpress.com/2012/12/23/2125/) : recherche par
backtracking de toutes les affectations cohérentes de la frontière.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np

from ...s0_board import CODE_FLAG, CODE_UNREVEALED, Board, CellState, Coord, GameState, Safe
from ..solver import Solver
from ..types import Action, Move, Reason


class TankLogic(Enum):
    """Logiques du solveur tank (valeur = description)."""
    SINGLE_FLAG = "les cases fermées autour du nombre sont toutes des mines"
    SINGLE_CHORD = "tous les drapeaux autour du nombre sont posés"
    TANK_FLAG = "la case est minée dans toutes les solutions de sa région"
    TANK_REVEAL = "la case est libre dans toutes les solutions de sa région"

    @property
    def description(self) -> str:
        return self.value


class _Region:
    """Cases de frontière liées par des nombres communs, et leurs contraintes."""

    def __init__(self, cells: List[Coord], numbers: Dict[Coord, int]):
        self.cells = cells
        self.numbers = numbers
        # contraintes à revérifier après l'affectation de la case i
        self.checks: List[List[Coord]] = []
        for x, y in cells:
            self.checks.append([
                (nx, ny) for (nx, ny) in numbers if abs(nx - x) <= 1 and abs(ny - y) <= 1
            ])


class StillhartSolver(Solver):
    """Déductions simples puis solveur tank par région."""

    name = "Patrick Stillhart Solver"
    description = "solveur « tank » de Patrick Stillhart : déductions simples puis recherche exhaustive par région"

    def solve(self, state: GameState) -> Optional[Move]:
        board = state.board
        for x, y, cell in board.cells():
            if isinstance(cell.type, Safe) and cell.state == CellState.REVEALED and cell.type.number > 0:
                move = self._solve_single(board, x, y)
                if move is not None:
                    return move
        return self._tank(state)

    @staticmethod
    def _solve_single(board: Board, x: int, y: int) -> Optional[Move]:
        number = board.get(x, y).number
        closed = [(x2, y2) for x2, y2 in board.neighbours(x, y) if board.get(x2, y2).state == CellState.UNKNOWN]
        if not closed:
            return None
        flagged = board.count_around(x, y, CellState.FLAGGED)

        if number == len(closed) + flagged:
            x2, y2 = closed[0]
            return Move.single(x2, y2, Action.RIGHT, Reason(TankLogic.SINGLE_FLAG))
        if number == flagged:
            return Move.single(x, y, Action.LEFT, Reason(TankLogic.SINGLE_CHORD))
        return None

    # === Tank ===

    def _tank(self, state: GameState) -> Optional[Move]:
        codes = state.board.to_array()
        unknown = codes == CODE_UNREVEALED
        revealed = codes >= 0

        all_empty = [(int(x), int(y)) for y, x in zip(*np.nonzero(unknown))]
        border = [(x, y) for x, y in all_empty if self._window(revealed, x, y).any()]

        max_size = self.config['tank_max_region_size']
        # Fin de partie : peu de cases hors d'atteinte, on les prend toutes en une
        # seule région, sauf si elle dépasse la taille max (retour aux régions)
        border_optimization = (
            len(all_empty) - len(border) > self.config['tank_endgame_cells']
            or len(all_empty) > max_size
        )
        if not border_optimization:
            border = all_empty
        if not border:
            return None

        numbers = {
            (int(x), int(y)): int(codes[y, x])
            for y, x in zip(*np.nonzero(codes > 0))
        }
        if border_optimization:
            regions = self._segregate(border, numbers)
        else:
            regions = [border]

        for cells in regions:
            if len(cells) > max_size:
                continue
            region = _Region(cells, self._relevant_numbers(cells, numbers, border_optimization))
            solutions = self._solutions(codes, region, state.remaining_mines, exact=not border_optimization)
            if not solutions:
                return None

            grid = np.array(solutions, dtype=bool)
            all_mine = grid.all(axis=0)
            all_safe = ~grid.any(axis=0)
            for i, (x, y) in enumerate(cells):
                if all_mine[i]:
                    return Move.single(x, y, Action.RIGHT, Reason(TankLogic.TANK_FLAG))
                if all_safe[i]:
                    return Move.single(x, y, Action.LEFT, Reason(TankLogic.TANK_REVEAL))
        return None

    @staticmethod
    def _window(array: np.ndarray, x: int, y: int) -> np.ndarray:
        return array[max(0, y - 1):y + 2, max(0, x - 1):x + 2]

    @staticmethod
    def _relevant_numbers(cells: List[Coord], numbers: Dict[Coord, int], border_only: bool) -> Dict[Coord, int]:
        if not border_only:
            return numbers
        return {
            (nx, ny): n for (nx, ny), n in numbers.items()
            if any(abs(nx - x) <= 1 and abs(ny - y) <= 1 for x, y in cells)
        }

    @staticmethod
    def _segregate(border: List[Coord], numbers: Dict[Coord, int]) -> List[List[Coord]]:
        """Regroupe les cases de frontière partageant un nombre voisin (union-find)."""
        parent = {cell: cell for cell in border}

        def find(cell: Coord) -> Coord:
            if parent[cell] == cell:
                return cell
            parent[cell] = find(parent[cell])
            return parent[cell]

        def union(a: Coord, b: Coord) -> None:
            root_a = find(a)
            root_b = find(b)
            if root_a != root_b:
                parent[root_a] = root_b

        number_to_cells: Dict[Coord, List[Coord]] = {}
        for x, y in border:
            for nx, ny in numbers:
                if abs(nx - x) <= 1 and abs(ny - y) <= 1:
                    number_to_cells.setdefault((nx, ny), []).append((x, y))

        for cells in number_to_cells.values():
            for other in cells[1:]:
                union(cells[0], other)

        regions: Dict[Coord, List[Coord]] = {}
        for cell in border:
            regions.setdefault(find(cell), []).append(cell)
        return list(regions.values())

    def _solutions(
        self,
        codes: np.ndarray,
        region: _Region,
        remaining_mines: int,
        exact: bool,
    ) -> List[Tuple[bool, ...]]:
        """Toutes les affectations cohérentes de la région (True = mine)."""
        mine = codes == CODE_FLAG
        empty = codes >= 0
        solutions: List[Tuple[bool, ...]] = []

        def consistent(x: int, y: int) -> bool:
            number = region.numbers[(x, y)]
            mines = int(self._window(mine, x, y).sum())
            if mines > number:
                return False
            # la case (x, y) est révélée : elle compte dans la fenêtre des vides
            bordering = self._window(empty, x, y).size - 1
            empties = int(self._window(empty, x, y).sum()) - 1
            return bordering - empties >= number

        def recurse(depth: int, placed: int) -> None:
            if placed > remaining_mines:
                return
            if depth == len(region.cells):
                if exact and placed != remaining_mines:
                    return
                solutions.append(tuple(bool(mine[y, x]) for x, y in region.cells))
                return

            x, y = region.cells[depth]
            checks = region.checks[depth]

            mine[y, x] = True
            if all(consistent(nx, ny) for nx, ny in checks):
                recurse(depth + 1, placed + 1)
            mine[y, x] = False

            empty[y, x] = True
            if all(consistent(nx, ny) for nx, ny in checks):
                recurse(depth + 1, placed)
            empty[y, x] = False

        if all(consistent(nx, ny) for nx, ny in region.numbers):
            recurse(0, 0)
        return solutions
