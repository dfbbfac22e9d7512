"""Logiques de déduction des solveurs Mia et outils de voisinage communs."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from ...s0_board import Board, CellState
from ..types import Point


class MiaLogic(Enum):
    """Logiques employées par les solveurs Mia (valeur = description)."""
    CHORD = "le nombre de drapeaux autour de la cellule égale son nombre"
    FLAG_CHORD = "le nombre de cellules marquables autour de la cellule égale son nombre"
    MULTI_FLAG_REVEAL = "les cellules voisines forcent ces cellules à être sûres"
    MULTI_FLAG_FLAG = "les cellules voisines forcent ces cellules à être des mines"
    REGION_DEDUCTION_REVEAL = "le nombre de mines d'une région incluse rend le reste sûr"
    REGION_DEDUCTION_FLAG = "le nombre de mines d'une région voisine force le reste à être miné"
    ZERO_MINES_REMAINING = "0 mine restante, toutes les cellules inconnues sont sûres"
    BRUTE_FORCE_REVEAL = "aucune configuration possible ne place de mine sur cette cellule"
    BRUTE_FORCE_FLAG = "toutes les configurations possibles placent une mine sur cette cellule"
    BRUTE_FORCE = "dans toutes les configurations possibles ces cellules sont sûres/minées"
    BRUTE_FORCE_EXHAUSTION = "toutes les configurations épuisent les mines, le reste est sûr"

    @property
    def description(self) -> str:
        return self.value


def scan_around(board: Board, x: int, y: int) -> Tuple[List[Point], List[Point]]:
    """
    Drapeaux et cases encore marquables de la fenêtre 3x3.

    Returns:
        (drapeaux, drapeaux + inconnues), dans l'ordre ligne puis colonne
    """
    flagged: List[Point] = []
    flaggable: List[Point] = []
    for x2, y2 in board.around(x, y):
        state = board.get(x2, y2).state
        if state == CellState.FLAGGED:
            flagged.append(Point(x2, y2))
            flaggable.append(Point(x2, y2))
        elif state == CellState.UNKNOWN:
            flaggable.append(Point(x2, y2))
    return flagged, flaggable


def unknowns(board: Board, points: List[Point]) -> List[Point]:
    return [p for p in points if board.get(p.x, p.y).state == CellState.UNKNOWN]
