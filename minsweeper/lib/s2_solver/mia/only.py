"""
Solveurs « only » : abandonnent une partie qui n'a jamais eu besoin de
leur logique propre.

Utiles pour générer des parties d'un niveau précis : une partie gagnée par
`ExpertOnlySolver` ne se résout pas sans force brute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet

from ..solver import MoveCallback, result_of
from ..types import Logic, Move, Result
from .expert import ExpertSolver
from .intermediate import IntermediateSolver
from .logic import MiaLogic

if TYPE_CHECKING:
    from ...s1_game import Minsweeper

INTERMEDIATE_LOGIC: FrozenSet[Logic] = frozenset({
    MiaLogic.MULTI_FLAG_REVEAL,
    MiaLogic.MULTI_FLAG_FLAG,
    MiaLogic.REGION_DEDUCTION_REVEAL,
    MiaLogic.REGION_DEDUCTION_FLAG,
    MiaLogic.ZERO_MINES_REMAINING,
})

EXPERT_LOGIC: FrozenSet[Logic] = frozenset({
    MiaLogic.BRUTE_FORCE,
    MiaLogic.BRUTE_FORCE_EXHAUSTION,
    MiaLogic.BRUTE_FORCE_REVEAL,
    MiaLogic.BRUTE_FORCE_FLAG,
})


class RequiredLogicMixin:
    """Résultat RESIGNED si aucun coup n'a employé une logique de `required_logic`."""

    required_logic: FrozenSet[Logic] = frozenset()

    def solve_game(self, game: "Minsweeper", on_move: MoveCallback = None) -> Result:
        used = False

        def track(move: Move) -> None:
            nonlocal used
            if move.reason is not None and move.reason.logic in self.required_logic:
                used = True
            if on_move is not None:
                on_move(move)

        state = self.play(game, track)
        if not used:
            return Result.RESIGNED
        return result_of(state)


class IntermediateOnlySolver(RequiredLogicMixin, IntermediateSolver):
    required_logic = INTERMEDIATE_LOGIC

    name = "Intermediate Only Solver"
    description = "solveur intermédiaire qui abandonne les parties assez faciles pour le solveur débutant"


class ExpertOnlySolver(RequiredLogicMixin, ExpertSolver):
    required_logic = EXPERT_LOGIC

    name = "Expert Only Solver"
    description = "solveur expert qui abandonne les parties assez faciles pour le solveur intermédiaire"
