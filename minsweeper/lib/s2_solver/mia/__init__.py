"""Solveurs Mia : Beginner, Intermediate, Expert, variantes « only » et Mia."""

from .logic import MiaLogic
from .beginner import BeginnerSolver
from .intermediate import IntermediateSolver
from .expert import ExpertSolver, brute_force_move
from .only import (
    EXPERT_LOGIC,
    INTERMEDIATE_LOGIC,
    ExpertOnlySolver,
    IntermediateOnlySolver,
)
from .mia import MiaSolver

__all__ = [
    # Types
    "MiaLogic",
    "INTERMEDIATE_LOGIC",
    "EXPERT_LOGIC",
    # Solveurs
    "BeginnerSolver",
    "IntermediateSolver",
    "ExpertSolver",
    "IntermediateOnlySolver",
    "ExpertOnlySolver",
    "MiaSolver",
    "brute_force_move",
]
