"""Module s2_solver : Solveurs (API, force brute, Mia, start, tank)."""

from .types import Action, Click, Logic, Move, Point, Reason, Result
from .solver import MoveCallback, Solver, result_of
from .brute_force import Configuration, enumerate_configurations, find_frontier
from .mia import (
    BeginnerSolver,
    ExpertOnlySolver,
    ExpertSolver,
    IntermediateOnlySolver,
    IntermediateSolver,
    MiaLogic,
    MiaSolver,
)
from .start import SafeStart, ZeroStart
from .stillhart import StillhartSolver, TankLogic
from .registry import SOLVERS, available_solvers, get_default, get_solver

__all__ = [
    # Types
    "Point",
    "Action",
    "Click",
    "Logic",
    "Reason",
    "Move",
    "Result",
    "MoveCallback",
    # API
    "Solver",
    "result_of",
    "get_default",
    "get_solver",
    "available_solvers",
    "SOLVERS",
    # Force brute
    "Configuration",
    "find_frontier",
    "enumerate_configurations",
    # Solveurs
    "BeginnerSolver",
    "IntermediateSolver",
    "ExpertSolver",
    "IntermediateOnlySolver",
    "ExpertOnlySolver",
    "MiaSolver",
    "MiaLogic",
    "SafeStart",
    "ZeroStart",
    "StillhartSolver",
    "TankLogic",
]
