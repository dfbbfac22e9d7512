"""Registre des solveurs par nom et solveur par défaut."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .mia import (
    BeginnerSolver,
    ExpertOnlySolver,
    ExpertSolver,
    IntermediateOnlySolver,
    IntermediateSolver,
    MiaSolver,
)
from .solver import Solver
from .start import SafeStart, ZeroStart
from .stillhart import StillhartSolver

SOLVERS: Dict[str, Callable[..., Solver]] = {
    "beginner": BeginnerSolver,
    "intermediate": IntermediateSolver,
    "expert": ExpertSolver,
    "intermediate-only": IntermediateOnlySolver,
    "expert-only": ExpertOnlySolver,
    "mia": MiaSolver,
    "safe-start": SafeStart,
    "zero-start": ZeroStart,
    "stillhart": StillhartSolver,
}


def available_solvers() -> List[str]:
    """Noms acceptés par `get_solver`."""
    return list(SOLVERS)


def get_solver(name: str, config: Optional[Dict[str, Any]] = None) -> Solver:
    """
    Instancie un solveur par son nom.

    Raises:
        KeyError: nom inconnu
    """
    key = name.strip().lower()
    if key not in SOLVERS:
        raise KeyError(f"Solveur inconnu: {name} (parmi: {', '.join(SOLVERS)})")
    return SOLVERS[key](config)


# === Solveur par défaut ===

_default_solver: Optional[Solver] = None


def get_default() -> Solver:
    """Instance partagée du solveur par défaut (Mia)."""
    global _default_solver
    if _default_solver is None:
        _default_solver = MiaSolver()
    return _default_solver
