"""Solveur tank de Patrick Stillhart."""

from .tank import StillhartSolver, TankLogic

__all__ = ["StillhartSolver", "TankLogic"]
