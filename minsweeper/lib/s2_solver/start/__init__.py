"""Faux solveurs de départ, à passer à `MinsweeperGame.start`."""

from .safe_start import SafeStart
from .zero_start import ZeroStart

__all__ = ["SafeStart", "ZeroStart"]
