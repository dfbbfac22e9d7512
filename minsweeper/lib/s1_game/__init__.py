"""Module s1_game : Parties de démineur (coups, masquage, génération)."""

from .types import GameCallback, GenerationInterruptedError
from .base import Minsweeper, AbstractMinsweeper
from .hiding import AbstractHidingMinsweeper, AbstractRandomMinsweeper
from .game import MinsweeperGame, SetMinsweeperGame

__all__ = [
    # Types
    "GameCallback",
    "GenerationInterruptedError",
    # Parties
    "Minsweeper",
    "AbstractMinsweeper",
    "AbstractHidingMinsweeper",
    "AbstractRandomMinsweeper",
    "MinsweeperGame",
    "SetMinsweeperGame",
]
