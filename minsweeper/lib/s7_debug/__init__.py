"""Module s7_debug : Journal structuré des parties et des coups."""

from .logger import DebugLogger, GameLog, MoveLog

__all__ = [
    "DebugLogger",
    "GameLog",
    "MoveLog",
]
