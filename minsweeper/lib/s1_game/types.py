"""Types partagés des parties."""

from __future__ import annotations

from typing import Callable, Optional

# Rappel invoqué à la victoire ou à la défaite
GameCallback = Optional[Callable[[], None]]


class GenerationInterruptedError(RuntimeError):
    """
    Génération d'une partie résolvable interrompue.

    Levée par `MinsweeperGame.reveal` quand `interrupt()` a été appelé ou que
    le nombre maximal de tirages est dépassé.
    """

    def __init__(self, message: str = "Génération interrompue", attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts
