"""
Parties jouables : `MinsweeperGame` (principale) et `SetMinsweeperGame`
(partie construite sur un état donné).
"""

from __future__ import annotations

import random
import threading
from typing import TYPE_CHECKING, Optional, Union

from ...config import GENERATION_CONFIG
from ..s0_board import Board, BoardSize, ConventionalSize, GameState, GameStatus
from .hiding import AbstractHidingMinsweeper, AbstractRandomMinsweeper
from .types import GameCallback, GenerationInterruptedError

if TYPE_CHECKING:
    from ..s2_solver import Solver


class MinsweeperGame(AbstractRandomMinsweeper):
    """
    Partie principale.

    La partie créée n'est pas démarrée (statut NEVER) : tout coup est sans
    effet jusqu'à `start()` ou `start(solver)`.

    Avec un solveur, la génération est repoussée au premier `reveal(x, y)` :
    des plateaux aléatoires sont tirés jusqu'à ce que le solveur gagne la
    partie ouverte en (x, y). La partie obtenue est donc résolvable par ce
    solveur. Ce premier `reveal` peut bloquer longtemps ; `interrupt()`
    (depuis un autre thread) l'arrête avec `GenerationInterruptedError`.

    Particularités :
        - après victoire, l'état réel est rendu : les mines non marquées ne
          reçoivent pas de drapeau et `remaining_mines` n'est pas forcé à 0
        - le premier coup n'est pas garanti sûr (voir les solveurs `start`)
    """

    def __init__(
        self,
        size: Union[BoardSize, ConventionalSize],
        on_win: GameCallback = None,
        on_lose: GameCallback = None,
        rng: Optional[random.Random] = None,
    ):
        if isinstance(size, ConventionalSize):
            size = size.size
        super().__init__(size, on_win, on_lose, rng)
        self.solver: Optional["Solver"] = None
        self.first = False
        self.attempts = 0
        self._interrupted = threading.Event()

    def start(self, solver: Optional["Solver"] = None) -> GameState:
        """Démarre ou redémarre la partie, résolvable par `solver` s'il est donné."""
        self.solver = solver
        self.gamestate = GameState(GameStatus.PLAYING, Board(self.size), self.size.mines)
        self.first = True
        self.attempts = 0
        self._interrupted.clear()
        return self.get_game_state()

    def interrupt(self) -> None:
        """Demande l'arrêt de la génération en cours (thread-safe)."""
        self._interrupted.set()

    def _generate_solvable(self, x: int, y: int) -> GameState:
        # Import local : s2_solver dépend de s1_game
        from ..s2_solver import Result

        max_attempts = GENERATION_CONFIG['max_attempts']
        self.attempts = 0
        while True:
            if self._interrupted.is_set():
                self._interrupted.clear()
                raise GenerationInterruptedError(attempts=self.attempts)
            if max_attempts is not None and self.attempts >= max_attempts:
                raise GenerationInterruptedError(
                    f"Aucune partie résolvable après {self.attempts} tirages",
                    attempts=self.attempts,
                )
            self.attempts += 1

            candidate = self.generate_game()
            trial = SetMinsweeperGame(candidate.clone())
            trial.reveal(x, y)
            if self.solver.solve_game(trial) == Result.WON:
                return candidate

    def reveal(self, x: int, y: int) -> GameState:
        """
        Révèle (x, y) ; le premier appel génère le plateau.

        Raises:
            GenerationInterruptedError: génération interrompue ; la partie
                attend toujours son premier `reveal`.
        """
        if not self._can_play(x, y):
            return self.get_game_state()
        if self.first:
            if self.solver is not None:
                self.gamestate = self._generate_solvable(x, y)
            else:
                self.gamestate = self.generate_game()
            self.first = False
        return super().reveal(x, y)

    def set_flagged(self, x: int, y: int, flagged: bool) -> GameState:
        """Sans effet avant le premier `reveal` : le plateau n'existe pas encore."""
        if self.first:
            return self.get_game_state()
        return super().set_flagged(x, y, flagged)


class SetMinsweeperGame(AbstractHidingMinsweeper):
    """Partie jouée sur un état déjà construit (ne peut pas être démarrée)."""

    def __init__(self, state: GameState, on_win: GameCallback = None, on_lose: GameCallback = None):
        super().__init__(state.board.size, on_win, on_lose)
        self.gamestate = state

    def start(self) -> GameState:
        raise NotImplementedError("start() n'est pas supporté par SetMinsweeperGame")
