"""Banc d'essai : fait jouer un solveur sur de nombreuses parties générées.

Chaque partie est créée par `MinsweeperGame`, démarrée avec le générateur
éventuel, ouverte au centre, puis confiée au solveur. Les parties sont
réparties sur un pool de processus.
"""

from __future__ import annotations

import os
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..config import BENCHMARK_CONFIG
from ..lib.s0_board import BoardSize
from ..lib.s1_game import MinsweeperGame
from ..lib.s2_solver import Move, Result, Solver
from ..lib.s7_debug import DebugLogger


@dataclass
class BenchmarkReport:
    """Résultat d'un banc d'essai."""
    successes: int
    losses: int
    resignations: int
    total: int
    elapsed: float

    @property
    def success_rate(self) -> float:
        return self.successes / max(1, self.total)

    def format(self) -> str:
        return (
            f"{self.successes}/{self.total} gagnées ({self.success_rate:.1%}), "
            f"{self.losses} perdues, {self.resignations} abandonnées en {self.elapsed:.2f}s"
        )


@dataclass
class GameOutcome:
    """Issue d'une partie du banc d'essai."""
    game_id: int
    result: Result
    moves: List[Move]
    duration: float


def _play_one(task: Tuple[int, BoardSize, Solver, Optional[Solver], Optional[int]]) -> GameOutcome:
    """Joue une partie (exécuté dans un processus du pool)."""
    game_id, size, solver, generator, seed = task
    start_time = time.time()
    rng = random.Random(seed) if seed is not None else None

    game = MinsweeperGame(size, rng=rng)
    game.start(generator)
    game.left_click(size.width // 2, size.height // 2)

    moves: List[Move] = []
    result = solver.solve_game(game, moves.append)
    return GameOutcome(game_id, result, moves, time.time() - start_time)


class BenchmarkService:
    """Fait jouer `solver` sur `total` parties de taille `size`."""

    def __init__(
        self,
        size: BoardSize,
        solver: Solver,
        generator: Optional[Solver] = None,
        workers: Optional[int] = None,
        logger: Optional[DebugLogger] = None,
        seed: Optional[int] = None,
    ):
        self.size = size
        self.solver = solver
        self.generator = generator
        self.workers = workers or BENCHMARK_CONFIG['workers'] or os.cpu_count() or 1
        self.logger = logger
        self.seed = seed

    def _tasks(self, total: int) -> Iterable[Tuple[int, BoardSize, Solver, Optional[Solver], Optional[int]]]:
        for game_id in range(total):
            seed = self.seed + game_id if self.seed is not None else None
            yield game_id, self.size, self.solver, self.generator, seed

    def _outcomes(self, total: int) -> List[GameOutcome]:
        if self.workers == 1:
            return [_play_one(task) for task in self._tasks(total)]
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            return list(executor.map(
                _play_one, self._tasks(total), chunksize=BENCHMARK_CONFIG['chunksize'],
            ))

    def run(self, total: int) -> BenchmarkReport:
        """Joue `total` parties et compte les issues."""
        if total <= 0:
            raise ValueError(f"Nombre de parties invalide: {total}")

        print(
            f"[BENCH] {total} parties {self.size.width}x{self.size.height}/{self.size.mines} "
            f"avec {self.solver.name} ({self.workers} processus)"
        )
        start_time = time.time()
        outcomes = self._outcomes(total)
        elapsed = time.time() - start_time

        if self.logger is not None:
            for outcome in outcomes:
                self.logger.log_game(
                    outcome.game_id,
                    self.solver.name,
                    (self.size.width, self.size.height, self.size.mines),
                    outcome.result.value,
                    moves=len(outcome.moves),
                    duration=outcome.duration,
                    metadata={"generator": self.generator.name if self.generator else None},
                )
                for move in outcome.moves:
                    self.logger.log_move(outcome.game_id, move)

        report = BenchmarkReport(
            successes=sum(1 for o in outcomes if o.result == Result.WON),
            losses=sum(1 for o in outcomes if o.result == Result.LOST),
            resignations=sum(1 for o in outcomes if o.result == Result.RESIGNED),
            total=total,
            elapsed=elapsed,
        )
        print(f"[BENCH] {report.format()}")
        return report
