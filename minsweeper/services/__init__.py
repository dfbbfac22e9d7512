"""Services minsweeper."""

from .s9_benchmark import BenchmarkReport, BenchmarkService, GameOutcome

__all__ = [
    "BenchmarkReport",
    "BenchmarkService",
    "GameOutcome",
]
