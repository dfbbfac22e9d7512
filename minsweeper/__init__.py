"""minsweeper : moteur de démineur et solveurs sans devinette."""

__version__ = "1.1.2"

from .lib.s0_board import BoardSize, ConventionalSize, GameState, GameStatus
from .lib.s1_game import MinsweeperGame, SetMinsweeperGame
from .lib.s2_solver import Result, Solver, get_default, get_solver

__all__ = [
    "__version__",
    "BoardSize",
    "ConventionalSize",
    "GameState",
    "GameStatus",
    "MinsweeperGame",
    "SetMinsweeperGame",
    "Result",
    "Solver",
    "get_default",
    "get_solver",
]
