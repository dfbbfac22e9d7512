"""Fixtures communes : construction de parties à partir de dessins texte."""

from typing import List, Optional, Tuple

import pytest

from minsweeper.lib.s0_board import (
    MINE,
    Board,
    BoardSize,
    Cell,
    CellState,
    GameState,
    GameStatus,
    Safe,
)
from minsweeper.lib.s1_game import SetMinsweeperGame


def create_test_state(layout: List[str]) -> GameState:
    """
    État réel (mines connues) à partir d'un dessin : '*' = mine, autre = sûre.
    Toutes les cellules sont inconnues.
    """
    height = len(layout)
    width = len(layout[0])
    mines = [(x, y) for y, row in enumerate(layout) for x, char in enumerate(row) if char == "*"]
    board = Board(BoardSize(width, height, len(mines)))
    for x in range(width):
        for y in range(height):
            if (x, y) in mines:
                board.set(x, y, Cell(MINE, CellState.UNKNOWN))
            else:
                count = sum(1 for m in mines if abs(m[0] - x) <= 1 and abs(m[1] - y) <= 1)
                board.set(x, y, Cell(Safe(count), CellState.UNKNOWN))
    return GameState(GameStatus.PLAYING, board, len(mines))


def create_test_game(
    layout: List[str],
    reveal: Optional[Tuple[int, int]] = None,
    on_win=None,
    on_lose=None,
) -> SetMinsweeperGame:
    game = SetMinsweeperGame(create_test_state(layout), on_win, on_lose)
    if reveal is not None:
        game.reveal(*reveal)
    return game


@pytest.fixture
def make_game():
    return create_test_game


@pytest.fixture
def make_state():
    return create_test_state
