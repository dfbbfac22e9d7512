import random

import pytest

from minsweeper.lib.s0_board import BoardSize, GameStatus, parse_board
from minsweeper.lib.s1_game import MinsweeperGame
from minsweeper.lib.s2_solver import Action, Click, Point, Result, StillhartSolver, TankLogic


class TestSingle:
    """Déductions simples autour d'un nombre."""

    def test_single_flag(self):
        move = StillhartSolver().solve(parse_board(["O1.", "11.", "..."], remaining_mines=1))
        assert move.clicks == frozenset({Click(Point(0, 0), Action.RIGHT)})
        assert move.reason.logic == TankLogic.SINGLE_FLAG

    def test_single_chord(self):
        move = StillhartSolver().solve(parse_board(["!O", "1O"], remaining_mines=0))
        assert move.clicks == frozenset({Click(Point(0, 1), Action.LEFT)})
        assert move.reason.logic == TankLogic.SINGLE_CHORD


class TestTank:
    """Recherche exhaustive sur la frontière."""

    def test_tank_reveal(self):
        move = StillhartSolver().solve(parse_board(["OOO", "111", "..."], remaining_mines=1))
        assert move.clicks == frozenset({Click(Point(0, 0), Action.LEFT)})
        assert move.reason.logic == TankLogic.TANK_REVEAL

    def test_region_too_large(self):
        solver = StillhartSolver({'tank_max_region_size': 2})
        assert solver.solve(parse_board(["OOO", "111", "..."], remaining_mines=1)) is None

    def test_tank_flag(self):
        # Solution unique : mines en (0, 0) et (2, 0)
        move = StillhartSolver().solve(parse_board(["OOOO", "1211", "...."], remaining_mines=2))
        assert move.clicks == frozenset({Click(Point(0, 0), Action.RIGHT)})
        assert move.reason.logic == TankLogic.TANK_FLAG

    def test_no_solution_gives_up(self):
        # Aucune affectation de la frontière ne place 2 mines
        assert StillhartSolver().solve(parse_board(["OOO", "111", "..."], remaining_mines=2)) is None

    def test_fifty_fifty(self):
        assert StillhartSolver().solve(parse_board(["OO", "11"], remaining_mines=1)) is None

    def test_segregate(self):
        border = [(0, 0), (1, 0), (5, 0)]
        numbers = {(0, 1): 1, (5, 1): 1}
        regions = StillhartSolver._segregate(border, numbers)
        assert sorted(sorted(region) for region in regions) == [[(0, 0), (1, 0)], [(5, 0)]]

    def test_solve_game(self, make_game):
        game = make_game([".*.", "...", "..."], reveal=(0, 2))
        assert StillhartSolver().solve_game(game) == Result.WON


@pytest.mark.parametrize("seed", range(3))
def test_never_guesses(seed):
    game = MinsweeperGame(BoardSize(9, 9, 10), rng=random.Random(seed))
    game.start()
    state = game.left_click(4, 4)
    if state.status != GameStatus.PLAYING:
        return
    assert StillhartSolver().solve_game(game) != Result.LOST


class TestEndgame:
    """Fin de partie : toutes les inconnues, nombre exact de mines."""

    # 50/50 sur (0, 0) / (0, 1) ; (3, 0) n'est voisine d'aucun nombre
    LAYOUT = ["O1.O", "O1.."]

    def test_exact_mine_count_decides(self):
        move = StillhartSolver().solve(parse_board(self.LAYOUT, remaining_mines=2))
        assert move.clicks == frozenset({Click(Point(3, 0), Action.RIGHT)})
        assert move.reason.logic == TankLogic.TANK_FLAG

    def test_without_endgame_count_is_not_used(self):
        solver = StillhartSolver({'tank_endgame_cells': -1})
        assert solver.solve(parse_board(self.LAYOUT, remaining_mines=2)) is None

    def test_large_endgame_falls_back_to_regions(self):
        # Deux blocs 1-1 de 15 cases séparés par une colonne révélée
        block_top = "O" * 15
        block_numbers = "1" * 15
        rows = [
            block_top + "." + block_top,
            block_numbers + "." + block_numbers,
            "." * 31,
        ]
        state = parse_board(rows, remaining_mines=10)
        move = StillhartSolver().solve(state)
        assert move.clicks == frozenset({Click(Point(0, 0), Action.LEFT)})
        assert move.reason.logic == TankLogic.TANK_REVEAL
