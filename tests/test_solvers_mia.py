import random

import pytest

from minsweeper.lib.s0_board import BoardSize, GameStatus, parse_board
from minsweeper.lib.s1_game import MinsweeperGame
from minsweeper.lib.s2_solver import (
    Action,
    BeginnerSolver,
    Click,
    ExpertOnlySolver,
    ExpertSolver,
    IntermediateOnlySolver,
    IntermediateSolver,
    MiaLogic,
    MiaSolver,
    Move,
    Point,
    Result,
    enumerate_configurations,
    find_frontier,
)
from minsweeper.lib.s2_solver.mia import EXPERT_LOGIC, INTERMEDIATE_LOGIC, brute_force_move

# Une mine en (1, 0) : le 1-1 au bord
ONE_ONE = ["OOO", "111", "..."]
# Mines en (1, 0) et (2, 0)
ONE_TWO = ["OOOO", "1221", "...."]
# Mine en (0, 0)
CORNER = ["O1.", "11.", "..."]


def left(x, y):
    return Click(Point(x, y), Action.LEFT)


def right(x, y):
    return Click(Point(x, y), Action.RIGHT)


class TestMove:
    """Types des coups."""

    def test_single(self):
        move = Move.single(1, 2, Action.LEFT)
        assert move.clicks == frozenset({left(1, 2)})
        assert move.reason is None
        assert move.left_clicks == {Point(1, 2)}

    def test_empty_move_rejected(self):
        with pytest.raises(ValueError):
            Move(frozenset())

    def test_logic_description(self):
        assert "0 mine restante" in MiaLogic.ZERO_MINES_REMAINING.description


class TestBeginnerSolver:
    """Chord et drapeaux simples."""

    def test_chord(self):
        state = parse_board(["1!O", "OOO"], remaining_mines=0)
        move = BeginnerSolver().solve(state)
        assert move.clicks == frozenset({left(0, 0)})
        assert move.reason.logic == MiaLogic.CHORD
        assert move.reason.related == {Point(1, 0)}

    def test_flag_chord(self):
        move = BeginnerSolver().solve(parse_board(CORNER, remaining_mines=1))
        assert move.clicks == frozenset({right(0, 0)})
        assert move.reason.logic == MiaLogic.FLAG_CHORD
        assert move.reason.related == {Point(0, 0), Point(1, 0)}

    def test_flag_chord_one_at_a_time(self):
        move = BeginnerSolver().solve(parse_board(["OOO", "232", "..."], remaining_mines=3))
        assert move.clicks == frozenset({right(0, 0)})

    def test_removes_extra_flag(self):
        move = BeginnerSolver().solve(parse_board(["!!O", "1OO"], remaining_mines=0))
        assert move.clicks == frozenset({right(0, 0)})
        assert move.reason is None

    def test_no_move(self):
        assert BeginnerSolver().solve(parse_board(ONE_ONE, remaining_mines=1)) is None


class TestIntermediateSolver:
    """Déductions à deux cellules."""

    def test_multi_flag_reveal(self):
        move = IntermediateSolver().solve(parse_board(ONE_ONE, remaining_mines=1))
        assert move.clicks == frozenset({left(2, 0)})
        assert move.reason.logic == MiaLogic.MULTI_FLAG_REVEAL
        assert move.reason.related == {Point(0, 0), Point(1, 0)}

    def test_multi_flag_flag(self):
        move = IntermediateSolver().solve(parse_board(ONE_TWO, remaining_mines=2))
        assert move.clicks == frozenset({right(2, 0)})
        assert move.reason.logic == MiaLogic.MULTI_FLAG_FLAG

    def test_zero_mines_remaining(self):
        move = IntermediateSolver().solve(parse_board(["!!!", "!O!", "!!!"], remaining_mines=0))
        assert move.clicks == frozenset({left(1, 1)})
        assert move.reason.logic == MiaLogic.ZERO_MINES_REMAINING

    def test_beginner_first(self):
        move = IntermediateSolver().solve(parse_board(CORNER, remaining_mines=1))
        assert move.reason.logic == MiaLogic.FLAG_CHORD


class TestBruteForce:
    """Énumération des configurations de la frontière."""

    def test_frontier(self):
        empties, adjacents = find_frontier(parse_board(ONE_ONE, remaining_mines=1))
        assert empties == {Point(0, 0), Point(1, 0), Point(2, 0)}
        assert adjacents == {Point(0, 1), Point(1, 1), Point(2, 1)}

    def test_single_configuration(self):
        state = parse_board(ONE_ONE, remaining_mines=1)
        _, adjacents = find_frontier(state)
        configurations = list(enumerate_configurations(state, sorted(adjacents)))
        assert len(configurations) == 1
        configuration = configurations[0]
        assert configuration.is_mine(Point(1, 0))
        assert not configuration.is_mine(Point(0, 0))
        assert not configuration.is_mine(Point(2, 0))
        assert configuration.remaining_mines == 0

    def test_too_few_remaining_mines(self):
        state = parse_board(ONE_TWO, remaining_mines=1, mines=2)
        _, adjacents = find_frontier(state)
        assert list(enumerate_configurations(state, sorted(adjacents))) == []

    def test_brute_force_move(self):
        move = brute_force_move(parse_board(ONE_ONE, remaining_mines=1), limit=30)
        assert move.clicks == frozenset({left(0, 0), right(1, 0), left(2, 0)})
        assert move.reason.logic == MiaLogic.BRUTE_FORCE
        assert move.reason.related == {Point(0, 0), Point(1, 0), Point(2, 0)}

    def test_limit(self):
        assert brute_force_move(parse_board(ONE_ONE, remaining_mines=1), limit=3) is None

    def test_exhaustion(self):
        # 50/50 sur le bord gauche, (3, 0) hors frontière
        state = parse_board(["O1.O", "O1.."], remaining_mines=1)
        move = brute_force_move(state, limit=30)
        assert move.clicks == frozenset({left(3, 0)})
        assert move.reason.logic == MiaLogic.BRUTE_FORCE_EXHAUSTION
        assert move.reason.related == {Point(0, 0), Point(0, 1)}

    def test_expert_uses_config_limit(self):
        solver = ExpertSolver({'expert_brute_force_limit': 5})
        assert solver.config['expert_brute_force_limit'] == 5
        assert solver.config['mia_brute_force_limit'] == 30


class TestMiaSolver:
    """Solveur Mia : coups groupés et régions."""

    def test_flag_chord_groups_clicks(self):
        move = MiaSolver().solve(parse_board(["OOO", "232", "..."], remaining_mines=3))
        assert move.clicks == frozenset({right(0, 0), right(1, 0)})
        assert move.reason.logic == MiaLogic.FLAG_CHORD

    def test_removes_all_extra_flags(self):
        move = MiaSolver().solve(parse_board(["!!O", "1OO"], remaining_mines=0))
        assert move.clicks == frozenset({right(0, 0), right(1, 0)})
        assert move.reason is None

    def test_region_reveal(self):
        move = MiaSolver().solve(parse_board(ONE_ONE, remaining_mines=1))
        assert move.clicks == frozenset({left(2, 0)})
        assert move.reason.logic == MiaLogic.REGION_DEDUCTION_REVEAL
        assert move.reason.related == {Point(0, 0), Point(1, 0)}

    def test_region_flag(self):
        move = MiaSolver().solve(parse_board(ONE_TWO, remaining_mines=2))
        assert move.clicks == frozenset({right(2, 0)})
        assert move.reason.logic == MiaLogic.REGION_DEDUCTION_FLAG

    def test_region_overlap_flag(self):
        # (2, 1) : 3 mines dont au plus 1 partagée avec le 1 de (1, 1)
        move = MiaSolver().solve(parse_board(["OOOO", "O13O"], remaining_mines=3))
        assert move.clicks == frozenset({right(3, 0), right(3, 1)})
        assert move.reason.logic == MiaLogic.REGION_DEDUCTION_FLAG
        assert move.reason.related == {Point(0, 0), Point(1, 0), Point(2, 0), Point(0, 1)}

    def test_derived_region(self):
        # Le 2 moins le 1 de gauche donne 1 mine dans {(2, 0), (2, 1)},
        # région incluse dans celle du 1 de droite
        move = MiaSolver().solve(parse_board(["OOOO", "12O1"], remaining_mines=2))
        assert move.clicks == frozenset({left(3, 0)})
        assert move.reason.logic == MiaLogic.REGION_DEDUCTION_REVEAL
        assert move.reason.related == {Point(2, 0), Point(2, 1)}

    def test_zero_mines_remaining_reveals_all(self):
        move = MiaSolver().solve(parse_board(["!!!!", "!OO!", "!!!!"], remaining_mines=0))
        assert move.clicks == frozenset({left(1, 1), left(2, 1)})
        assert move.reason.logic == MiaLogic.ZERO_MINES_REMAINING

    def test_fifty_fifty_resigns(self):
        assert MiaSolver().solve(parse_board(["OO", "11"], remaining_mines=1)) is None

    def test_solve_game(self, make_game):
        game = make_game([".*.", "...", "..."], reveal=(0, 2))
        assert MiaSolver().solve_game(game) == Result.WON

    def test_solve_game_not_started(self):
        game = MinsweeperGame(BoardSize(5, 5, 3))
        with pytest.raises(ValueError):
            MiaSolver().solve_game(game)

    def test_on_move_callback(self, make_game):
        moves = []
        game = make_game([".*.", "...", "..."], reveal=(0, 2))
        MiaSolver().solve_game(game, moves.append)
        assert moves
        assert all(isinstance(m, Move) for m in moves)


class TestOnlySolvers:
    """Solveurs qui exigent leur propre logique."""

    def test_logic_sets(self):
        assert MiaLogic.BRUTE_FORCE in EXPERT_LOGIC
        assert MiaLogic.MULTI_FLAG_REVEAL in INTERMEDIATE_LOGIC
        assert not EXPERT_LOGIC & INTERMEDIATE_LOGIC

    def test_expert_only_resigns_easy_game(self, make_game):
        layout = ["*..", "...", "..."]
        assert ExpertSolver().solve_game(make_game(layout, reveal=(2, 2))) == Result.WON
        assert ExpertOnlySolver().solve_game(make_game(layout, reveal=(2, 2))) == Result.RESIGNED

    def test_intermediate_only(self, make_game):
        layout = [".*.", "...", "..."]
        assert BeginnerSolver().solve_game(make_game(layout, reveal=(0, 2))) == Result.RESIGNED
        assert IntermediateOnlySolver().solve_game(make_game(layout, reveal=(0, 2))) == Result.WON
        assert ExpertOnlySolver().solve_game(make_game(layout, reveal=(0, 2))) == Result.RESIGNED


@pytest.mark.parametrize("solver_class", [BeginnerSolver, IntermediateSolver, ExpertSolver, MiaSolver])
@pytest.mark.parametrize("seed", range(4))
def test_solvers_never_guess(solver_class, seed):
    game = MinsweeperGame(BoardSize(9, 9, 10), rng=random.Random(seed))
    game.start()
    state = game.left_click(4, 4)
    if state.status != GameStatus.PLAYING:
        return
    assert solver_class().solve_game(game) != Result.LOST
