import json

from minsweeper.lib.s2_solver import Action, Click, MiaLogic, Move, Point, Reason
from minsweeper.lib.s7_debug import DebugLogger


def _move():
    clicks = [Click(Point(2, 0), Action.LEFT), Click(Point(1, 0), Action.RIGHT)]
    return Move.of(clicks, Reason.of(MiaLogic.BRUTE_FORCE, [(0, 0), (1, 0), (2, 0)]))


class TestDebugLogger:
    """Logs JSON des parties et des coups."""

    def test_log_game_writes_jsonl(self, tmp_path):
        logger = DebugLogger(str(tmp_path))
        logger.log_game(0, "Mia Solver", (9, 9, 10), "won", moves=12, duration=0.5)
        logger.log_game(1, "Mia Solver", (9, 9, 10), "lost", moves=3)

        lines = (tmp_path / f"games_{logger.session_id}.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["result"] == "won"
        assert first["width"] == 9
        assert first["moves"] == 12

    def test_log_move(self, tmp_path):
        logger = DebugLogger(str(tmp_path))
        logger.log_move(0, _move())

        log = logger.moves[0]
        assert log.reveals == [[2, 0]]
        assert log.flags == [[1, 0]]
        assert log.logic == "BRUTE_FORCE"
        assert log.description == MiaLogic.BRUTE_FORCE.description

    def test_log_move_without_reason(self, tmp_path):
        logger = DebugLogger(str(tmp_path))
        logger.log_move(0, Move.single(0, 0, Action.RIGHT))
        assert logger.moves[0].logic is None

    def test_summary(self, tmp_path):
        logger = DebugLogger(str(tmp_path))
        logger.log_game(0, "Mia Solver", (9, 9, 10), "won", duration=1.0)
        logger.log_game(1, "Mia Solver", (9, 9, 10), "resigned", duration=2.0)
        logger.log_move(0, _move())

        summary = logger.get_summary()
        assert summary["games"] == 2
        assert summary["results"] == {"won": 1, "resigned": 1}
        assert summary["logic"] == {"BRUTE_FORCE": 1}
        assert summary["total_duration"] == 3.0
        assert summary["success_rate"] == 0.5

    def test_save_session(self, tmp_path):
        logger = DebugLogger(str(tmp_path))
        logger.log_game(0, "Mia Solver", (9, 9, 10), "won")
        path = logger.save_session()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["total_games"] == 1
        assert data["summary"]["success_rate"] == 1.0
        assert data["games"][0]["solver"] == "Mia Solver"
