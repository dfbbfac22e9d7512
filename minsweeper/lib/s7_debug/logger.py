"""Logger structuré pour le debug des parties et des coups."""

import json
from dataclasses import dataclass, asdict, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...config import PATHS
from ..s2_solver import Action, Move


@dataclass
class GameLog:
    """Log d'une partie."""
    game_id: int
    timestamp: str
    solver: str
    width: int
    height: int
    mines: int
    result: str
    moves: int
    duration: float
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MoveLog:
    """Log d'un coup."""
    game_id: int
    timestamp: str
    reveals: List[List[int]]
    flags: List[List[int]]
    logic: Optional[str] = None
    description: Optional[str] = None


class DebugLogger:
    """Journal des parties et des coups joués par les solveurs (JSONL + session JSON)."""

    def __init__(self, log_dir: Optional[str] = None):
        self.log_dir = Path(log_dir or PATHS['logs'])
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.games: List[GameLog] = []
        self.moves: List[MoveLog] = []

    def log_game(
        self,
        game_id: int,
        solver: str,
        size: tuple,
        result: str,
        moves: int = 0,
        duration: float = 0.0,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log une partie. `size` = (largeur, hauteur, mines)."""
        width, height, mines = size
        log = GameLog(
            game_id=game_id,
            timestamp=datetime.now().isoformat(),
            solver=solver,
            width=width,
            height=height,
            mines=mines,
            result=result,
            moves=moves,
            duration=duration,
            metadata=metadata or {},
        )
        self.games.append(log)
        self._write_log("games", asdict(log))

    def log_move(self, game_id: int, move: Move) -> None:
        """Log un coup de solveur."""
        logic = move.reason.logic if move.reason is not None else None
        log = MoveLog(
            game_id=game_id,
            timestamp=datetime.now().isoformat(),
            reveals=sorted([c.point.x, c.point.y] for c in move.clicks if c.action == Action.LEFT),
            flags=sorted([c.point.x, c.point.y] for c in move.clicks if c.action == Action.RIGHT),
            logic=getattr(logic, "name", None),
            description=logic.description if logic is not None else None,
        )
        self.moves.append(log)
        self._write_log("moves", asdict(log))

    def save_session(self) -> str:
        """Sauvegarde la session complète."""
        session_file = self.log_dir / f"session_{self.session_id}.json"
        data = {
            "session_id": self.session_id,
            "total_games": len(self.games),
            "total_moves": len(self.moves),
            "summary": self.get_summary(),
            "games": [asdict(g) for g in self.games],
            "moves": [asdict(m) for m in self.moves],
        }
        with open(session_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(session_file)

    def get_summary(self) -> Dict[str, Any]:
        """Retourne un résumé de la session."""
        results: Dict[str, int] = {}
        for game in self.games:
            results[game.result] = results.get(game.result, 0) + 1
        logic_counts: Dict[str, int] = {}
        for move in self.moves:
            if move.logic is not None:
                logic_counts[move.logic] = logic_counts.get(move.logic, 0) + 1

        return {
            "session_id": self.session_id,
            "games": len(self.games),
            "moves": len(self.moves),
            "results": results,
            "logic": logic_counts,
            "total_duration": sum(g.duration for g in self.games),
            "success_rate": results.get("won", 0) / max(1, len(self.games)),
        }

    def _write_log(self, log_type: str, data: Dict[str, Any]) -> None:
        """Écrit un log dans un fichier."""
        log_file = self.log_dir / f"{log_type}_{self.session_id}.jsonl"
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(data, ensure_ascii=False) + "\n")

