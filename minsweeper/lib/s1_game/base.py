"""
Interface d'une partie de démineur et implémentation de base des coups.

Tout coup joué hors partie (statut différent de PLAYING) ou hors plateau
renvoie l'état courant sans rien modifier.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..s0_board import EMPTY, MINE, Board, BoardSize, Cell, CellState, GameState, GameStatus, Safe
from .types import GameCallback


class Minsweeper(ABC):
    """Interface commune des parties."""

    @abstractmethod
    def get_game_state(self) -> GameState:
        """État courant, tel que vu par le joueur."""

    @abstractmethod
    def start(self) -> GameState:
        """Démarre (ou redémarre) la partie."""

    @abstractmethod
    def reveal(self, x: int, y: int) -> GameState:
        """Révèle la cellule (x, y)."""

    @abstractmethod
    def clear_around(self, x: int, y: int) -> GameState:
        """Révèle les voisins d'une cellule dont tous les drapeaux sont posés."""

    @abstractmethod
    def set_flagged(self, x: int, y: int, flagged: bool) -> GameState:
        """Pose ou retire un drapeau."""

    def left_click(self, x: int, y: int) -> GameState:
        """
        Clic gauche : chord sur une cellule révélée, rien sur un drapeau,
        révélation sinon.
        """
        state = self.get_game_state()
        if state.status != GameStatus.PLAYING or not state.board.contains(x, y):
            return state
        cell = state.board.get(x, y)
        if cell.state == CellState.REVEALED:
            return self.clear_around(x, y)
        if cell.state == CellState.FLAGGED:
            return state
        return self.reveal(x, y)

    def right_click(self, x: int, y: int) -> GameState:
        """Clic droit : bascule le drapeau."""
        state = self.get_game_state()
        if state.status != GameStatus.PLAYING or not state.board.contains(x, y):
            return state
        return self.set_flagged(x, y, state.board.get(x, y).state != CellState.FLAGGED)


class AbstractMinsweeper(Minsweeper):
    """
    Implémentation des coups sur un état réel (mines connues).

    Chaque coup travaille sur une copie du plateau puis remplace l'état.
    """

    def __init__(self, size: BoardSize, on_win: GameCallback = None, on_lose: GameCallback = None):
        self.size = size
        self.on_win = on_win or (lambda: None)
        self.on_lose = on_lose or (lambda: None)
        self.gamestate = GameState(GameStatus.NEVER, Board(size), 0)

    def get_game_state(self) -> GameState:
        return self.gamestate

    def _can_play(self, x: int, y: int) -> bool:
        return self.gamestate.status == GameStatus.PLAYING and self.size.contains(x, y)

    # === Révélation ===

    def _reveal_empty(self, x: int, y: int, board: Board) -> None:
        """Remplissage itératif d'une zone de zéros et de sa bordure numérotée."""
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = board.get(cx, cy)
            if not (cell.type == EMPTY and cell.state == CellState.UNKNOWN):
                continue
            board.set(cx, cy, Cell(EMPTY, CellState.REVEALED))
            for nx, ny in board.neighbours(cx, cy):
                neighbour = board.get(nx, ny)
                if not (isinstance(neighbour.type, Safe) and neighbour.state == CellState.UNKNOWN):
                    continue
                if neighbour.type.number == 0:
                    stack.append((nx, ny))
                else:
                    board.set(nx, ny, Cell(neighbour.type, CellState.REVEALED))

    def _internal_reveal(self, x: int, y: int, board: Board) -> bool:
        """Révèle une cellule du plateau. Renvoie False si c'était une mine."""
        cell = board.get(x, y)
        if cell.state != CellState.UNKNOWN:
            return True
        if isinstance(cell.type, Safe):
            if cell.type.number == 0:
                self._reveal_empty(x, y, board)
            else:
                board.set(x, y, Cell(cell.type, CellState.REVEALED))
            return True
        if cell.is_mine:
            board.set(x, y, Cell(MINE, CellState.REVEALED))
            return False
        return True

    def _finish_move(self, board: Board, success: bool) -> GameState:
        """Applique le plateau joué et met à jour le statut."""
        self.gamestate = self.gamestate.with_board(board)
        if not success:
            self.gamestate = self.gamestate.with_status(GameStatus.LOST)
            self.on_lose()
        elif board.has_won():
            self.gamestate = self.gamestate.with_status(GameStatus.WON)
            self.on_win()
        return self.get_game_state()

    def reveal(self, x: int, y: int) -> GameState:
        if not self._can_play(x, y):
            return self.get_game_state()
        board = self.gamestate.board.clone()
        success = self._internal_reveal(x, y, board)
        return self._finish_move(board, success)

    def clear_around(self, x: int, y: int) -> GameState:
        if not self._can_play(x, y):
            return self.get_game_state()
        cell = self.gamestate.board.get(x, y)
        if not (isinstance(cell.type, Safe) and cell.state == CellState.REVEALED):
            return self.get_game_state()

        board = self.gamestate.board.clone()
        if board.count_around(x, y, CellState.FLAGGED) != cell.type.number:
            return self.get_game_state()

        success = True
        for x2, y2 in board.around(x, y):
            # Pas de court-circuit : les autres cellules sont révélées malgré une mine
            success = self._internal_reveal(x2, y2, board) and success
        return self._finish_move(board, success)

    def set_flagged(self, x: int, y: int, flagged: bool) -> GameState:
        if not self._can_play(x, y):
            return self.get_game_state()
        cell = self.gamestate.board.get(x, y)
        if cell.state == CellState.REVEALED:
            return self.get_game_state()

        remaining = self.gamestate.remaining_mines
        if flagged != (cell.state == CellState.FLAGGED):
            remaining += -1 if flagged else 1

        board = self.gamestate.board.clone()
        board.set(x, y, Cell(cell.type, CellState.FLAGGED if flagged else CellState.UNKNOWN))
        self.gamestate = self.gamestate.with_board(board).with_remaining_mines(remaining)
        return self.get_game_state()
