"""Types de base du plateau : cellules, états, tailles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidBoardSizeError(ValueError):
    """Taille de plateau ou nombre de mines impossible."""


class CellState(Enum):
    """État perçu d'une cellule par le joueur."""
    UNKNOWN = "unknown"    # ni révélée ni marquée
    REVEALED = "revealed"  # révélée (une mine révélée = partie perdue)
    FLAGGED = "flagged"    # marquée d'un drapeau


class CellType:
    """Valeur réelle d'une cellule : Safe, Mine ou Unknown (masquée)."""

    __slots__ = ()


@dataclass(frozen=True)
class Safe(CellType):
    """Cellule sûre, `number` = nombre de mines voisines."""
    number: int

    def __repr__(self) -> str:
        return f"Safe({self.number})"


@dataclass(frozen=True)
class Mine(CellType):
    """Cellule minée."""

    def __repr__(self) -> str:
        return "Mine"


@dataclass(frozen=True)
class Unknown(CellType):
    """
    Type masqué.

    N'apparaît que dans les états donnés au joueur, pour cacher le vrai type
    des cellules non révélées.
    """

    def __repr__(self) -> str:
        return "Unknown"


EMPTY = Safe(0)
MINE = Mine()
UNKNOWN = Unknown()


@dataclass(frozen=True)
class Cell:
    """Cellule du plateau : type réel + état perçu."""
    type: CellType
    state: CellState

    @property
    def is_safe(self) -> bool:
        return isinstance(self.type, Safe)

    @property
    def is_mine(self) -> bool:
        return isinstance(self.type, Mine)

    @property
    def number(self) -> int:
        """Nombre de la cellule, -1 si elle n'est pas sûre (ou masquée)."""
        return self.type.number if isinstance(self.type, Safe) else -1


class GameStatus(Enum):
    """Statut d'une partie."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    NEVER = "never"  # pas encore démarrée


@dataclass(frozen=True)
class BoardSize:
    """Taille validée d'un plateau et nombre de mines."""
    width: int
    height: int
    mines: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidBoardSizeError("Invalid Size")
        if self.mines >= self.width * self.height:
            raise InvalidBoardSizeError("Too Many Mines")
        if self.mines <= 0:
            raise InvalidBoardSizeError("Too Few Mines")

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def cell_count(self) -> int:
        return self.width * self.height


class ConventionalSize(Enum):
    """Tailles classiques communes aux démineurs."""
    BEGINNER = BoardSize(9, 9, 10)
    INTERMEDIATE = BoardSize(16, 16, 40)
    EXPERT = BoardSize(30, 16, 99)

    @property
    def size(self) -> BoardSize:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "ConventionalSize":
        """Retrouve une taille par son nom (insensible à la casse)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                "Taille inconnue: %s (parmi: %s)"
                % (name, ", ".join(s.name.lower() for s in cls))
            ) from None
