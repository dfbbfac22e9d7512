"""Types pour le module s2_solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, NamedTuple, Optional, Protocol


class Point(NamedTuple):
    """Coordonnées d'une cellule (x = colonne, y = ligne)."""
    x: int
    y: int


class Action(Enum):
    """Type de clic."""
    LEFT = "left"    # révéler / chord
    RIGHT = "right"  # basculer le drapeau


@dataclass(frozen=True)
class Click:
    """Un clic sur une cellule."""
    point: Point
    action: Action

    @classmethod
    def at(cls, x: int, y: int, action: Action) -> "Click":
        return cls(Point(x, y), action)


class Logic(Protocol):
    """Famille de déduction ayant justifié un coup."""

    @property
    def description(self) -> str: ...


@dataclass(frozen=True)
class Reason:
    """Justification d'un coup : la logique employée et les cellules en jeu."""
    logic: Logic
    related: FrozenSet[Point] = field(default_factory=frozenset)

    @classmethod
    def of(cls, logic: Logic, related: Iterable[Point] = ()) -> "Reason":
        return cls(logic, frozenset(Point(*p) for p in related))


@dataclass(frozen=True)
class Move:
    """Coup proposé par un solveur : un ou plusieurs clics + raison éventuelle."""
    clicks: FrozenSet[Click]
    reason: Optional[Reason] = None

    def __post_init__(self):
        if not self.clicks:
            raise ValueError("Un coup doit contenir au moins un clic")

    @classmethod
    def single(cls, x: int, y: int, action: Action, reason: Optional[Reason] = None) -> "Move":
        return cls(frozenset([Click.at(x, y, action)]), reason)

    @classmethod
    def of(cls, clicks: Iterable[Click], reason: Optional[Reason] = None) -> "Move":
        return cls(frozenset(clicks), reason)

    @property
    def left_clicks(self) -> FrozenSet[Point]:
        return frozenset(c.point for c in self.clicks if c.action == Action.LEFT)

    @property
    def right_clicks(self) -> FrozenSet[Point]:
        return frozenset(c.point for c in self.clicks if c.action == Action.RIGHT)


class Result(Enum):
    """Issue d'une partie jouée par un solveur."""
    WON = "won"
    LOST = "lost"
    RESIGNED = "resigned"
