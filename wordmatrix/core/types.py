from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class Axis(Enum):
    """Smer na doske, pozdlz ktoreho sa meria suradnica bodu."""
    ROW = auto()
    COLUMN = auto()

    @property
    def inverse(self) -> Axis:
        return Axis.ROW if self is Axis.COLUMN else Axis.COLUMN


@dataclass(frozen=True, order=True)
class Point:
    """Bunka dosky (row, column)."""
    row: int
    column: int

    ZERO: ClassVar[Point]

    def value(self, axis: Axis) -> int:
        """Suradnica bodu na danej osi (COLUMN -> column, ROW -> row)."""
        return self.column if axis is Axis.COLUMN else self.row

    def shifted(self, axis: Axis, delta: int) -> Point:
        """Sused o `delta` poli pozdlz osi (druha suradnica ostava)."""
        if axis is Axis.COLUMN:
            return Point(self.row, self.column + delta)
        return Point(self.row + delta, self.column)

    @staticmethod
    def make(a: int, b: int, axis: Axis) -> Point:
        """Vytvori bod, kde `a` je suradnica na osi `axis` a `b` na opacnej."""
        if axis is Axis.COLUMN:
            return Point(row=b, column=a)
        return Point(row=a, column=b)


Point.ZERO = Point(0, 0)


@dataclass(frozen=True)
class Square:
    """Premiove pole: nasobitel pismena a slova."""
    letter_multiplier: int = 1
    word_multiplier: int = 1


@dataclass(frozen=True)
class Tile:
    """Kamen s identitou; `id` rozlisuje inak rovnake pismena."""
    id: int
    letter: str
    value: int


class Level(Enum):
    """Obtiaznost pocitacoveho hraca."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


@dataclass(frozen=True)
class Human:
    pass


@dataclass(frozen=True)
class Computer:
    level: Level = Level.MEDIUM


PlayerKind = Human | Computer


@dataclass
class Player:
    """Hrac: druh, kamene na racku a nazbierane skore."""
    kind: PlayerKind = field(default_factory=Human)
    rack: list[Tile] = field(default_factory=list)
    score: int = 0

    def copy(self) -> Player:
        return Player(kind=self.kind, rack=list(self.rack), score=self.score)


@dataclass(frozen=True)
class Solution:
    """Vysledok uspesnej validacie: skore, hlavna linia a krizove linie."""
    score: int
    points: tuple[Point, ...] = ()
    intersections: tuple[tuple[Point, ...], ...] = ()

    @property
    def lines(self) -> list[tuple[Point, ...]]:
        """Vsetky linie (hlavna + krizove), prazdna hlavna linia sa vynecha."""
        out = [self.points] if self.points else []
        out.extend(self.intersections)
        return out
