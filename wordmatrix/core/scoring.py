from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from .types import Point, Square, Tile


class ScoringRule(Enum):
    """Sposob bodovania platneho tahu.

    - FLAT: kazdy platny tah ma 1 bod (povodne spravanie hry).
    - PREMIUM: klasicke bodovanie s nasobitelmi pismen a slov.
    """
    FLAT = "flat"
    PREMIUM = "premium"

    @classmethod
    def from_string(cls, value: str) -> ScoringRule:
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(rule.value for rule in cls)
            raise ValueError(f"Neznáme pravidlo bodovania: {value}. Platné: {valid}") from None


FLAT_SCORE = 1


@dataclass(frozen=True)
class LineScore:
    """Detailne skore jednej linie (slova)."""
    word: str
    base_points: int
    letter_bonus_points: int
    word_multiplier: int
    total: int


def score_line(
    line: Iterable[Point],
    tiles: Mapping[Point, Tile],
    fluid: set[Point],
    premium: Mapping[Point, Square],
) -> LineScore:
    """Obodu jednu liniu.

    Prémie sa uplatnia len na bunkach polozenych v tomto tahu (`fluid`),
    ktore este maju zaznam v `premium` (spotrebovane polia tam uz nie su).
    """
    word_multiplier = 1
    base = 0
    letter_bonus = 0
    letters: list[str] = []
    for point in line:
        tile = tiles[point]
        letters.append(tile.letter)
        base += tile.value
        square = premium.get(point) if point in fluid else None
        if square is not None:
            letter_bonus += tile.value * (square.letter_multiplier - 1)
            word_multiplier *= square.word_multiplier
    total = (base + letter_bonus) * word_multiplier
    return LineScore(
        word="".join(letters),
        base_points=base,
        letter_bonus_points=letter_bonus,
        word_multiplier=word_multiplier,
        total=total,
    )


def score_lines(
    lines: Iterable[Iterable[Point]],
    placed: Mapping[Tile, Point],
    filled: Mapping[Point, Tile],
    premium: Mapping[Point, Square] | None = None,
) -> tuple[int, list[LineScore]]:
    """Vypocita celkove skore tahu a rozpis pre jednotlive linie.

    Ak tah nevytvoril ziadnu liniu (osamoteny kamen), boduje sa samotny
    kamen ako linia dlzky 1.
    """
    premium = premium or {}
    tiles: dict[Point, Tile] = dict(filled)
    tiles.update({point: tile for tile, point in placed.items()})
    fluid = set(placed.values())

    all_lines = [tuple(line) for line in lines]
    if not all_lines:
        all_lines = [(point,) for point in sorted(fluid)]

    breakdowns = [score_line(line, tiles, fluid, premium) for line in all_lines]
    return sum(b.total for b in breakdowns), breakdowns
