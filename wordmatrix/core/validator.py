"""Validator geometrie tahu.

Z kamenov polozenych v tomto tahu (`placed`) a kamenov uz potvrdenych na
doske (`filled`) rozhodne, ci tah tvori jednu priamu liniu, a vrati ju
spolu s krizovymi liniami. Neplatny tah nie je chyba: vysledok je `None`.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from .geometry import Line, intersections, union
from .scoring import FLAT_SCORE, ScoringRule, score_lines
from .types import Axis, Point, Solution, Square, Tile

log = logging.getLogger("wordmatrix.validator")

# Poradie osi je dolezite: vyhrava prva os, na ktorej vznikne hlavna linia.
AXIS_ORDER = (Axis.COLUMN, Axis.ROW)


def find_lines(
    fluid: list[Point],
    fixed: list[Point],
    axis: Axis,
) -> tuple[Line, tuple[Line, ...]] | None:
    """Hlavna linia pozdlz `axis` a krizove linie kolmo na nu."""
    primary = union(fluid, fixed, axis)
    if primary is None:
        return None
    cross = intersections(fluid, fixed, axis) or ()
    return primary, cross


def validate(
    placed: Mapping[Tile, Point],
    filled: Mapping[Point, Tile],
    premium: Mapping[Point, Square] | None = None,
    scoring: ScoringRule = ScoringRule.FLAT,
) -> Solution | None:
    """Rozhodne o platnosti tahu; `None` znamena neplatny (alebo prazdny) tah."""
    if not placed:
        return None

    fluid = list(placed.values())
    fixed = list(filled.keys())

    if len(placed) == 1:
        if not filled:
            log.debug("validate_single_without_anchor point=%s", fluid[0])
            return None
        # jeden kamen nema hlavnu liniu; pre bodovanie pozri jeho susedov
        touching = [
            line
            for axis in AXIS_ORDER
            for line in (intersections(fluid, fixed, axis) or ())
        ]
        return Solution(score=_score(touching, placed, filled, premium, scoring))

    for axis in AXIS_ORDER:
        found = find_lines(fluid, fixed, axis)
        if found is None:
            continue
        primary, cross = found
        score = _score([primary, *cross], placed, filled, premium, scoring)
        log.debug(
            "validate_ok axis=%s primary=%d cross=%d score=%d",
            axis.name,
            len(primary),
            len(cross),
            score,
        )
        return Solution(score=score, points=primary, intersections=cross)

    log.debug("validate_invalid placed=%d", len(placed))
    return None


def _score(
    lines: list[Line],
    placed: Mapping[Tile, Point],
    filled: Mapping[Point, Tile],
    premium: Mapping[Point, Square] | None,
    scoring: ScoringRule,
) -> int:
    if scoring is ScoringRule.FLAT:
        return FLAT_SCORE
    total, _ = score_lines(lines, placed, filled, premium)
    return total
