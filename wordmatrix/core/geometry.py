"""Geometria bodov na jednej osi.

Vsetky funkcie su ciste (bez stavu) a pracuju nad neusporiadanou
mnozinou bodov, vzdy v ramci jednej osi. `fluid` su body polozene v tomto
tahu, `fixed` su body uz potvrdene na doske; funkcie ale nerobia medzi
nimi rozdiel, rozhoduje len poradie argumentov.
"""
from __future__ import annotations

from collections.abc import Iterable

from .types import Axis, Point

Line = tuple[Point, ...]


def is_sequential(values: Iterable[int]) -> bool:
    """Ci hodnoty po zoradeni tvoria suvisly rad bez medzier.

    Prazdna mnozina nie je sekvencia. Jedna hodnota je sekvencia dlzky 1.
    Duplicitne hodnoty sekvenciu porusia (rozdiel 0).
    """
    ordered = sorted(values)
    if not ordered:
        return False
    return all(b - a == 1 for a, b in zip(ordered, ordered[1:]))


def is_sequential_on(points: Iterable[Point], axis: Axis) -> bool:
    return is_sequential(p.value(axis) for p in points)


def sorted_by(points: Iterable[Point], axis: Axis) -> list[Point]:
    return sorted(points, key=lambda p: p.value(axis))


def points_on(points: Iterable[Point], axis: Axis) -> list[Point] | None:
    """Body zoradene podla osi, ak vsetky lezia na jednej linii pozdlz `axis`.

    Linia pozdlz COLUMN znamena rovnaky riadok (meni sa stlpec) a naopak.
    """
    ordered = sorted_by(points, axis)
    if not ordered:
        return None
    other = axis.inverse
    line = ordered[0].value(other)
    if any(p.value(other) != line for p in ordered):
        return None
    return ordered


def _extend(points: Iterable[Point], start: Point, axis: Axis, step: int) -> Point:
    index = set(points)
    current = start
    while (candidate := current.shifted(axis, step)) in index:
        current = candidate
    return current


def extend_minimum(points: Iterable[Point], start: Point, axis: Axis) -> Point:
    """Najnizsi bod dosiahnutelny od `start` cez susediace body z `points`."""
    return _extend(points, start, axis, -1)


def extend_maximum(points: Iterable[Point], start: Point, axis: Axis) -> Point:
    """Najvyssi bod dosiahnutelny od `start` cez susediace body z `points`."""
    return _extend(points, start, axis, 1)


def around(points: Iterable[Point], start: Point, end: Point, axis: Axis) -> Line | None:
    """Body z `points` na linii `start` v rozsahu predlzenom o susedov.

    Rozsah je [extend_minimum(start), extend_maximum(end)] na osi `axis`;
    vyberu sa len body s rovnakou suradnicou na opacnej osi ako `start`.
    """
    pool = list(points)
    low = extend_minimum(pool, start, axis).value(axis)
    high = extend_maximum(pool, end, axis).value(axis)
    line = start.value(axis.inverse)
    found = [
        p for p in pool
        if p.value(axis.inverse) == line and low <= p.value(axis) <= high
    ]
    return tuple(sorted_by(found, axis)) or None


def union(points: Iterable[Point], other: Iterable[Point], axis: Axis) -> Line | None:
    """Spoji body tahu s dotykajucimi sa bodmi `other` do jednej linie.

    Vrati None, ak `points` nelezia na jednej linii, ak by v spojenej linii
    bola medzera, alebo ak by linia mala len jedno pole (to nie je slovo).
    """
    current = points_on(points, axis)
    if current is None:
        return None
    touching = around(other, current[0], current[-1], axis) or ()
    merged = sorted_by(set(current) | set(touching), axis)
    if len(merged) < 2 or not is_sequential_on(merged, axis):
        return None
    return tuple(merged)


def intersections(
    points: Iterable[Point],
    other: Iterable[Point],
    axis: Axis,
) -> tuple[Line, ...] | None:
    """Krizove linie: pre kazdy bod tahu jeho susedia z `other` na opacnej osi."""
    pool = list(other)
    lines: list[Line] = []
    for point in points:
        found = around(pool, point, point, axis.inverse)
        if found is None:
            continue
        lines.append(tuple(sorted_by((*found, point), axis.inverse)))
    return tuple(lines) or None
