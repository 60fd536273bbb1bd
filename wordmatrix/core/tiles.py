from __future__ import annotations

import random
from collections.abc import Iterable, Mapping

from .errors import GameSetupError
from .types import Tile


def mint_tiles(
    distribution: Mapping[str, int],
    values: Mapping[str, int],
    seed: int | None = None,
) -> list[Tile]:
    """Vytvori kamene podla distribucie a premiesa ich.

    Kazdy kamen dostane jedinecne `id` (poradie pred miesanim), takze aj
    rovnake pismena su rozlisitelne. Pri rovnakom `seed` je poradie
    deterministicke (reprodukovatelna partia).
    """
    tiles: list[Tile] = []
    for letter in sorted(distribution):
        for _ in range(distribution[letter]):
            tiles.append(Tile(id=len(tiles), letter=letter, value=values.get(letter, 0)))
    random.Random(seed).shuffle(tiles)
    return tiles


def letter_values(tiles: Iterable[Tile]) -> dict[str, int]:
    """Bodova hodnota kazdeho pismena podla vytvorenych kamenov.

    Rovnake pismeno musi mat vsade rovnaku hodnotu, inak `GameSetupError`.
    """
    values: dict[str, int] = {}
    for tile in tiles:
        known = values.setdefault(tile.letter, tile.value)
        if known != tile.value:
            raise GameSetupError(
                f"Pismeno {tile.letter} ma rozne hodnoty: {known} a {tile.value}"
            )
    return values


def shuffle_tiles(tiles: list[Tile], seed: int | None = None) -> list[Tile]:
    """Vrati novy zoznam s premiesanym poradim (vstup sa nemeni)."""
    out = list(tiles)
    random.Random(seed).shuffle(out)
    return out
