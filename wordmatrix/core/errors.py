"""Chyby enginu.

Neplatne polozenie kamenov NIE je chyba (validator vrati `None`). Vynimky
tu oznacuju porusenie predpokladov prikazu, t. j. volajuci (UI, AI) poslal
prikaz, ktory engine nemoze vykonat. Stav hry sa pri nich nemeni.
"""
from __future__ import annotations

from typing import Any


class EngineError(Exception):
    """Zakladna chyba enginu."""


class CommandError(EngineError, ValueError):
    """Prikaz porusil svoj predpoklad; stav ostal bez zmeny."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.details = details


class TileNotInRack(CommandError):
    def __init__(self, tile: Any) -> None:
        super().__init__(f"Kamen {tile!r} nie je na racku aktualneho hraca", tile=tile)
        self.tile = tile


class TileAlreadyInRack(CommandError):
    def __init__(self, tile: Any) -> None:
        super().__init__(f"Kamen {tile!r} uz je na racku", tile=tile)
        self.tile = tile


class TileNotPlaced(CommandError):
    def __init__(self, tile: Any) -> None:
        super().__init__(f"Kamen {tile!r} nie je polozeny na doske", tile=tile)
        self.tile = tile


class PointOutOfRange(CommandError):
    def __init__(self, point: Any, board_range: range) -> None:
        super().__init__(
            f"Bod {point!r} je mimo dosky {board_range.start}..{board_range.stop}",
            point=point,
        )
        self.point = point


class PointOccupied(CommandError):
    def __init__(self, point: Any) -> None:
        super().__init__(f"Pole {point!r} je uz obsadene", point=point)
        self.point = point


class SwapTooLarge(CommandError):
    def __init__(self, requested: int, held: int) -> None:
        super().__init__(
            f"Vymena {requested} kamenov, ale hrac ma len {held}",
            requested=requested,
            held=held,
        )


class NoSolution(CommandError):
    def __init__(self) -> None:
        super().__init__("Tah nemozno potvrdit bez platneho riesenia")


class PlacementPending(CommandError):
    def __init__(self, count: int) -> None:
        super().__init__(
            f"Hrac ma na doske {count} nepotvrdenych kamenov", count=count
        )


class NoPlayers(CommandError):
    def __init__(self) -> None:
        super().__init__("Hra nema hracov (chyba ResetGame)")


class InvariantViolation(EngineError, AssertionError):
    """Stav hry porusil invariant (len pri zapnutych kontrolach)."""


class GameSetupError(EngineError, ValueError):
    """Neplatna konfiguracia hry (subor s nastavenim, preset)."""
