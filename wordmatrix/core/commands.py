"""Prikazy pre reducer hry.

Vsetky prikazy su nemenne dataclassy a spolu tvoria jeden typ `Command`;
reducer ich spracuje jednym `match` blokom v `state.reduce`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .types import Point, Solution, Tile

if TYPE_CHECKING:
    from .game import GameConfig


@dataclass(frozen=True)
class ResetGame:
    config: GameConfig


@dataclass(frozen=True)
class NewGame:
    """Nova partia z aktivneho presetu (spracuje ju `game_resetter` v store)."""
    seed: int | None = None


@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class Swap:
    tiles: tuple[Tile, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))


@dataclass(frozen=True)
class PlaceTile:
    tile: Tile
    point: Point


@dataclass(frozen=True)
class RackTile:
    tile: Tile


@dataclass(frozen=True)
class SubmitTurn:
    pass


@dataclass(frozen=True)
class AdvancePlayer:
    pass


@dataclass(frozen=True)
class ShuffleRack:
    seed: int | None = None


@dataclass(frozen=True)
class MarkValid:
    solution: Solution


@dataclass(frozen=True)
class MarkInvalid:
    pass


Command = (
    ResetGame
    | NewGame
    | Draw
    | Swap
    | PlaceTile
    | RackTile
    | SubmitTurn
    | AdvancePlayer
    | ShuffleRack
    | MarkValid
    | MarkInvalid
)

# Prikazy, po ktorych sa musi znovu validovat polozenie
PLACEMENT_COMMANDS = (PlaceTile, RackTile)


def command_label(command: Command) -> str:
    """Kratky popis prikazu pre logy, napr. `PlaceTile(tile=7:A, point=2,3)`."""
    name = type(command).__name__
    if isinstance(command, PlaceTile):
        t, p = command.tile, command.point
        return f"{name}(tile={t.id}:{t.letter}, point={p.row},{p.column})"
    if isinstance(command, RackTile):
        return f"{name}(tile={command.tile.id}:{command.tile.letter})"
    if isinstance(command, Swap):
        return f"{name}(tiles={[t.id for t in command.tiles]})"
    if isinstance(command, MarkValid):
        return f"{name}(score={command.solution.score})"
    return name
