"""Stav partie a reducer prikazov.

`reduce(state, command)` je cista funkcia: skopiruje stav, aplikuje prikaz
a vrati novy stav. Ak prikaz porusi predpoklad, vyvola `CommandError` a
povodny stav ostane nezmeneny (prikazy su atomicke).

Validacia polozenia tu neprebieha; po `PlaceTile`/`RackTile` sa len zrusi
predchadzajuce riesenie a novy vysledok prinesie `MarkValid`/`MarkInvalid`
(posiela ich `turn_validator` v store).
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from .commands import (
    AdvancePlayer,
    Command,
    Draw,
    MarkInvalid,
    MarkValid,
    NewGame,
    PlaceTile,
    RackTile,
    ResetGame,
    ShuffleRack,
    SubmitTurn,
    Swap,
)
from .errors import (
    InvariantViolation,
    NoPlayers,
    NoSolution,
    PlacementPending,
    PointOccupied,
    PointOutOfRange,
    SwapTooLarge,
    TileAlreadyInRack,
    TileNotInRack,
    TileNotPlaced,
)
from .game import GameConfig
from .scoring import ScoringRule
from .tiles import shuffle_tiles
from .types import Player, Point, Solution, Square, Tile


@dataclass
class GameState:
    """Autoritativny stav partie."""

    bag: list[Tile] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)
    player_index: int = 0
    rack_capacity: int = 0
    board_range: range = range(0, 1)
    filled: dict[Point, Tile] = field(default_factory=dict)
    placed: dict[Tile, Point] = field(default_factory=dict)
    premium: dict[Point, Square] = field(default_factory=dict)
    solution: Solution | None = None
    tile_count: int = 0
    scoring: ScoringRule = ScoringRule.FLAT

    @property
    def player(self) -> Player:
        """Hrac na tahu."""
        if not self.players:
            raise NoPlayers()
        return self.players[self.player_index]

    @property
    def dimensions(self) -> int:
        return len(self.board_range)

    def contains(self, point: Point) -> bool:
        return point.row in self.board_range and point.column in self.board_range

    def all_tiles(self) -> list[Tile]:
        """Vsetky kamene v hre: taska, racky, doska a polozene v tahu."""
        tiles = list(self.bag)
        for player in self.players:
            tiles.extend(player.rack)
        tiles.extend(self.filled.values())
        tiles.extend(self.placed.keys())
        return tiles

    def copy(self) -> GameState:
        # Tile/Point/Square/Solution su nemenne, staci kopirovat kontajnery
        return GameState(
            bag=list(self.bag),
            players=[p.copy() for p in self.players],
            player_index=self.player_index,
            rack_capacity=self.rack_capacity,
            board_range=self.board_range,
            filled=dict(self.filled),
            placed=dict(self.placed),
            premium=dict(self.premium),
            solution=self.solution,
            tile_count=self.tile_count,
            scoring=self.scoring,
        )

    def summary(self) -> str:
        """Kompaktny popis stavu pre logy."""
        racks = "/".join(str(len(p.rack)) for p in self.players)
        scores = "/".join(str(p.score) for p in self.players)
        solution = "-" if self.solution is None else str(self.solution.score)
        return (
            f"bag={len(self.bag)} racks={racks} scores={scores} "
            f"player={self.player_index} filled={len(self.filled)} "
            f"placed={len(self.placed)} solution={solution}"
        )


def reduce(state: GameState, command: Command) -> GameState:
    """Aplikuje prikaz na kopiu stavu a vrati ju."""
    new = state.copy()
    match command:
        case ResetGame(config=config):
            _reset(new, config)
        case NewGame():
            raise TypeError("NewGame musi spracovat store (game_resetter)")
        case _ if not new.players:
            raise NoPlayers()
        case Draw():
            _draw_into_rack(new)
        case Swap(tiles=tiles):
            _swap(new, tiles)
        case PlaceTile(tile=tile, point=point):
            _place(new, tile, point)
        case RackTile(tile=tile):
            _rack(new, tile)
        case SubmitTurn():
            _submit(new)
        case AdvancePlayer():
            _advance(new)
        case ShuffleRack(seed=seed):
            new.player.rack = shuffle_tiles(new.player.rack, seed)
        case MarkValid(solution=solution):
            new.solution = solution
        case MarkInvalid():
            new.solution = None
        case _:
            raise TypeError(f"Neznamy prikaz: {command!r}")
    return new


# --- ResetGame ----------------------------------------------------------------


def _reset(state: GameState, config: GameConfig) -> None:
    state.bag = list(config.bag)
    state.players = [p.copy() for p in config.players]
    state.player_index = config.player_index % len(state.players) if state.players else 0
    state.rack_capacity = config.rack_capacity
    state.board_range = range(0, config.dimensions)
    state.filled = dict(config.filled)
    state.placed = {}
    state.premium = {p: sq for p, sq in config.premium.items() if p not in config.filled}
    state.solution = None
    state.tile_count = len(config.tiles)
    state.scoring = config.scoring

    # kazdy hrac si doplni rack; po celom kole je na tahu opat povodny hrac
    for _ in state.players:
        _draw_into_rack(state)
        _advance(state)


# --- Taska --------------------------------------------------------------------


def _draw(state: GameState, limit: int | None = None) -> list[Tile]:
    # nepotvrdene kamene na doske patria hracovi, vratia sa cez RackTile
    free = state.rack_capacity - len(state.player.rack) - len(state.placed)
    amount = min(len(state.bag), free)
    if limit is not None:
        amount = min(amount, limit)
    return [state.bag.pop() for _ in range(max(0, amount))]


def _draw_into_rack(state: GameState) -> None:
    state.player.rack.extend(_draw(state))


def _swap(state: GameState, tiles: tuple[Tile, ...]) -> None:
    player = state.player
    held = len(player.rack)
    if len(tiles) > held:
        raise SwapTooLarge(len(tiles), held)
    remaining = list(player.rack)
    for tile in tiles:
        # rovnaky kamen dvakrat v prikaze neprejde druhou kontrolou
        if tile not in remaining:
            raise TileNotInRack(tile)
        remaining.remove(tile)

    player.rack = remaining
    state.bag = list(tiles) + state.bag
    # doplni sa len tolko, kolko sa vymenilo (rack sa nezvacsi)
    player.rack.extend(_draw(state, limit=len(tiles)))


# --- Tah ----------------------------------------------------------------------


def _place(state: GameState, tile: Tile, point: Point) -> None:
    if not state.contains(point):
        raise PointOutOfRange(point, state.board_range)
    if point in state.filled:
        raise PointOccupied(point)
    player = state.player
    if tile not in player.rack:
        raise TileNotInRack(tile)

    player.rack.remove(tile)
    occupant = next((t for t, p in state.placed.items() if p == point), None)
    if occupant is not None:
        _rack(state, occupant)
    state.placed[tile] = point
    state.solution = None


def _rack(state: GameState, tile: Tile) -> None:
    if tile not in state.placed:
        raise TileNotPlaced(tile)
    player = state.player
    if tile in player.rack:
        raise TileAlreadyInRack(tile)
    player.rack.append(tile)
    del state.placed[tile]
    state.solution = None


def _submit(state: GameState) -> None:
    solution = state.solution
    if solution is None:
        raise NoSolution()
    for tile, point in state.placed.items():
        if point in state.filled:
            raise PointOccupied(point)
        state.filled[point] = tile
        state.premium.pop(point, None)
    state.placed = {}
    state.player.score += solution.score
    state.solution = None


def _advance(state: GameState) -> None:
    if state.placed:
        raise PlacementPending(len(state.placed))
    state.player_index = (state.player_index + 1) % len(state.players)


# --- Invarianty ---------------------------------------------------------------


def check_invariants(state: GameState) -> None:
    """Overi invarianty stavu; pri poruseni vyvola `InvariantViolation`."""
    placed_points = set(state.placed.values())
    overlap = placed_points & state.filled.keys()
    if overlap:
        raise InvariantViolation(f"filled a placed sa prekryvaju: {sorted(overlap)}")
    if len(placed_points) != len(state.placed):
        raise InvariantViolation("dva polozene kamene na rovnakom poli")

    tiles = state.all_tiles()
    if len(tiles) != state.tile_count:
        raise InvariantViolation(
            f"pocet kamenov {len(tiles)} != vytvorenych {state.tile_count}"
        )
    duplicates = [t for t, n in Counter(tiles).items() if n > 1]
    if duplicates:
        raise InvariantViolation(f"kamen je na viacerych miestach: {duplicates}")

    outside = [p for p in (*state.filled, *placed_points) if not state.contains(p)]
    if outside:
        raise InvariantViolation(f"body mimo dosky: {outside}")

    for index, player in enumerate(state.players):
        if len(player.rack) > state.rack_capacity:
            raise InvariantViolation(
                f"hrac {index} ma {len(player.rack)} kamenov (max {state.rack_capacity})"
            )
