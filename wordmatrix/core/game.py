"""Konfiguracia partie a presety hier.

`GameConfig` je hotove zadanie pre prikaz `ResetGame` (doska, prémie,
taska, hraci). Presety su JSON subory v `assets/games/`, ktore sa pred
pouzitim overia Pydantic modelmi (`GameSetupModel`) a az potom sa z nich
vytvoria kamene.
"""
from __future__ import annotations

import json
import logging
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ..config import active_game_slug, effective_scoring_rule
from .assets import get_games_path
from .errors import GameSetupError
from .scoring import ScoringRule
from .tiles import mint_tiles
from .types import Computer, Human, Level, Player, PlayerKind, Point, Square, Tile

log = logging.getLogger("wordmatrix.games")

DEFAULT_GAME_SLUG = "mini"

# Legenda pre `premium_grid`: kod -> (nasobitel pismena, nasobitel slova)
PREMIUM_CODES: dict[str, tuple[int, int]] = {
    "..": (1, 1),
    "DL": (2, 1),
    "TL": (3, 1),
    "DW": (1, 2),
    "TW": (1, 3),
}


@dataclass(frozen=True)
class GameConfig:
    """Zadanie novej partie pre `ResetGame`."""

    dimensions: int
    bag: tuple[Tile, ...]
    players: tuple[Player, ...]
    rack_capacity: int
    premium: dict[Point, Square] = field(default_factory=dict)
    filled: dict[Point, Tile] = field(default_factory=dict)
    player_index: int = 0
    scoring: ScoringRule = ScoringRule.FLAT
    name: str = ""

    @property
    def tiles(self) -> list[Tile]:
        """Vsetky kamene partie (taska + predvyplnena doska)."""
        return [*self.bag, *self.filled.values()]


# --- Pydantic modely pre JSON presety ---------------------------------------


class SquareModel(BaseModel):
    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)
    letter_multiplier: int = Field(1, ge=1)
    word_multiplier: int = Field(1, ge=1)


class LetterModel(BaseModel):
    letter: str
    count: int = Field(..., ge=0)
    points: int = Field(..., ge=0)

    @field_validator("letter")
    @classmethod
    def _one_char(cls, v: str) -> str:
        s = str(v).strip().upper()
        if len(s) != 1:
            raise ValueError("letter_len_must_be_1")
        return s


class FilledModel(BaseModel):
    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)
    letter: str


class PlayerModel(BaseModel):
    kind: Literal["human", "ai"] = "human"
    level: Level = Level.MEDIUM

    @field_validator("kind", mode="before")
    @classmethod
    def _norm_kind(cls, v: str | None) -> str:
        return str(v or "human").strip().lower()

    def to_kind(self) -> PlayerKind:
        return Human() if self.kind == "human" else Computer(self.level)


class GameSetupModel(BaseModel):
    """Preset hry nacitany z JSON.

    - `premium` su jednotlive polia, `premium_grid` je alternativny zapis
      po riadkoch (kody z `PREMIUM_CODES` oddelene medzerou); oba sa spoja.
    - `filled` su pismena uz lezace na doske na zaciatku partie.
    """

    slug: str
    name: str = ""
    dimensions: int = Field(..., ge=1)
    rack_capacity: int = Field(..., ge=1)
    scoring: ScoringRule = ScoringRule.FLAT
    letters: list[LetterModel] = Field(default_factory=list)
    players: list[PlayerModel] = Field(default_factory=lambda: [PlayerModel()])
    premium: list[SquareModel] = Field(default_factory=list)
    premium_grid: list[str] = Field(default_factory=list)
    filled: list[FilledModel] = Field(default_factory=list)

    @field_validator("scoring", mode="before")
    @classmethod
    def _norm_scoring(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ScoringRule.from_string(v)
        return v

    @field_validator("players")
    @classmethod
    def _at_least_one_player(cls, v: list[PlayerModel]) -> list[PlayerModel]:
        if not v:
            raise ValueError("players_required")
        return v

    @model_validator(mode="after")
    def _check_board(self) -> GameSetupModel:
        size = self.dimensions
        if self.premium_grid:
            if len(self.premium_grid) != size:
                raise ValueError("premium_grid_row_count")
            for row in self.premium_grid:
                codes = row.split()
                if len(codes) != size:
                    raise ValueError("premium_grid_column_count")
                unknown = set(codes) - PREMIUM_CODES.keys()
                if unknown:
                    raise ValueError(f"premium_grid_unknown_code {sorted(unknown)}")
        for square in self.premium:
            if square.row >= size or square.column >= size:
                raise ValueError("premium_out_of_board")
        known = {letter.letter for letter in self.letters}
        for cell in self.filled:
            if cell.row >= size or cell.column >= size:
                raise ValueError("filled_out_of_board")
            if cell.letter.upper() not in known:
                raise ValueError(f"filled_unknown_letter {cell.letter}")
        return self

    def premium_squares(self) -> dict[Point, Square]:
        squares: dict[Point, Square] = {}
        for r, row in enumerate(self.premium_grid):
            for c, code in enumerate(row.split()):
                letter_mult, word_mult = PREMIUM_CODES[code]
                if (letter_mult, word_mult) != (1, 1):
                    squares[Point(r, c)] = Square(letter_mult, word_mult)
        for sq in self.premium:
            squares[Point(sq.row, sq.column)] = Square(sq.letter_multiplier, sq.word_multiplier)
        return squares


# --- Interne helpery --------------------------------------------------------


def slugify(text: str) -> str:
    """Vytvori slug (lowercase, bez diakritiky) pre nazov presetu."""

    normalized = unicodedata.normalize("NFKD", text)
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    cleaned = "".join(ch if ch.isalnum() else "-" for ch in ascii_only.lower())
    cleaned = "-".join(filter(None, cleaned.split("-")))
    return cleaned or "game"


def _setup_path(slug: str) -> Path:
    return get_games_path() / f"{slugify(slug)}.json"


# --- Verejne API ------------------------------------------------------------


def load_game_setup_from_path(path: Path | str) -> GameSetupModel:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise GameSetupError(f"Preset {p} sa neda nacitat: {exc}") from exc
    data.setdefault("slug", slugify(p.stem))
    try:
        return GameSetupModel.model_validate(data)
    except ValidationError as exc:
        log.warning("game_setup_invalid path=%s errors=%d", p, exc.error_count())
        raise GameSetupError(f"Preset {p} je neplatny: {exc}") from exc


def load_game_setup(slug: str) -> GameSetupModel:
    path = _setup_path(slug)
    if not path.exists():
        raise GameSetupError(f"Preset '{slug}' neexistuje")
    return load_game_setup_from_path(path)


def list_game_setups() -> list[GameSetupModel]:
    setups: list[GameSetupModel] = []
    for path in sorted(get_games_path().glob("*.json")):
        try:
            setups.append(load_game_setup_from_path(path))
        except GameSetupError as exc:
            log.error("game_setup_load_failed path=%s error=%s", path, exc)
    return setups


def build_game_config(setup: GameSetupModel, seed: int | None = None) -> GameConfig:
    """Z overeneho presetu vytvori kamene a zlozi `GameConfig`.

    Pravidlo bodovania sa urci tu (`WORDMATRIX_SCORING` prepise preset),
    reducer potom cita len `GameConfig.scoring`.
    """

    distribution = {letter.letter: letter.count for letter in setup.letters}
    values = {letter.letter: letter.points for letter in setup.letters}
    bag = mint_tiles(distribution, values, seed)

    # predvyplnene pismena dostanu id za kamenmi v taske
    filled: dict[Point, Tile] = {}
    for cell in setup.filled:
        letter = cell.letter.upper()
        tile = Tile(id=len(bag) + len(filled), letter=letter, value=values[letter])
        filled[Point(cell.row, cell.column)] = tile

    players = tuple(Player(kind=p.to_kind()) for p in setup.players)
    log.info(
        "game_config_built slug=%s tiles=%d players=%d seed=%s",
        setup.slug,
        len(bag) + len(filled),
        len(players),
        seed,
    )
    return GameConfig(
        dimensions=setup.dimensions,
        bag=tuple(bag),
        players=players,
        rack_capacity=setup.rack_capacity,
        premium=setup.premium_squares(),
        filled=filled,
        scoring=effective_scoring_rule(setup.scoring),
        name=setup.name or setup.slug,
    )


def default_game(seed: int | None = None) -> GameConfig:
    """Konfiguracia pre `NewGame` podla aktivneho presetu.

    Aktivny preset urcuje `WORDMATRIX_GAME`; ak neexistuje, pouzije sa
    `mini`.
    """

    slug = active_game_slug(DEFAULT_GAME_SLUG)
    if not _setup_path(slug).exists():
        log.warning("active_game_missing slug=%s -> fallback=%s", slug, DEFAULT_GAME_SLUG)
        slug = DEFAULT_GAME_SLUG
    return build_game_config(load_game_setup(slug), seed)
