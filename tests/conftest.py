"""Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides:
- Isolation from WORDMATRIX_* variables set in the shell or in .env
- Shared tile/game fixtures for all tests
"""

from __future__ import annotations

import string

import pytest

from wordmatrix.core.commands import ResetGame
from wordmatrix.core.game import GameConfig
from wordmatrix.core.state import GameState, reduce
from wordmatrix.core.store import GameStore
from wordmatrix.core.types import Player, Point, Square, Tile

ENV_VARS = ("WORDMATRIX_GAME", "WORDMATRIX_SCORING", "WORDMATRIX_DEBUG_ASSERTS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Testy nesmu zavisiet od lokalneho .env."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_tiles(amount: int) -> list[Tile]:
    """Kamene s jedinecnym id; pismena sa opakuju po abecede.

    Hodnota zavisi len od pismena (A=1, B=2, C=3, D=1, ...).
    """
    letters = string.ascii_uppercase
    tiles = []
    for i in range(amount):
        index = i % len(letters)
        tiles.append(Tile(id=i, letter=letters[index], value=1 + index % 3))
    return tiles


PREMIUM_SQUARES = {
    Point(0, 0): Square(),
    Point(1, 0): Square(letter_multiplier=2),
    Point(2, 0): Square(word_multiplier=2),
}


@pytest.fixture
def small_config() -> GameConfig:
    """Doska 5x5, 30 kamenov, styria hraci po 5 kamenov."""
    return GameConfig(
        dimensions=5,
        bag=tuple(make_tiles(30)),
        players=tuple(Player() for _ in range(4)),
        rack_capacity=5,
        premium=dict(PREMIUM_SQUARES),
    )


@pytest.fixture
def started(small_config: GameConfig) -> GameState:
    """Stav po ResetGame so `small_config`."""
    return reduce(GameState(), ResetGame(small_config))


@pytest.fixture
def store(small_config: GameConfig) -> GameStore:
    """Store s overovanim invariantov po kazdom prikaze."""
    s = GameStore(provider=lambda seed: small_config, check_invariants=True)
    s.apply(ResetGame(small_config))
    return s


@pytest.fixture
def tiles():
    """Tovaren na kamene: `tiles(n)`."""
    return make_tiles
