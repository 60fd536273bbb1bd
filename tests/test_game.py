from __future__ import annotations

import json
import logging

import pytest

from wordmatrix.core.commands import NewGame, ResetGame
from wordmatrix.core.errors import GameSetupError
from wordmatrix.core.game import (
    build_game_config,
    default_game,
    list_game_setups,
    load_game_setup,
    load_game_setup_from_path,
    slugify,
)
from wordmatrix.core.scoring import ScoringRule
from wordmatrix.core.state import GameState, check_invariants, reduce
from wordmatrix.core.store import GameStore
from wordmatrix.core.types import Computer, Human, Level, Point, Square

EXPECTED_TILE_COUNTS: dict[str, int] = {
    "mini": 3,
    "standard": 100,
    "warmup": 29,
}


def write_setup(tmp_path, payload: dict, name: str = "custom.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_installed_setups_have_expected_tile_counts() -> None:
    setups = list_game_setups()
    found_slugs = {setup.slug for setup in setups}
    missing_expectations = sorted(found_slugs - EXPECTED_TILE_COUNTS.keys())
    assert not missing_expectations, (
        "Add expected tile totals for new presets:"
        f" {', '.join(missing_expectations)}"
    )

    for setup in setups:
        config = build_game_config(setup, seed=1)
        assert len(config.tiles) == EXPECTED_TILE_COUNTS[setup.slug]


def test_mini_matches_new_game_defaults() -> None:
    config = build_game_config(load_game_setup("mini"))
    assert config.dimensions == 5
    assert config.rack_capacity == 5
    assert sorted(t.letter for t in config.bag) == ["O", "O", "T"]
    assert config.players[0].kind == Human()
    assert config.scoring is ScoringRule.FLAT


def test_standard_board_layout() -> None:
    config = build_game_config(load_game_setup("standard"), seed=3)
    assert config.dimensions == 15
    assert config.premium[Point(0, 0)] == Square(word_multiplier=3)
    assert config.premium[Point(7, 7)] == Square(word_multiplier=2)
    assert config.premium[Point(1, 5)] == Square(letter_multiplier=3)
    assert config.premium[Point(0, 3)] == Square(letter_multiplier=2)
    assert len(config.premium) == 8 + 17 + 12 + 24
    assert config.players[1].kind == Computer(Level.MEDIUM)


def test_standard_reset_deals_racks() -> None:
    state = reduce(GameState(), ResetGame(build_game_config(load_game_setup("standard"), seed=5)))
    assert [len(p.rack) for p in state.players] == [7, 7]
    assert len(state.bag) == 86
    assert state.scoring is ScoringRule.PREMIUM
    check_invariants(state)


def test_same_seed_same_bag() -> None:
    setup = load_game_setup("standard")
    first = build_game_config(setup, seed=42)
    second = build_game_config(setup, seed=42)
    other = build_game_config(setup, seed=43)
    assert first.bag == second.bag
    assert first.bag != other.bag


def test_tile_ids_are_unique() -> None:
    config = build_game_config(load_game_setup("warmup"), seed=9)
    ids = [t.id for t in config.tiles]
    assert len(ids) == len(set(ids))


def test_prefilled_cells_from_setup() -> None:
    config = build_game_config(load_game_setup("warmup"), seed=1)
    word = "".join(config.filled[Point(3, c)].letter for c in range(2, 5))
    assert word == "CAT"
    assert config.filled[Point(3, 2)].value == 3

    state = reduce(GameState(), ResetGame(config))
    assert Point(3, 3) in config.premium
    assert Point(3, 3) not in state.premium
    assert len(state.bag) == 26 - 2 * 5
    check_invariants(state)


def test_invalid_json_raises(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(GameSetupError):
        load_game_setup_from_path(path)


def test_invalid_setup_is_logged(tmp_path, caplog) -> None:
    path = write_setup(
        tmp_path,
        {"dimensions": 3, "rack_capacity": 2, "letters": [{"letter": "CH", "count": 1, "points": 4}]},
    )
    caplog.set_level(logging.WARNING, logger="wordmatrix.games")
    with pytest.raises(GameSetupError):
        load_game_setup_from_path(path)
    assert any("game_setup_invalid" in record.message for record in caplog.records)


@pytest.mark.parametrize(
    "extra",
    [
        {"premium_grid": [".. ..", ".. .."]},
        {"premium_grid": [".. .. ..", ".. XX ..", ".. .. .."]},
        {"premium": [{"row": 3, "column": 0, "word_multiplier": 2}]},
        {"filled": [{"row": 0, "column": 0, "letter": "Z"}]},
        {"players": []},
        {"scoring": "fancy"},
    ],
)
def test_board_errors_are_rejected(tmp_path, extra: dict) -> None:
    payload = {
        "dimensions": 3,
        "rack_capacity": 2,
        "letters": [{"letter": "A", "count": 4, "points": 1}],
        **extra,
    }
    with pytest.raises(GameSetupError):
        load_game_setup_from_path(write_setup(tmp_path, payload))


def test_slug_defaults_to_file_name(tmp_path) -> None:
    payload = {"dimensions": 3, "rack_capacity": 2, "letters": [{"letter": "a", "count": 4, "points": 1}]}
    setup = load_game_setup_from_path(write_setup(tmp_path, payload, "Moja Hra.json"))
    assert setup.slug == "moja-hra"
    assert setup.letters[0].letter == "A"
    assert len(setup.players) == 1


def test_slugify() -> None:
    assert slugify("Slovenčina Ťažká") == "slovencina-tazka"
    assert slugify("***") == "game"


def test_unknown_slug_raises() -> None:
    with pytest.raises(GameSetupError):
        load_game_setup("does-not-exist")


def test_default_game_uses_env(monkeypatch) -> None:
    monkeypatch.setenv("WORDMATRIX_GAME", "warmup")
    config = default_game(seed=1)
    assert config.dimensions == 7


def test_default_game_falls_back_to_mini(monkeypatch, caplog) -> None:
    monkeypatch.setenv("WORDMATRIX_GAME", "missing-preset")
    caplog.set_level(logging.WARNING, logger="wordmatrix.games")
    config = default_game()
    assert config.dimensions == 5
    assert any("active_game_missing" in record.message for record in caplog.records)


def test_new_game_through_default_provider(monkeypatch) -> None:
    monkeypatch.setenv("WORDMATRIX_GAME", "standard")
    store = GameStore()
    state = store.apply(NewGame(seed=4))
    assert state.dimensions == 15
    assert len(state.players) == 2


def test_scoring_env_overrides_preset(monkeypatch) -> None:
    monkeypatch.setenv("WORDMATRIX_SCORING", "flat")
    config = build_game_config(load_game_setup("standard"))
    assert config.scoring is ScoringRule.FLAT
    state = reduce(GameState(), ResetGame(config))
    assert state.scoring is ScoringRule.FLAT
