from __future__ import annotations

import pytest

from wordmatrix.config import (
    _parse_bool,
    active_game_slug,
    debug_assertions_enabled,
    effective_scoring_rule,
)
from wordmatrix.core.scoring import ScoringRule


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), (" Yes ", True), ("off", False), ("F", False), ("maybe", None), (None, None)],
)
def test_parse_bool(raw, expected) -> None:
    assert _parse_bool(raw) is expected


def test_active_game_slug(monkeypatch) -> None:
    assert active_game_slug("mini") == "mini"
    monkeypatch.setenv("WORDMATRIX_GAME", "  standard ")
    assert active_game_slug("mini") == "standard"
    monkeypatch.setenv("WORDMATRIX_GAME", "   ")
    assert active_game_slug("mini") == "mini"


def test_scoring_rule_follows_preset_without_env() -> None:
    assert effective_scoring_rule(ScoringRule.PREMIUM) is ScoringRule.PREMIUM


def test_scoring_rule_env_wins(monkeypatch) -> None:
    monkeypatch.setenv("WORDMATRIX_SCORING", "premium")
    assert effective_scoring_rule(ScoringRule.FLAT) is ScoringRule.PREMIUM


def test_scoring_rule_invalid_env(monkeypatch) -> None:
    monkeypatch.setenv("WORDMATRIX_SCORING", "double")
    with pytest.raises(ValueError):
        effective_scoring_rule(ScoringRule.FLAT)


def test_debug_assertions_flag(monkeypatch) -> None:
    assert debug_assertions_enabled() is False
    monkeypatch.setenv("WORDMATRIX_DEBUG_ASSERTS", "true")
    assert debug_assertions_enabled() is True
