"""Konfigurácia a flagy pre WordMatrix engine.

Pravidlá:
- WORDMATRIX_GAME='<slug>' -> preset pre `NewGame` (inak volajúci default).
- WORDMATRIX_SCORING='flat'|'premium' -> vždy prepíše pravidlo z presetu.
- WORDMATRIX_DEBUG_ASSERTS='1' -> po každom príkaze over invarianty stavu.
"""
from __future__ import annotations

import os
from contextlib import suppress

from dotenv import load_dotenv

from .core.scoring import ScoringRule

# Načítaj .env veľmi skoro, ale nenahrádzaj už existujúce OS premenne
if os.getenv("PYTEST_CURRENT_TEST") is None:
    with suppress(OSError):
        load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Bezpečné parsovanie boolean reťazcov; None ak neznáme."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def active_game_slug(default: str) -> str:
    """Slug presetu pre novú partiu (`WORDMATRIX_GAME`), inak `default`."""
    value = (os.getenv("WORDMATRIX_GAME") or "").strip()
    return value or default


def effective_scoring_rule(configured: ScoringRule) -> ScoringRule:
    """Vráti výsledné pravidlo bodovania podľa .env a presetu.

    - .env obsahuje platnú hodnotu -> použije sa .env
    - .env chýba alebo je prázdne -> podľa presetu

    Neznáma hodnota v .env je chyba konfigurácie (ValueError).
    """
    raw = (os.getenv("WORDMATRIX_SCORING") or "").strip()
    if not raw:
        return configured
    return ScoringRule.from_string(raw)


def debug_assertions_enabled() -> bool:
    """Či má store po každom príkaze overovať invarianty stavu."""
    return bool(_parse_bool(os.getenv("WORDMATRIX_DEBUG_ASSERTS")))
