"""Pomocné funkcie pre prístup k assetom (presety hier).

Komentár (SK): Používame Path pre robustné zostavenie ciest nezávislé od cwd.
"""

from __future__ import annotations

from pathlib import Path


def get_assets_path() -> Path:
    """Vráti cestu k priečinku `assets/` v balíku.

    Nájde sa relatívne k tomuto modulu (`wordmatrix/core/assets.py`).
    """

    return Path(__file__).resolve().parent.parent / "assets"


def get_games_path() -> Path:
    """Priečinok s JSON presetmi hier (`assets/games/`)."""

    return get_assets_path() / "games"
