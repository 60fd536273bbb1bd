"""Vstupný bod pre spustenie: `python -m wordmatrix [preset] [seed]`.

Spustí novú partiu z presetu a vypíše dosku a racky. Nejde o UI, len o
rýchlu kontrolu, že preset a engine spolu fungujú.
"""

from __future__ import annotations

import sys

from rich.console import Console
from rich.table import Table

from .core.commands import ResetGame
from .core.game import build_game_config, default_game, load_game_setup
from .core.state import GameState
from .core.tiles import letter_values
from .core.store import GameStore
from .core.types import Point
from .logging_setup import configure_logging


def render_board(state: GameState) -> Table:
    table = Table(show_header=False, show_lines=False, box=None, padding=(0, 1))
    for _ in state.board_range:
        table.add_column(justify="center")
    for row in state.board_range:
        cells: list[str] = []
        for column in state.board_range:
            tile = state.filled.get(Point(row, column))
            cells.append(tile.letter if tile else "·")
        table.add_row(*cells)
    return table


def main(argv: list[str] | None = None) -> None:
    """Nakonfiguruje logovanie, rozdá kamene a vypíše stav."""

    args = sys.argv[1:] if argv is None else argv
    configure_logging()
    seed = int(args[1]) if len(args) > 1 else None
    config = build_game_config(load_game_setup(args[0]), seed) if args else default_game(seed)

    store = GameStore()
    state = store.apply(ResetGame(config))

    console = Console()
    console.print(f"[bold]{config.name}[/bold]  bag={len(state.bag)}  scoring={state.scoring.value}")
    console.print(render_board(state))
    values = letter_values(config.tiles)
    console.print("hodnoty: " + " ".join(f"{letter}={values[letter]}" for letter in sorted(values)))
    for index, player in enumerate(state.players):
        marker = "*" if index == state.player_index else " "
        rack = " ".join(tile.letter for tile in player.rack)
        console.print(f"{marker} hráč {index} ({type(player.kind).__name__}): {rack}  skóre={player.score}")


if __name__ == "__main__":
    main()
