"""Store: jediny vstupny bod pre zmeny stavu partie.

- `apply(command)` spracuje prikaz a vsetky nasledne prikazy, ktore
  pocas neho vzniknu (napr. vysledok validacie), a vrati novy stav.
- Interceptory mozu prikaz nahradit inym (`NewGame` -> `ResetGame`).
- Middleware sa volaju po kazdom reduktore s novym stavom.
- Observery dostanu vysledny stav po dokonceni `apply`.

Prikazy sa spracuju po jednom v poradi FIFO; store nie je thread-safe,
volajuci musi prikazy serializovat sam.
"""
from __future__ import annotations

import itertools
import logging
from collections import deque
from collections.abc import Callable, Iterable

from ..config import debug_assertions_enabled
from ..logging_setup import TRACE_ID_VAR
from .commands import (
    PLACEMENT_COMMANDS,
    Command,
    MarkInvalid,
    MarkValid,
    NewGame,
    ResetGame,
    command_label,
)
from .errors import EngineError
from .game import GameConfig, default_game
from .state import GameState, check_invariants, reduce
from .validator import validate

log = logging.getLogger("wordmatrix.store")
command_log = logging.getLogger("wordmatrix.commands")

Middleware = Callable[["GameStore", GameState, Command], None]
Interceptor = Callable[["GameStore", Command], bool]
Observer = Callable[[GameState], None]
GameProvider = Callable[[int | None], GameConfig]


def command_logger(store: GameStore, state: GameState, command: Command) -> None:
    """Zaloguje prikaz a kompaktny stav po jeho aplikovani."""
    command_log.info("# %s --> %s", command_label(command), state.summary())


def turn_validator(store: GameStore, state: GameState, command: Command) -> None:
    """Po zmene polozenia overi tah a posle vysledok ako dalsi prikaz."""
    if not isinstance(command, PLACEMENT_COMMANDS):
        return
    solution = validate(state.placed, state.filled, state.premium, state.scoring)
    store.dispatch(MarkValid(solution) if solution is not None else MarkInvalid())


def game_resetter(store: GameStore, command: Command) -> bool:
    """`NewGame` nahradi `ResetGame` s konfiguraciou od poskytovatela."""
    if isinstance(command, NewGame):
        store.dispatch(ResetGame(store.provider(command.seed)))
        return True
    return False


DEFAULT_MIDDLEWARE: tuple[Middleware, ...] = (command_logger, turn_validator)
DEFAULT_INTERCEPTORS: tuple[Interceptor, ...] = (game_resetter,)


class GameStore:
    """Vlastnik stavu jednej hernej relacie."""

    def __init__(
        self,
        state: GameState | None = None,
        *,
        provider: GameProvider | None = None,
        middleware: Iterable[Middleware] | None = None,
        interceptors: Iterable[Interceptor] | None = None,
        check_invariants: bool | None = None,
    ) -> None:
        self._state = state.copy() if state is not None else GameState()
        self.provider: GameProvider = provider or default_game
        self._middleware = tuple(DEFAULT_MIDDLEWARE if middleware is None else middleware)
        self._interceptors = tuple(DEFAULT_INTERCEPTORS if interceptors is None else interceptors)
        self._observers: list[Observer] = []
        self._queue: deque[Command] = deque()
        self._draining = False
        self._sequence = itertools.count(1)
        self._check = debug_assertions_enabled() if check_invariants is None else check_invariants

    @property
    def state(self) -> GameState:
        """Kopia aktualneho stavu (zmeny na nej store neovplyvnia)."""
        return self._state.copy()

    def current_state(self) -> GameState:
        return self.state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Zaregistruje observer; vrati funkciu na odhlasenie."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def dispatch(self, command: Command) -> None:
        """Zaradi prikaz do fronty (pouzivaju middleware a interceptory)."""
        self._queue.append(command)

    def apply(self, command: Command) -> GameState:
        """Spracuje prikaz aj vsetky nasledne prikazy a vrati novy stav.

        Pri chybe sa vrati stav spred volania a chyba sa propaguje.
        """
        if self._draining:
            # volanie z middleware/interceptora: spracuje sa v aktualnom cykle
            self.dispatch(command)
            return self._state.copy()

        before = self._state
        self._queue.append(command)
        self._draining = True
        token = TRACE_ID_VAR.set(f"cmd-{next(self._sequence)}")
        try:
            while self._queue:
                self._step(self._queue.popleft())
        except Exception as exc:
            self._queue.clear()
            self._state = before
            if isinstance(exc, EngineError):
                log.warning("command_rejected command=%s error=%s", command_label(command), exc)
            raise
        finally:
            self._draining = False
            TRACE_ID_VAR.reset(token)

        snapshot = self._state.copy()
        for observer in list(self._observers):
            observer(snapshot)
        return snapshot

    def _step(self, command: Command) -> None:
        if any(intercept(self, command) for intercept in self._interceptors):
            return
        new_state = reduce(self._state, command)
        if self._check:
            check_invariants(new_state)
        self._state = new_state
        for middleware in self._middleware:
            middleware(self, new_state, command)
