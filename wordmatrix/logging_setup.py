"""Centralizovaná inicializácia logovania pre WordMatrix.

- Konfiguruje Rich konzolový handler a rotujúci súborový handler.
- Zabráni duplicitným handlerom pri opakovaných importoch.
- Poskytuje `TRACE_ID_VAR` pre propagáciu id príkazu cez ContextVar.
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

# Id práve spracúvaného príkazu (nastavuje GameStore.apply)
TRACE_ID_VAR: ContextVar[str] = ContextVar("trace_id", default="-")


class _TraceIdFilter(logging.Filter):
    """Filter doplní `trace_id` do každého záznamu z ContextVar."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = TRACE_ID_VAR.get()
        return True


def default_log_path() -> str:
    """Určí predvolenú cestu k log súboru.

    Predvolene koreň repozitára (`wordmatrix.log`), prepíše ju
    premenná prostredia `WORDMATRIX_LOG_PATH`.
    """

    env = os.getenv("WORDMATRIX_LOG_PATH")
    if env:
        return env
    root_dir = Path(__file__).resolve().parents[1]
    return str(root_dir / "wordmatrix.log")


def configure_logging(*, log_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Inicializuje logging iba raz a vráti projektový logger.

    - Rich na konzolu (prehľadné tracebacky)
    - Rotujúci súborový handler (≈1 MB, 5 záloh)
    - Formát zahŕňa `trace_id` z `TRACE_ID_VAR`
    """

    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("wordmatrix")

    root.setLevel(logging.DEBUG)
    trace_filter = _TraceIdFilter()

    # Konzola
    ch = RichHandler(rich_tracebacks=True)
    ch.setLevel(level)
    ch.addFilter(trace_filter)
    ch.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(ch)

    # Súbor s rotáciou
    path = log_path or default_log_path()
    try:
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    except OSError as exc:
        # Bez súboru pokračuj aspoň s konzolou
        logging.getLogger("wordmatrix").warning("log_file_unavailable path=%s error=%s", path, exc)
    else:
        fh.setLevel(logging.DEBUG)
        fh.addFilter(trace_filter)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s [trace=%(trace_id)s] %(message)s"
            )
        )
        root.addHandler(fh)

    return logging.getLogger("wordmatrix")
