from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Final

LOG_PATH: Final = Path(os.getenv("RESUME_QUEST_LOG", Path(__file__).with_name("resume_quest.log")))
SEED_ENV: Final = "RESUME_QUEST_SEED"


def get_seed(default: int | None = None) -> int | None:
    """Return the map seed from ``RESUME_QUEST_SEED`` or ``default``."""

    raw = os.getenv(SEED_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        log_error(f"Ignoring non-integer {SEED_ENV}={raw!r}")
        return default


def _append(level: str, message: str) -> None:
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    entry = f"[{timestamp}] {level}: {message}\n"
    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with LOG_PATH.open("a", encoding="utf-8") as fh:
            fh.write(entry)
    except OSError:
        # A read-only checkout must not stop the game from starting.
        pass


def log_info(message: str) -> None:
    _append("INFO", message)


def log_error(message: str) -> None:
    """Append a timestamped error message to the shared log file."""

    _append("ERROR", message)
