"""Append timestamped event lines to a simple event log file."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Union

DEFAULT_LOG_FILE = Path("watchtower.log")


def log_event(event: str, path: Union[str, Path] = DEFAULT_LOG_FILE) -> None:
    """Append ``[<unix seconds>] - <event>`` to *path*, creating it if needed.

    Raises OSError when the file cannot be opened or written.
    """
    now = time.time()
    if now < 0:
        raise RuntimeError("Time went backwards")
    line = f"[{int(now)}] - {event}\n"
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(line)