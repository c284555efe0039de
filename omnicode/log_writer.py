"""Persist log entries as daily plain-text scrolls and JSON-lines files.

Writing is best effort: a failure is reported on standard error and the
caller carries on, so a broken log directory never stops the system.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Union

LOG_ROOT = Path("/app/logs")
SCROLL_DIR = "scrolls"
JSON_DIR = "json"

PathLike = Union[str, Path]


def _today() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def _warn(message: str) -> None:
    print(f"⚠️ {message}", file=sys.stderr)


def _daily_file(root: Optional[PathLike], subdir: str, suffix: str, kind: str) -> Optional[Path]:
    """Create the directory for *kind* logs and return today's file in it."""
    directory = (Path(root) if root is not None else LOG_ROOT) / subdir
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _warn(f"Failed to create {kind} log directory: {exc}")
        return None
    return directory / f"{_today()}{suffix}"


def _serialize(log: Any) -> str:
    payload = log.to_dict() if callable(getattr(log, "to_dict", None)) else log
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def write_scroll(text: str, root: Optional[PathLike] = None) -> Optional[Path]:
    """Append *text* as one entry to today's scroll; return the file written."""
    path = _daily_file(root, SCROLL_DIR, ".log", "scroll")
    if path is None:
        return None
    try:
        handle = path.open("a", encoding="utf-8")
    except OSError as exc:
        _warn(f"Failed to open scroll log file: {exc}")
        return None
    try:
        with handle:
            handle.write(f"{text}\n")
    except OSError as exc:
        _warn(f"Failed to write to scroll log file: {exc}")
        return None
    return path


def write_json(log: Any, root: Optional[PathLike] = None) -> Optional[Path]:
    """Append *log* as one compact JSON line to today's file; return the file written."""
    path = _daily_file(root, JSON_DIR, ".json", "JSON")
    if path is None:
        return None
    try:
        handle = path.open("a", encoding="utf-8")
    except OSError as exc:
        _warn(f"Failed to open JSON log file: {exc}")
        return None
    with handle:
        try:
            serialized = _serialize(log)
        except (TypeError, ValueError) as exc:
            _warn(f"Failed to serialize log entry: {exc}")
            return None
        try:
            handle.write(f"{serialized}\n")
            handle.flush()
        except OSError as exc:
            _warn(f"Failed to write to JSON log file: {exc}")
            return None
    return path