"""Watchtower start-up: record the opening set of monitoring events."""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence, Union

from omnicode.log_entries import BaseLogEntry, CriticalLogEntry, DebugLogEntry, SpiritualLogEntry
from omnicode.log_router import route

LogEntry = Union[BaseLogEntry, CriticalLogEntry, DebugLogEntry, SpiritualLogEntry]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _startup_entries() -> List[LogEntry]:
    """The four entries logged when monitoring starts."""
    return [
        BaseLogEntry.create(
            _now(),
            "INFO",
            "System monitoring started.",
            "Watchtower",
            "system",
            96,
        ),
        CriticalLogEntry(
            base=BaseLogEntry.create(
                _now(),
                "ERROR",
                "Fatal exception in core module.",
                "Gate",
                "runtime",
                3,
            ),
            system_error_code="E-CORE-001",
        ),
        DebugLogEntry(
            base=BaseLogEntry.create(
                _now(),
                "DEBUG",
                "Memory check successful.",
                "Tablet",
                "testing",
                87,
            ),
            context="Memory state was stable after allocator patch.",
        ),
        SpiritualLogEntry(
            base=BaseLogEntry.create(
                _now(),
                "INFO",
                "A shift was felt in system alignment.",
                "NovaAI",
                "spiritual",
                91,
            ),
            scripture_reference="Isaiah 58:12",
            prophetic_weight=3,
        ),
    ]


def monitor_and_log(root: Optional[Union[str, Path]] = None) -> List[LogEntry]:
    """Route the start-up entries to the logs under *root*; return them in order."""
    entries = _startup_entries()
    for entry in entries:
        route(entry, root)
    return entries


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Boot the system and start Watchtower monitoring."""
    parser = argparse.ArgumentParser(prog="omnicode", description="Start Watchtower monitoring.")
    parser.add_argument(
        "--log-root",
        default=None,
        help="directory that holds the scrolls/ and json/ log folders",
    )
    args = parser.parse_args(argv)

    print("🌀 OmniCode System Booting...")
    monitor_and_log(args.log_root)
    print("✅ Watchtower initialized and monitoring.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())