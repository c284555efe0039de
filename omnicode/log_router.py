"""Route log entries to the scroll and JSON writers."""

from __future__ import annotations

from functools import singledispatch
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

from omnicode.log_entries import BaseLogEntry, CriticalLogEntry, DebugLogEntry, SpiritualLogEntry
from omnicode.log_writer import write_json, write_scroll
from omnicode.severity import SeverityBase10

_T = TypeVar("_T")

_NO_SCRIPTURE = "🕊️ No scripture"


def _debug_str(text: str) -> str:
    """Quote *text* with escapes for quotes, backslashes and control characters."""
    pieces = []
    for char in text:
        if char == "\\":
            pieces.append("\\\\")
        elif char == '"':
            pieces.append('\\"')
        elif char == "\n":
            pieces.append("\\n")
        elif char == "\r":
            pieces.append("\\r")
        elif char == "\t":
            pieces.append("\\t")
        elif char == "\0":
            pieces.append("\\0")
        elif not char.isprintable() and char != " ":
            pieces.append(f"\\u{{{ord(char):x}}}")
        else:
            pieces.append(char)
    return '"' + "".join(pieces) + '"'


def _debug_severity(severity: SeverityBase10) -> str:
    return severity.value


def _debug_option(value: Optional[_T], render: Callable[[_T], str]) -> str:
    return "None" if value is None else f"Some({render(value)})"


@singledispatch
def format_scroll(entry: Any) -> str:
    """Human-readable scroll line for *entry*."""
    raise TypeError(f"cannot route log entry of type {type(entry).__name__}")


@format_scroll.register
def _(entry: BaseLogEntry) -> str:
    severity = _debug_option(entry.severity, _debug_severity)
    return (
        f"[{entry.timestamp}][{entry.level}] from {entry.source} — {entry.message} "
        f"(Severity: {severity})"
    )


@format_scroll.register
def _(entry: CriticalLogEntry) -> str:
    base = entry.base
    code = _debug_option(entry.system_error_code, _debug_str)
    return (
        f"[{base.timestamp}][🔥 CRITICAL] from {base.source} — {base.message} "
        f"(Code: {code}, Severity: {_debug_severity(SeverityBase10.FATAL)})"
    )


@format_scroll.register
def _(entry: DebugLogEntry) -> str:
    base = entry.base
    context = _debug_option(entry.context, _debug_str)
    severity = _debug_option(base.severity, _debug_severity)
    return (
        f"[{base.timestamp}][🪵 DEBUG] from {base.source} — {base.message} "
        f"| Context: {context} (Severity: {severity})"
    )


@format_scroll.register
def _(entry: SpiritualLogEntry) -> str:
    base = entry.base
    verse = entry.scripture_reference if entry.scripture_reference is not None else _NO_SCRIPTURE
    severity = _debug_option(base.severity, _debug_severity)
    return (
        f"[{base.timestamp}][🕊️ SPIRITUAL] from {base.source} — {base.message}\n"
        f"  → Scripture: {verse}\n"
        f"  → Prophetic Weight: {entry.prophetic_weight}\n"
        f"  → Severity: {severity}"
    )


def route(entry: Any, root: Optional[Union[str, Path]] = None) -> str:
    """Write *entry* to the scroll and JSON logs; return the scroll text."""
    scroll = format_scroll(entry)
    write_scroll(scroll, root)
    write_json(entry, root)
    return scroll