"""Kinds of log entry, grouped into broad categories."""

from __future__ import annotations

from enum import Enum


class LogType(str, Enum):
    """The context and intent of a log entry."""

    # Info: expected flow
    HEARTBEAT = "Heartbeat"
    MILESTONE = "Milestone"
    SYSTEM = "System"
    TEST = "Test"
    HEALTH = "Health"
    PROGRESS = "Progress"
    META = "Meta"

    # Warning: drift or instability
    ALIGNMENT = "Alignment"
    WATCHER = "Watcher"
    UPDATE = "Update"
    TRACE = "Trace"

    # Error: break or halt needed
    RUNTIME = "Runtime"
    SYSTEM_FAILURE = "SystemFailure"
    DEPENDENCY = "Dependency"
    CONFIG = "Config"

    # Debug: developer-level detail
    DEBUG = "Debug"
    INTERNAL = "Internal"

    # Critical: immediate escalation
    FATAL = "Fatal"
    PROPHETIC = "Prophetic"
    SECURITY = "Security"
    OVERRIDE = "Override"

    # Spiritual and relational
    COVENANT = "Covenant"
    ANOMALY = "Anomaly"
    WATCH = "Watch"
    INSIGHT = "Insight"
    CORRECTION = "Correction"

    def category(self) -> str:
        """Name of the group this log type belongs to."""
        return _CATEGORIES[self]


_GROUPS = {
    "Info": (
        LogType.HEARTBEAT,
        LogType.MILESTONE,
        LogType.SYSTEM,
        LogType.TEST,
        LogType.HEALTH,
        LogType.PROGRESS,
        LogType.META,
    ),
    "Warning": (LogType.ALIGNMENT, LogType.WATCHER, LogType.UPDATE, LogType.TRACE),
    "Error": (LogType.RUNTIME, LogType.SYSTEM_FAILURE, LogType.DEPENDENCY, LogType.CONFIG),
    "Debug": (LogType.DEBUG, LogType.INTERNAL),
    "Critical": (LogType.FATAL, LogType.PROPHETIC, LogType.SECURITY, LogType.OVERRIDE),
    "Spiritual": (
        LogType.COVENANT,
        LogType.ANOMALY,
        LogType.WATCH,
        LogType.INSIGHT,
        LogType.CORRECTION,
    ),
}

_CATEGORIES = {member: name for name, members in _GROUPS.items() for member in members}