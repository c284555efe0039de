"""Log entry records: the base schema and its specialised forms."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from omnicode.severity import SeverityBase10


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _check_byte(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")
    return value


@dataclass
class BaseLogEntry:
    """The universal structure every log entry shares."""

    timestamp: str
    level: str
    message: str
    source: str
    category: Optional[str] = None
    severity: Optional[SeverityBase10] = None

    @classmethod
    def create(
        cls,
        timestamp: str,
        level: str,
        message: str,
        source: str,
        category: Optional[str],
        alignment_score: int,
    ) -> "BaseLogEntry":
        """Build an entry whose severity is derived from *alignment_score*."""
        return cls(
            timestamp=timestamp,
            level=level,
            message=message,
            source=source,
            category=category,
            severity=SeverityBase10.derive_from(alignment_score),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready mapping of the entry."""
        return {
            "timestamp": self.timestamp,
            "level": self.level,
            "message": self.message,
            "source": self.source,
            "category": self.category,
            "severity": self.severity.value if self.severity is not None else None,
        }


@dataclass
class CriticalLogEntry:
    """Entry for fatal system errors or unrecoverable faults."""

    base: BaseLogEntry
    system_error_code: Optional[str] = None

    @classmethod
    def create(
        cls,
        message: str,
        source: str,
        category: Optional[str],
        error_code: Optional[str],
        score: int,
    ) -> "CriticalLogEntry":
        """Build an ERROR-level entry stamped with the current UTC time."""
        base = BaseLogEntry.create(_now(), "ERROR", message, source, category, score)
        return cls(base=base, system_error_code=error_code)

    def escalate(self) -> SeverityBase10:
        """Critical entries always escalate to the fatal level."""
        return SeverityBase10.FATAL

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready mapping of the entry."""
        return {"base": self.base.to_dict(), "system_error_code": self.system_error_code}


@dataclass
class DebugLogEntry:
    """Entry for deep debugging and internal traces."""

    base: BaseLogEntry
    context: Optional[str] = None

    @classmethod
    def create(
        cls,
        message: str,
        source: str,
        category: Optional[str],
        context: Optional[str],
        score: int,
    ) -> "DebugLogEntry":
        """Build a DEBUG-level entry stamped with the current UTC time."""
        base = BaseLogEntry.create(_now(), "DEBUG", message, source, category, score)
        return cls(base=base, context=context)

    def verbosity(self) -> str:
        """Verbosity of debug output."""
        return "low"

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready mapping of the entry."""
        return {"base": self.base.to_dict(), "context": self.context}


@dataclass
class SpiritualLogEntry:
    """Entry for spiritually significant events."""

    base: BaseLogEntry
    scripture_reference: Optional[str] = None
    prophetic_weight: int = 0

    def __post_init__(self) -> None:
        _check_byte(self.prophetic_weight, "prophetic_weight")

    @classmethod
    def create(
        cls,
        message: str,
        source: str,
        category: Optional[str],
        verse: Optional[str],
        weight: int,
        score: int,
    ) -> "SpiritualLogEntry":
        """Build an INFO-level entry stamped with the current UTC time."""
        base = BaseLogEntry.create(_now(), "INFO", message, source, category, score)
        return cls(base=base, scripture_reference=verse, prophetic_weight=weight)

    def quote(self) -> str:
        """The scripture reference, or a placeholder when there is none."""
        if self.scripture_reference is None:
            return "🕊️ No scripture provided."
        return self.scripture_reference

    def is_highly_weighted(self) -> bool:
        """True when the prophetic weight is 8 or more."""
        return self.prophetic_weight >= 8

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready mapping of the entry."""
        return {
            "base": self.base.to_dict(),
            "scripture_reference": self.scripture_reference,
            "prophetic_weight": self.prophetic_weight,
        }