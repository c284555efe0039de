"""Scoring profile tying a log type to a severity level and alignment score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

_SEVERITY_MULTIPLIERS = {
    "Perfect": 100,
    "Excellent": 90,
    "Good": 80,
    "Fair": 70,
    "Caution": 60,
    "Risky": 50,
    "Degraded": 40,
    "Failing": 30,
    "Critical": 20,
    "Fatal": 10,
}


def _base_score(severity_level: str, alignment_score: int) -> int:
    multiplier = _SEVERITY_MULTIPLIERS.get(severity_level, 0)
    return multiplier * alignment_score // 100


@dataclass
class LogTypeScoringProfile:
    """A log type with its severity level, alignment score and derived base score."""

    log_type: str
    severity_level: str
    alignment_score: int
    base_score: int = field(init=False)

    def __post_init__(self) -> None:
        score = self.alignment_score
        if isinstance(score, bool) or not isinstance(score, int):
            raise TypeError(f"alignment_score must be an int, not {type(score).__name__}")
        if not 0 <= score <= 255:
            raise ValueError(f"alignment_score must be between 0 and 255, got {score}")
        self.base_score = _base_score(self.severity_level, score)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready mapping of the profile."""
        return {
            "log_type": self.log_type,
            "severity_level": self.severity_level,
            "alignment_score": self.alignment_score,
            "base_score": self.base_score,
        }