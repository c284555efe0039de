"""Severity scales that turn a 0-100 alignment score into a qualitative level.

Every scale degrades from 100 downwards. Scores are unsigned bytes (0-255);
anything above 100 falls through to the lowest level of the scale.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple, TypeVar

_E = TypeVar("_E", bound=Enum)


def _check_score(score: int) -> int:
    """Return *score* if it is a valid unsigned byte, otherwise raise."""
    if isinstance(score, bool) or not isinstance(score, int):
        raise TypeError(f"score must be an int, not {type(score).__name__}")
    if not 0 <= score <= 255:
        raise ValueError(f"score must be between 0 and 255, got {score}")
    return score


def _classify(score: int, bands: Sequence[Tuple[int, _E]], fallback: _E) -> _E:
    """Pick the first band whose lower bound *score* reaches, within 0-100."""
    _check_score(score)
    if score <= 100:
        for low, member in bands:
            if score >= low:
                return member
    return fallback


class SeverityBase10(str, Enum):
    """Standard scale with ten levels of ten points each."""

    PERFECT = "Perfect"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    CAUTION = "Caution"
    RISKY = "Risky"
    DEGRADED = "Degraded"
    FAILING = "Failing"
    CRITICAL = "Critical"
    FATAL = "Fatal"

    @classmethod
    def derive_from(cls, score: int) -> "SeverityBase10":
        """Map an alignment score onto this scale."""
        bands = [
            (91, cls.PERFECT),
            (81, cls.EXCELLENT),
            (71, cls.GOOD),
            (61, cls.FAIR),
            (51, cls.CAUTION),
            (41, cls.RISKY),
            (31, cls.DEGRADED),
            (21, cls.FAILING),
            (11, cls.CRITICAL),
        ]
        return _classify(score, bands, cls.FATAL)


class SeverityBase5(str, Enum):
    """Precision scale with twenty levels of five points each."""

    PERFECT = "Perfect"
    NEAR_PERFECT = "NearPerfect"
    EXCELLENT = "Excellent"
    STRONG = "Strong"
    STABLE = "Stable"
    BALANCED = "Balanced"
    WATCHFUL = "Watchful"
    DRIFTING = "Drifting"
    WAVERING = "Wavering"
    EXPOSED = "Exposed"
    WARNING = "Warning"
    TENSE = "Tense"
    UNSTABLE = "Unstable"
    FRAGILE = "Fragile"
    SLIPPING = "Slipping"
    DANGEROUS = "Dangerous"
    SEVERE = "Severe"
    COLLAPSING = "Collapsing"
    CRITICAL = "Critical"
    FATAL = "Fatal"

    @classmethod
    def derive_from(cls, score: int) -> "SeverityBase5":
        """Map an alignment score onto this scale."""
        bands = [
            (96, cls.PERFECT),
            (91, cls.NEAR_PERFECT),
            (86, cls.EXCELLENT),
            (81, cls.STRONG),
            (76, cls.STABLE),
            (71, cls.BALANCED),
            (66, cls.WATCHFUL),
            (61, cls.DRIFTING),
            (56, cls.WAVERING),
            (51, cls.EXPOSED),
            (46, cls.WARNING),
            (41, cls.TENSE),
            (36, cls.UNSTABLE),
            (31, cls.FRAGILE),
            (26, cls.SLIPPING),
            (21, cls.DANGEROUS),
            (16, cls.SEVERE),
            (11, cls.COLLAPSING),
            (6, cls.CRITICAL),
        ]
        return _classify(score, bands, cls.FATAL)


class SeverityBase20(str, Enum):
    """Milestone scale with five levels of twenty points each."""

    PERFECT = "Perfect"
    STABLE = "Stable"
    UNSTABLE = "Unstable"
    CRITICAL = "Critical"
    FATAL = "Fatal"

    @classmethod
    def derive_from(cls, score: int) -> "SeverityBase20":
        """Map an alignment score onto this scale."""
        bands = [
            (81, cls.PERFECT),
            (61, cls.STABLE),
            (41, cls.UNSTABLE),
            (21, cls.CRITICAL),
        ]
        return _classify(score, bands, cls.FATAL)


class SeverityBase25(str, Enum):
    """Anchor scale with four levels of twenty-five points each."""

    ANCHOR_PERFECT = "AnchorPerfect"
    ANCHOR_STABLE = "AnchorStable"
    ANCHOR_FAILING = "AnchorFailing"
    ANCHOR_FATAL = "AnchorFatal"

    @classmethod
    def derive_from(cls, score: int) -> "SeverityBase25":
        """Map an alignment score onto this scale."""
        bands = [
            (76, cls.ANCHOR_PERFECT),
            (51, cls.ANCHOR_STABLE),
            (26, cls.ANCHOR_FAILING),
        ]
        return _classify(score, bands, cls.ANCHOR_FATAL)


class SeverityBase50(str, Enum):
    """Pass/fail scale: pass above 50, warning down to 1, fail at 0."""

    SUCCESS = "Pass"
    WARNING = "Warning"
    FAIL = "Fail"
    PASS = SUCCESS

    @classmethod
    def derive_from(cls, score: int) -> "SeverityBase50":
        """Map an alignment score onto this scale."""
        bands = [
            (51, cls.SUCCESS),
            (1, cls.WARNING),
        ]
        return _classify(score, bands, cls.FAIL)