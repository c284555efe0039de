"""Evaluate alignment scores against each severity scale."""

from __future__ import annotations

from omnicode.severity import (
    SeverityBase5,
    SeverityBase10,
    SeverityBase20,
    SeverityBase25,
    SeverityBase50,
)


def evaluate_base10(score: int) -> SeverityBase10:
    """Standard ten-level scale."""
    return SeverityBase10.derive_from(score)


def evaluate_base5(score: int) -> SeverityBase5:
    """Precision twenty-level scale."""
    return SeverityBase5.derive_from(score)


def evaluate_base20(score: int) -> SeverityBase20:
    """Milestone five-level scale."""
    return SeverityBase20.derive_from(score)


def evaluate_base25(score: int) -> SeverityBase25:
    """Anchor four-level scale."""
    return SeverityBase25.derive_from(score)


def evaluate_base50(score: int) -> SeverityBase50:
    """Strict pass/fail: pass from 51 to 100, fail otherwise."""
    if SeverityBase50.derive_from(score) is SeverityBase50.PASS:
        return SeverityBase50.PASS
    return SeverityBase50.FAIL