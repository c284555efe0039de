import pytest

from omnicode.severity import (
    SeverityBase5,
    SeverityBase10,
    SeverityBase20,
    SeverityBase25,
    SeverityBase50,
)


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, SeverityBase10.PERFECT),
        (91, SeverityBase10.PERFECT),
        (90, SeverityBase10.EXCELLENT),
        (81, SeverityBase10.EXCELLENT),
        (80, SeverityBase10.GOOD),
        (70, SeverityBase10.FAIR),
        (60, SeverityBase10.CAUTION),
        (50, SeverityBase10.RISKY),
        (40, SeverityBase10.DEGRADED),
        (30, SeverityBase10.FAILING),
        (20, SeverityBase10.CRITICAL),
        (11, SeverityBase10.CRITICAL),
        (10, SeverityBase10.FATAL),
        (0, SeverityBase10.FATAL),
    ],
)
def test_base10_bands(score, expected):
    assert SeverityBase10.derive_from(score) is expected


@pytest.mark.parametrize(
    "score, expected",
    [
        (96, SeverityBase5.PERFECT),
        (95, SeverityBase5.NEAR_PERFECT),
        (86, SeverityBase5.EXCELLENT),
        (85, SeverityBase5.STRONG),
        (76, SeverityBase5.STABLE),
        (75, SeverityBase5.BALANCED),
        (66, SeverityBase5.WATCHFUL),
        (65, SeverityBase5.DRIFTING),
        (56, SeverityBase5.WAVERING),
        (55, SeverityBase5.EXPOSED),
        (46, SeverityBase5.WARNING),
        (45, SeverityBase5.TENSE),
        (36, SeverityBase5.UNSTABLE),
        (35, SeverityBase5.FRAGILE),
        (26, SeverityBase5.SLIPPING),
        (25, SeverityBase5.DANGEROUS),
        (16, SeverityBase5.SEVERE),
        (15, SeverityBase5.COLLAPSING),
        (6, SeverityBase5.CRITICAL),
        (5, SeverityBase5.FATAL),
        (0, SeverityBase5.FATAL),
    ],
)
def test_base5_bands(score, expected):
    assert SeverityBase5.derive_from(score) is expected


@pytest.mark.parametrize(
    "score, expected",
    [
        (81, SeverityBase20.PERFECT),
        (80, SeverityBase20.STABLE),
        (61, SeverityBase20.STABLE),
        (60, SeverityBase20.UNSTABLE),
        (40, SeverityBase20.CRITICAL),
        (21, SeverityBase20.CRITICAL),
        (20, SeverityBase20.FATAL),
    ],
)
def test_base20_bands(score, expected):
    assert SeverityBase20.derive_from(score) is expected


@pytest.mark.parametrize(
    "score, expected",
    [
        (76, SeverityBase25.ANCHOR_PERFECT),
        (75, SeverityBase25.ANCHOR_STABLE),
        (51, SeverityBase25.ANCHOR_STABLE),
        (50, SeverityBase25.ANCHOR_FAILING),
        (26, SeverityBase25.ANCHOR_FAILING),
        (25, SeverityBase25.ANCHOR_FATAL),
    ],
)
def test_base25_bands(score, expected):
    assert SeverityBase25.derive_from(score) is expected


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, SeverityBase50.PASS),
        (51, SeverityBase50.PASS),
        (50, SeverityBase50.WARNING),
        (1, SeverityBase50.WARNING),
        (0, SeverityBase50.FAIL),
    ],
)
def test_base50_bands(score, expected):
    assert SeverityBase50.derive_from(score) is expected


@pytest.mark.parametrize("score", [101, 200, 255])
def test_scores_above_hundred_fall_to_lowest_level(score):
    assert SeverityBase5.derive_from(score) is SeverityBase5.FATAL
    assert SeverityBase10.derive_from(score) is SeverityBase10.FATAL
    assert SeverityBase20.derive_from(score) is SeverityBase20.FATAL
    assert SeverityBase25.derive_from(score) is SeverityBase25.ANCHOR_FATAL
    assert SeverityBase50.derive_from(score) is SeverityBase50.FAIL


def _assert_monotonic(members, positions):
    assert positions == sorted(positions)
    assert positions[0] == 0
    assert positions[-1] == len(members) - 1


SCORES_DOWN = range(100, -1, -1)


def test_severity_never_improves_as_score_drops():
    members5 = list(SeverityBase5)
    _assert_monotonic(
        members5, [members5.index(SeverityBase5.derive_from(s)) for s in SCORES_DOWN]
    )
    members10 = list(SeverityBase10)
    _assert_monotonic(
        members10, [members10.index(SeverityBase10.derive_from(s)) for s in SCORES_DOWN]
    )
    members20 = list(SeverityBase20)
    _assert_monotonic(
        members20, [members20.index(SeverityBase20.derive_from(s)) for s in SCORES_DOWN]
    )
    members25 = list(SeverityBase25)
    _assert_monotonic(
        members25, [members25.index(SeverityBase25.derive_from(s)) for s in SCORES_DOWN]
    )
    members50 = list(SeverityBase50)
    _assert_monotonic(
        members50, [members50.index(SeverityBase50.derive_from(s)) for s in SCORES_DOWN]
    )


@pytest.mark.parametrize("score", [-1, 256])
def test_out_of_range_scores_rejected(score):
    with pytest.raises(ValueError):
        SeverityBase5.derive_from(score)
    with pytest.raises(ValueError):
        SeverityBase10.derive_from(score)
    with pytest.raises(ValueError):
        SeverityBase20.derive_from(score)
    with pytest.raises(ValueError):
        SeverityBase25.derive_from(score)
    with pytest.raises(ValueError):
        SeverityBase50.derive_from(score)


@pytest.mark.parametrize("score", [50.0, "50", True, None])
def test_non_integer_scores_rejected(score):
    with pytest.raises(TypeError):
        SeverityBase10.derive_from(score)


def test_values_are_variant_names():
    assert SeverityBase10("Perfect") is SeverityBase10.PERFECT
    assert SeverityBase5.NEAR_PERFECT.value == "NearPerfect"
    assert SeverityBase25.ANCHOR_FATAL.value == "AnchorFatal"