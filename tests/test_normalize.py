"""Tests for duration normalization"""

from decimal import Decimal
from fractions import Fraction

import pytest

from duration_format import (
    Duration,
    DurationError,
    NonIntegerValueError,
    NormalizeDurationError,
    NormalizeNonIntegerDurationError,
    normalize_duration,
)

BOUNDS = {
    "milliseconds": 1000,
    "seconds": 60,
    "minutes": 60,
    "hours": 24,
    "days": 365,
}


def test_normalize_epoch_milliseconds() -> None:
    """Test milliseconds carried through every present unit"""
    duration = Duration.from_milliseconds(1733140034227)

    assert normalize_duration(duration) == Duration(
        years=54, days=349, hours=11, minutes=47, seconds=14, milliseconds=227
    )


@pytest.mark.parametrize(
    "milliseconds",
    [0, 1, 999, 1_000, 59_999, 60_000, 3_599_999, 86_400_000, 31_535_999_999, 31_536_000_000, 1733140034227],
)
def test_normalize_keeps_total_and_bounds(milliseconds: int) -> None:
    """Test carrying keeps the total and every unit below years within bounds"""
    normalized = normalize_duration(Duration.from_milliseconds(milliseconds))

    for field, bound in BOUNDS.items():
        assert 0 <= getattr(normalized, field) < bound
    assert normalized.years >= 0

    total = (
        (((normalized.years * 365 + normalized.days) * 24 + normalized.hours) * 60 + normalized.minutes) * 60
        + normalized.seconds
    ) * 1000 + normalized.milliseconds
    assert total == milliseconds
    assert normalized.total_milliseconds == milliseconds


@pytest.mark.parametrize(
    "duration",
    [
        Duration(years=54, days=349, hours=11, minutes=47, seconds=14, milliseconds=227),
        Duration(years=0, days=0, hours=0, minutes=0, seconds=0, milliseconds=0),
        Duration(days=364, hours=23, minutes=59),
        Duration(hours=1, seconds=100),
        Duration(minutes=5000),
    ],
)
def test_normalize_is_idempotent(duration: Duration) -> None:
    """Test normalizing a normalized duration changes nothing"""
    once = normalize_duration(duration)

    assert normalize_duration(once) == once


def test_normalize_empty_duration() -> None:
    """Test an empty duration stays empty"""
    assert normalize_duration(Duration()) == Duration()


def test_normalize_milliseconds_only() -> None:
    """Test a single present unit absorbs everything"""
    assert normalize_duration(Duration(milliseconds=123_456_789)) == Duration(milliseconds=123_456_789)


def test_normalize_folds_absent_units_down() -> None:
    """Test an absent unit between present ones is folded into the smaller one"""
    assert normalize_duration(Duration(hours=0, seconds=3_700)) == Duration(hours=1, seconds=100)


def test_normalize_folds_absent_years_into_days() -> None:
    """Test days keep whole years when years are absent"""
    assert normalize_duration(Duration(days=400)) == Duration(days=400)
    assert normalize_duration(Duration(days=400, hours=30)) == Duration(days=401, hours=6)


def test_normalize_carries_into_present_years() -> None:
    """Test days overflow into present years"""
    assert normalize_duration(Duration(years=0, days=400)) == Duration(years=1, days=35)


def test_normalize_keeps_absent_units_absent() -> None:
    """Test absent units are never set and present units never unset"""
    normalized = normalize_duration(Duration(days=0, minutes=0, milliseconds=90_061_001))

    assert normalized == Duration(days=1, minutes=61, milliseconds=1_001)
    assert normalized.years is None
    assert normalized.hours is None
    assert normalized.seconds is None


def test_normalize_returns_new_duration() -> None:
    """Test the given duration is left untouched"""
    duration = Duration(seconds=0, milliseconds=1_500)

    normalized = normalize_duration(duration)

    assert normalized == Duration(seconds=1, milliseconds=500)
    assert duration == Duration(seconds=0, milliseconds=1_500)
    assert normalized is not duration


def test_normalize_accepts_mapping() -> None:
    """Test a plain dict is accepted"""
    assert normalize_duration({"minutes": 0, "seconds": 125}) == Duration(minutes=2, seconds=5)


def test_normalize_accepts_integral_floats() -> None:
    """Test floats holding whole numbers are treated as integers"""
    normalized = normalize_duration(Duration(seconds=0.0, milliseconds=2_000.0))

    assert normalized == Duration(seconds=2, milliseconds=0)
    assert isinstance(normalized.seconds, int)


def test_normalized_method() -> None:
    """Test Duration.normalized() delegates to normalize_duration()"""
    assert Duration(minutes=0, seconds=90).normalized() == Duration(minutes=1, seconds=30)


@pytest.mark.parametrize("value", [1.5, 0.001, True, "12"])
def test_normalize_rejects_non_integers(value: object) -> None:
    """Test non-integer values raise a normalize error"""
    with pytest.raises(NormalizeNonIntegerDurationError) as exc_info:
        normalize_duration(Duration(minutes=1, seconds=value))

    error = exc_info.value
    assert isinstance(error, NormalizeDurationError)
    assert isinstance(error, NonIntegerValueError)
    assert isinstance(error, DurationError)
    assert error.field == "seconds"
    assert error.value == value
    assert error.operation == "normalize"


def test_normalize_rejects_unknown_input() -> None:
    """Test inputs that are not durations are rejected"""
    with pytest.raises(DurationError):
        normalize_duration(1_000)  # type: ignore[arg-type]


def test_normalize_accepts_integral_fractions_and_decimals() -> None:
    """Test Fractions and Decimals holding whole numbers are treated as integers"""
    normalized = normalize_duration(Duration(minutes=Fraction(3, 1), seconds=Decimal("90")))

    assert normalized == Duration(minutes=4, seconds=30)


@pytest.mark.parametrize("value", [Fraction(1, 2), Decimal("1.5")])
def test_normalize_rejects_fractional_fractions_and_decimals(value: object) -> None:
    """Test Fractions and Decimals that are not whole numbers are rejected"""
    with pytest.raises(NormalizeNonIntegerDurationError):
        normalize_duration(Duration(seconds=value))
