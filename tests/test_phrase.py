"""Tests for MagnitudePhrase."""

import pytest

from reldate import MagnitudePhrase, TimeUnit
from reldate.util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR


def test_of_floors_the_count():
    """Test that the count is the floor of magnitude over unit size."""
    phrase = MagnitudePhrase.of(90 * MINUTE)
    assert phrase == MagnitudePhrase(count=1, unit=TimeUnit.HOURS)


def test_of_ignores_smaller_units():
    """Test that 3 days and 2 hours is described in days only."""
    phrase = MagnitudePhrase.of(3 * DAY + 2 * HOUR)
    assert phrase.unit is TimeUnit.DAYS
    assert phrase.count == 3
    assert str(phrase) == "3 days"


def test_of_zero_magnitude():
    """Test that a zero magnitude is zero milliseconds, plural."""
    phrase = MagnitudePhrase.of(0)
    assert phrase == MagnitudePhrase(count=0, unit=TimeUnit.MILLISECONDS)
    assert str(phrase) == "0 milliseconds"


def test_str_singular_and_plural():
    """Test rendering with singular and plural nouns."""
    assert str(MagnitudePhrase(count=1, unit=TimeUnit.YEARS)) == "1 year"
    assert str(MagnitudePhrase(count=7, unit=TimeUnit.YEARS)) == "7 years"
    assert str(MagnitudePhrase(count=1, unit=TimeUnit.MILLISECONDS)) == "1 millisecond"


def test_month_and_year_boundaries():
    """Test that the coarser unit only applies once its threshold is met."""
    assert str(MagnitudePhrase.of(364 * DAY)) == "11 months"
    assert str(MagnitudePhrase.of(YEAR - 1)) == "11 months"
    assert str(MagnitudePhrase.of(YEAR)) == "1 year"
    assert str(MagnitudePhrase.of(MONTH - 1)) == "30 days"
    assert str(MagnitudePhrase.of(MONTH)) == "1 month"
    assert str(MagnitudePhrase.of(59 * SECOND)) == "59 seconds"


def test_negative_count_rejected():
    """Test that MagnitudePhrase validates its count."""
    with pytest.raises(ValueError, match="must be >= 0"):
        MagnitudePhrase(count=-1, unit=TimeUnit.DAYS)


def test_phrase_is_frozen():
    """Test that a phrase cannot be modified after construction."""
    phrase = MagnitudePhrase(count=2, unit=TimeUnit.DAYS)
    with pytest.raises(AttributeError):
        phrase.count = 3  # type: ignore[misc]


@pytest.mark.parametrize("count", [1.0, True, "1"])
def test_non_int_count_rejected(count):
    """Test that the count must be a whole int."""
    with pytest.raises(TypeError, match="must be an int"):
        MagnitudePhrase(count=count, unit=TimeUnit.DAYS)  # type: ignore[arg-type]


def test_of_truncates_fractional_magnitude():
    """Test that a float magnitude still yields an int count."""
    phrase = MagnitudePhrase.of(1.5)  # type: ignore[arg-type]
    assert phrase == MagnitudePhrase(count=1, unit=TimeUnit.MILLISECONDS)
    assert isinstance(phrase.count, int)
    assert str(MagnitudePhrase.of(2.5 * DAY)) == "2 days"  # type: ignore[arg-type]
