"""Ordered time units used to describe an interval's magnitude."""

from enum import Enum
from functools import total_ordering

from reldate.util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, YEAR


@total_ordering
class TimeUnit(Enum):
    """A unit of time with a fixed size in milliseconds.

    Members compare by size, so ``TimeUnit.YEARS > TimeUnit.DAYS``.
    """

    MILLISECONDS = (MILLISECOND, "millisecond")
    SECONDS = (SECOND, "second")
    MINUTES = (MINUTE, "minute")
    HOURS = (HOUR, "hour")
    DAYS = (DAY, "day")
    MONTHS = (MONTH, "month")
    YEARS = (YEAR, "year")

    def __init__(self, millis: int, singular: str):
        self.millis: int = millis
        self.singular: str = singular

    @property
    def plural(self) -> str:
        return f"{self.singular}s"

    def noun(self, count: int) -> str:
        """Singular noun for a count of exactly one, plural otherwise."""
        return self.singular if count == 1 else self.plural

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.millis < other.millis


# Largest first
_DESCENDING: tuple[TimeUnit, ...] = tuple(
    sorted(TimeUnit, key=lambda unit: unit.millis, reverse=True)
)


def most_significant(magnitude: int) -> TimeUnit:
    """Return the coarsest unit whose size does not exceed ``magnitude``.

    Args:
        magnitude: Non-negative interval length in milliseconds

    Returns:
        The first unit, scanning from years down to milliseconds, that fits
        the magnitude. Magnitudes below one millisecond fall back to
        milliseconds.

    Raises:
        ValueError: If magnitude is negative

    Example:
        >>> most_significant(90 * 60_000)
        <TimeUnit.HOURS: (3600000, 'hour')>
    """
    if magnitude < 0:
        raise ValueError(
            f"magnitude must be non-negative, got {magnitude}\n"
            f"Hint: pass abs(duration) and pick the template from its sign"
        )
    for unit in _DESCENDING:
        if unit.millis <= magnitude:
            return unit
    return TimeUnit.MILLISECONDS
