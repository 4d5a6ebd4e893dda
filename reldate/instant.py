"""Coercion of caller-supplied instants to epoch milliseconds.

An instant may be an ``int``/``float`` count of Unix epoch milliseconds, a
timezone-aware ``datetime``, or a ``date`` (taken as midnight UTC).
"""

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import Literal, TypeAlias

Instant: TypeAlias = int | float | datetime | date

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def _coerce(
    instant: Instant, role: Literal["target", "reference", "given"]
) -> int | float | datetime:
    """Return numbers untouched and datetime/date instants as aware datetimes.

    Raises:
        TypeError: If instant is an unsupported type or a naive datetime
    """
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        return instant
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            raise TypeError(
                f"The {role} instant must be a timezone-aware datetime, "
                f"got naive {instant!r}\n"
                f"Hint: datetime(..., tzinfo=timezone.utc)"
            )
        return instant
    if isinstance(instant, date):
        return datetime.combine(instant, time.min, tzinfo=timezone.utc)
    raise TypeError(
        f"The {role} instant must be int, float, datetime, or date.\n"
        f"Got {type(instant).__name__!r}: {instant!r}\n"
        f"Examples:\n"
        f"  describe(1735689600000, ...)  # int (Unix milliseconds)\n"
        f"  describe(datetime(2025,1,1,tzinfo=timezone.utc), ...)  "
        f"# timezone-aware datetime\n"
        f"  describe(date(2025,1,1), ...)  # date (midnight UTC)"
    )


def _epoch_millis(value: int | float | datetime) -> int | float:
    if isinstance(value, datetime):
        return (value - _EPOCH) / _ONE_MS
    return value


def to_millis(
    instant: Instant, role: Literal["target", "reference", "given"] = "given"
) -> int:
    """Convert an instant to integer Unix epoch milliseconds (floored)."""
    value = _coerce(instant, role)
    if isinstance(value, datetime):
        return (value - _EPOCH) // _ONE_MS
    return math.floor(value)


def timedelta_millis(delta: timedelta) -> int:
    """Signed whole milliseconds in a timedelta, truncated toward zero."""
    millis = abs(delta) // _ONE_MS
    return millis if delta >= timedelta(0) else -millis


def duration_between(target: Instant, reference: Instant) -> int:
    """Signed milliseconds from ``reference`` to ``target``.

    Positive when target lies after reference. Sub-millisecond remainders
    are truncated toward zero, so a fraction of a millisecond never decides
    the direction.
    """
    target_value = _coerce(target, "target")
    reference_value = _coerce(reference, "reference")

    if isinstance(target_value, datetime) and isinstance(reference_value, datetime):
        return timedelta_millis(target_value - reference_value)

    return int(_epoch_millis(target_value) - _epoch_millis(reference_value))
