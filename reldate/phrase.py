"""The count-and-unit fragment inserted into a relative time template."""

from dataclasses import dataclass

from reldate.units import TimeUnit, most_significant


@dataclass(frozen=True, kw_only=True)
class MagnitudePhrase:
    count: int
    unit: TimeUnit

    def __post_init__(self) -> None:
        if not isinstance(self.count, int) or isinstance(self.count, bool):
            raise TypeError(
                f"MagnitudePhrase count must be an int, "
                f"got {type(self.count).__name__!r}: {self.count!r}"
            )
        if self.count < 0:
            raise ValueError(
                f"MagnitudePhrase count must be >= 0, got {self.count}"
            )

    @classmethod
    def of(cls, magnitude: int) -> "MagnitudePhrase":
        """Describe a non-negative millisecond magnitude at its coarsest unit.

        Fractional magnitudes are truncated to whole milliseconds.
        """
        magnitude = int(magnitude)
        unit = most_significant(magnitude)
        return cls(count=magnitude // unit.millis, unit=unit)

    def __str__(self) -> str:
        """Human-friendly count and pluralized unit, e.g. "3 days"."""
        return f"{self.count} {self.unit.noun(self.count)}"
