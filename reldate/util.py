"""Utility constants for reldate.

Time unit constants represent durations in milliseconds.
Months and years are fixed averages of the Gregorian calendar, not
calendar-aware spans.
"""

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1_000
MINUTE = 60_000
HOUR = 3_600_000
DAY = 86_400_000
MONTH = 2_630_016_000  # 30.44 days
YEAR = 31_557_600_000  # 365.25 days
