"""
Persian Calendar Kernel

An immutable Persian (Solar Hijri) date value with:
- 33-year arithmetic leap rule
- Validation with a typed error per failure cause
- Lossless conversion to and from the proleptic Gregorian calendar
- Injectable clock for the current date
"""

from persian_calendar.domain import (
    MAX_YEAR,
    MIN_YEAR,
    Clock,
    DeterministicClock,
    Month,
    PersianDate,
    SystemClock,
    is_leap_year,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "Clock",
    "DeterministicClock",
    "Month",
    "PersianDate",
    "SystemClock",
    "is_leap_year",
]
