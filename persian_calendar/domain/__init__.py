"""
Pure domain layer.

This module contains the Persian calendar arithmetic and the PersianDate
value type with NO dependencies on:
- Configuration
- Time/clock (except through an injected Clock)
- I/O

All domain objects are immutable and deterministic.
"""

from persian_calendar.domain.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    gregorian_to_persian,
    is_leap_year,
    is_valid,
    persian_to_gregorian,
    validate,
)
from persian_calendar.domain.clock import Clock, DeterministicClock, SystemClock
from persian_calendar.domain.months import Month
from persian_calendar.domain.persian_date import PersianDate

__all__ = [
    # Value objects
    "Month",
    "PersianDate",
    # Calendar rules
    "MAX_YEAR",
    "MIN_YEAR",
    "is_leap_year",
    "is_valid",
    "validate",
    "persian_to_gregorian",
    "gregorian_to_persian",
    # Clock
    "Clock",
    "SystemClock",
    "DeterministicClock",
]
