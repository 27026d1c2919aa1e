"""
Calendar -- Leap rule, validation and Persian/Gregorian conversion.

Responsibility:
    The arithmetic core of the package. Decides whether a (year, month,
    day) triple is a legal Persian date and converts between the Persian
    and proleptic Gregorian calendars.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O. Imported by
    ``persian_calendar.domain.persian_date``.

Invariants enforced:
    - The 33-year arithmetic leap rule in ``is_leap_year`` is the only
      leap rule. Validation and conversion both derive from it.
    - Both conversion directions go through one day ordinal (ordinal 1 is
      Gregorian 0001-01-01, the same count ``date.toordinal`` uses), so
      ``gregorian_to_persian(*persian_to_gregorian(...))`` is the identity.

Failure modes:
    - YearOutOfRangeError, InvalidMonthError, DayOutOfRangeError,
      NotLeapYearError from ``validate``.
    - InvalidArgumentError from ``is_leap_year`` for negative years.
    - TypeError for non-int years and days.

Conversion functions assume already-valid input and have no error path.
"""

from __future__ import annotations

from datetime import MAXYEAR, date

from persian_calendar.domain.months import Month
from persian_calendar.exceptions import (
    DayOutOfRangeError,
    InvalidArgumentError,
    InvalidMonthError,
    NotLeapYearError,
    YearOutOfRangeError,
)
from persian_calendar.logging_config import get_logger

logger = get_logger("domain.calendar")

MIN_YEAR = 0

# Last Persian year lying entirely inside datetime's Gregorian range.
# Persian 9378-01-01 is 9999-03-21 and that year ends after 9999-12-31.
MAX_YEAR = MAXYEAR - 622

# Ordinal of Persian 0001-01-01 (proleptic Gregorian 0622-03-21).
PERSIAN_EPOCH = 226895

# Julian Day Number of the day before ordinal 1.
JULIAN_DAY_OFFSET = 1721425

# Days in one 33-year Persian cycle (33 * 365 + 8).
_DAYS_PER_CYCLE = 12053

_PERSIAN_DAYS_BEFORE_MONTH = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336)

# Index 0 unused; months are 1-indexed.
_GREGORIAN_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_GREGORIAN_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461


# ---------------------------------------------------------------------------
# Leap rule
# ---------------------------------------------------------------------------


def is_leap_year(year: int) -> bool:
    """
    Return True if ``year`` is a leap year in the Persian calendar.

    Uses the 33-year arithmetic cycle: eight leap years per cycle.

    Raises:
        InvalidArgumentError: If ``year`` is negative.
    """
    _require_int("year", year)
    if year < 0:
        raise InvalidArgumentError("year", year, "must be a non-negative integer")
    return ((25 * year) + 11) % 33 < 8


def days_in_month(year: int, month: Month) -> int:
    """Return the length of ``month`` in ``year``, counting Esfand 30 in leap years."""
    if month is Month.ESFAND and is_leap_year(year):
        return 30
    return month.days


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def resolve_month(month: Month | int | None) -> Month:
    """Return ``month`` as a Month member, resolving ints by ordinal."""
    if isinstance(month, Month):
        return month
    return Month.of(month)


def validate(year: int, month: Month | int | None, day: int) -> Month:
    """
    Check that (year, month, day) is a legal Persian date.

    Rules are applied in order: year range, month, then day range. Esfand
    30 in a non-leap year is reported as NotLeapYearError rather than the
    generic DayOutOfRangeError.

    Returns:
        The resolved Month member.

    Raises:
        YearOutOfRangeError, InvalidMonthError, DayOutOfRangeError,
        NotLeapYearError.
    """
    _require_int("year", year)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise YearOutOfRangeError(year, MIN_YEAR, MAX_YEAR)

    resolved = resolve_month(month)

    _require_int("day", day)
    max_day = days_in_month(year, resolved)
    if not 1 <= day <= max_day:
        if resolved is Month.ESFAND and day == 30:
            raise NotLeapYearError(year)
        raise DayOutOfRangeError(year, resolved.name, day, max_day)

    return resolved


def is_valid(year: int, month: Month | int | None, day: int) -> bool:
    """Return True if (year, month, day) passes ``validate``."""
    try:
        validate(year, month, day)
    except (InvalidMonthError, YearOutOfRangeError, DayOutOfRangeError) as e:
        logger.debug(
            "persian_date_rejected",
            extra={"year": year, "day": day, "reason_code": e.code},
        )
        return False
    return True


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Ordinals
# ---------------------------------------------------------------------------


def persian_to_ordinal(year: int, month: Month | int, day: int) -> int:
    """Day ordinal of a valid Persian date (ordinal 1 == Gregorian 0001-01-01)."""
    number = month.number if isinstance(month, Month) else month
    return (
        PERSIAN_EPOCH
        - 1
        + 365 * (year - 1)
        + (8 * year + 21) // 33
        + _PERSIAN_DAYS_BEFORE_MONTH[number - 1]
        + day
    )


def ordinal_to_persian(ordinal: int) -> tuple[int, int, int]:
    """Inverse of ``persian_to_ordinal``; returns (year, month number, day)."""
    days_since_epoch = ordinal - PERSIAN_EPOCH
    # Exact for the 33-year cycle: Farvardin 1 of year y satisfies
    # 33 * offset + 3 == 12053 * (y - 1) + r with 0 <= r <= 32.
    year = 1 + (33 * days_since_epoch + 3) // _DAYS_PER_CYCLE
    farvardin_1 = 365 * (year - 1) + (8 * year + 21) // 33
    day_of_year = days_since_epoch - farvardin_1  # 0-based

    if day_of_year < 186:
        month_index = day_of_year // 31
    else:
        month_index = 6 + (day_of_year - 186) // 30

    day = day_of_year - _PERSIAN_DAYS_BEFORE_MONTH[month_index] + 1
    return year, month_index + 1, day


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_to_ordinal(year: int, month: int, day: int) -> int:
    """Day ordinal of a proleptic Gregorian date."""
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    days_before_month = _GREGORIAN_DAYS_BEFORE_MONTH[month]
    if month > 2 and is_gregorian_leap_year(year):
        days_before_month += 1
    return days_before_year + days_before_month + day


def ordinal_to_gregorian(ordinal: int) -> tuple[int, int, int]:
    """Inverse of ``gregorian_to_ordinal``; returns (year, month, day)."""
    n = ordinal - 1
    n400, n = divmod(n, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    # Last day of a leap year closing a 4-year or 400-year cycle.
    if n1 == 4 or n100 == 4:
        return year - 1, 12, 31

    leap = n1 == 3 and (n4 != 24 or n100 == 3)
    month = 1
    while True:
        length = _GREGORIAN_DAYS_IN_MONTH[month]
        if month == 2 and leap:
            length += 1
        if n < length:
            return year, month, n + 1
        n -= length
        month += 1


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def persian_to_gregorian(year: int, month: Month | int, day: int) -> date:
    """
    Convert a validated Persian date to its Gregorian equivalent.

    Preconditions:
        - (year, month, day) already passed ``validate``.
    """
    return date(*ordinal_to_gregorian(persian_to_ordinal(year, month, day)))


def gregorian_to_persian(year: int, month: int, day: int) -> tuple[int, int, int]:
    """
    Convert a well-formed Gregorian date to a Persian (year, month, day).

    Validity of the Gregorian triple is the caller's responsibility. The
    result may fall outside [MIN_YEAR, MAX_YEAR]; range checks belong to
    the PersianDate constructor.
    """
    return ordinal_to_persian(gregorian_to_ordinal(year, month, day))
