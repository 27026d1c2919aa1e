"""
PersianDate -- Immutable, self-validating Persian calendar date.

Responsibility:
    The value type of the package: a day in the Persian (Solar Hijri)
    calendar with year, month and day fields and a cached Gregorian
    equivalent.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O. The only
    environment access is through an injected Clock in ``now()``.

Invariants enforced:
    - Every live instance passed ``calendar.validate`` at construction.
    - The cached Gregorian date is exactly ``persian_to_gregorian`` of the
      Persian fields; it is computed once and never recomputed.
    - Ordering follows the cached Gregorian date; equality and hashing
      follow the Persian fields.

Failure modes:
    - YearOutOfRangeError, InvalidMonthError, DayOutOfRangeError,
      NotLeapYearError on construction with an invalid triple.
    - NullReferenceError when None is passed to a comparison predicate.
    - ConversionInvariantError if Gregorian-to-Persian conversion yields an
      invalid month or day (a converter defect, never user input).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from persian_calendar.domain import calendar
from persian_calendar.domain.clock import Clock, SystemClock
from persian_calendar.domain.months import Month
from persian_calendar.exceptions import (
    ConversionInvariantError,
    InvalidDateError,
    NullReferenceError,
    YearOutOfRangeError,
)
from persian_calendar.logging_config import get_logger

logger = get_logger("domain.persian_date")


@dataclass(frozen=True, slots=True)
class PersianDate:
    """
    A Persian date without time of day.

    Contract:
        Built from (year, month, day) where ``month`` is a Month member or
        its number 1..12. Validation and conversion happen once, here;
        afterwards the object is inert data.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - ``month`` is always a Month member, even when built from an int
        - Safe to share between threads

    Non-goals:
        - No time of day, time zones, or string parsing
    """

    year: int
    month: Month
    day: int
    _gregorian: date = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            month = calendar.validate(self.year, self.month, self.day)
        except InvalidDateError as e:
            logger.debug(
                "persian_date_rejected",
                extra={
                    "year": self.year,
                    "month": str(self.month),
                    "day": self.day,
                    "reason_code": e.code,
                },
            )
            raise
        object.__setattr__(self, "month", month)
        object.__setattr__(
            self,
            "_gregorian",
            calendar.persian_to_gregorian(self.year, month, self.day),
        )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: Month | int, day: int) -> PersianDate:
        """
        Factory method for creating a PersianDate.

        ``month`` may be a Month member or its number, where 1 is
        Farvardin and 12 is Esfand.

        Raises:
            YearOutOfRangeError: If year is outside [0, MAX_YEAR].
            InvalidMonthError: If month is None or its number is outside 1..12.
            DayOutOfRangeError: If day is outside the month's range.
            NotLeapYearError: For Esfand 30 in a non-leap year.
        """
        return cls(year, month, day)

    @classmethod
    def from_gregorian(cls, value: date) -> PersianDate:
        """
        Return the Persian date equivalent to a Gregorian ``date``.

        Raises:
            NullReferenceError: If ``value`` is None.
            YearOutOfRangeError: If the Persian year falls outside
                [0, MAX_YEAR].
            ConversionInvariantError: If the converted month or day is
                invalid.
        """
        if value is None:
            raise NullReferenceError("gregorian date")
        persian = calendar.gregorian_to_persian(value.year, value.month, value.day)
        try:
            return cls(*persian)
        except YearOutOfRangeError:
            raise
        except InvalidDateError as e:
            logger.critical(
                "conversion_invariant_violation",
                extra={"gregorian": value.isoformat(), "reason_code": e.code},
            )
            raise ConversionInvariantError(value.isoformat(), persian, str(e)) from e

    @classmethod
    def now(cls, clock: Clock | None = None) -> PersianDate:
        """Return today's Persian date as reported by ``clock`` (system clock by default)."""
        clock = clock or SystemClock()
        return cls.from_gregorian(clock.today())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def month_value(self) -> int:
        """Month-of-year, from 1 to 12."""
        return self.month.number

    def month_name(self, style: str = "persian") -> str:
        """Month name in Persian script (``"persian"``) or transliterated (``"english"``)."""
        if style == "persian":
            return self.month.persian_name
        if style == "english":
            return self.month.english_name
        raise ValueError(f"Unknown month name style: {style!r}")

    def is_leap_year(self) -> bool:
        return calendar.is_leap_year(self.year)

    @staticmethod
    def leap_year(year: int) -> bool:
        """
        Return True if ``year`` is a leap year in the Persian calendar.

        Raises:
            InvalidArgumentError: If ``year`` is negative.
        """
        return calendar.is_leap_year(year)

    def length_of_month(self) -> int:
        return calendar.days_in_month(self.year, self.month)

    def length_of_year(self) -> int:
        return calendar.days_in_year(self.year)

    def to_gregorian(self) -> date:
        """Return the cached Gregorian equivalent."""
        return self._gregorian

    def toordinal(self) -> int:
        """Day ordinal shared with ``date.toordinal`` (0001-01-01 Gregorian is 1)."""
        return self._gregorian.toordinal()

    def julian_day(self) -> int:
        """Julian Day Number of this date (at noon)."""
        return self.toordinal() + calendar.JULIAN_DAY_OFFSET

    def replace(
        self,
        year: int | None = None,
        month: Month | int | None = None,
        day: int | None = None,
    ) -> PersianDate:
        """Return a new, validated PersianDate with the given fields replaced."""
        return PersianDate(
            self.year if year is None else year,
            self.month if month is None else month,
            self.day if day is None else day,
        )

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: PersianDate) -> int:
        """
        Compare by Gregorian equivalent: negative if earlier, zero if the
        same day, positive if later.

        Raises:
            NullReferenceError: If ``other`` is None.
        """
        if other is None:
            raise NullReferenceError("date to compare")
        if not isinstance(other, PersianDate):
            raise TypeError(f"Cannot compare PersianDate with {type(other).__name__}")
        return (self._gregorian > other._gregorian) - (self._gregorian < other._gregorian)

    def is_equal(self, other: PersianDate) -> bool:
        return self.compare_to(other) == 0

    def is_before(self, other: PersianDate) -> bool:
        """
        True if this date is strictly before ``other``.

            a = PersianDate.of(1396, 3, 15)
            b = PersianDate.of(1396, 6, 10)
            a.is_before(b) -> True
            a.is_before(a) -> False
            b.is_before(a) -> False
        """
        return self.compare_to(other) < 0

    def is_after(self, other: PersianDate) -> bool:
        """
        True if this date is strictly after ``other``.

            a = PersianDate.of(1396, 3, 15)
            b = PersianDate.of(1396, 6, 10)
            a.is_after(b) -> False
            a.is_after(a) -> False
            b.is_after(a) -> True
        """
        return self.compare_to(other) > 0

    def __lt__(self, other: PersianDate) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._gregorian < other._gregorian

    def __le__(self, other: PersianDate) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._gregorian <= other._gregorian

    def __gt__(self, other: PersianDate) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._gregorian > other._gregorian

    def __ge__(self, other: PersianDate) -> bool:
        if not isinstance(other, PersianDate):
            return NotImplemented
        return self._gregorian >= other._gregorian

    def __hash__(self) -> int:
        return hash((self.year, self.month.number, self.day))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def isoformat(self) -> str:
        """Ten-character ``YYYY-MM-DD`` form, each field zero-padded."""
        return f"{self.year:04d}-{self.month.number:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def __repr__(self) -> str:
        return f"PersianDate({self.year}, {self.month.number}, {self.day})"
