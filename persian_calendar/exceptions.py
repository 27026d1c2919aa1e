"""
Typed Exception Hierarchy for the Persian calendar kernel.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from PersianCalendarError:

    PersianCalendarError (base)
    |
    +-- InvalidDateError
    |   +-- YearOutOfRangeError
    |   +-- InvalidMonthError
    |   +-- DayOutOfRangeError
    |       +-- NotLeapYearError
    |
    +-- InvalidArgumentError
    |
    +-- NullReferenceError
    |
    +-- ConversionInvariantError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                           | When Raised
----------------|--------------------------------|----------------------------------
Date            | YEAR_OUT_OF_RANGE              | Year outside [0, MAX_YEAR]
                | INVALID_MONTH                  | Month not in 1..12, or None
                | DAY_OUT_OF_RANGE               | Day outside the month's range
                | NOT_LEAP_YEAR                  | Esfand 30 in a non-leap year
----------------|--------------------------------|----------------------------------
Arguments       | INVALID_ARGUMENT               | Negative year to the leap query
                | NULL_REFERENCE                 | None passed to a comparison
----------------|--------------------------------|----------------------------------
Conversion      | CONVERSION_INVARIANT_VIOLATION | Converter produced an invalid
                |                                | Persian triple (internal defect)

===============================================================================
HANDLING PATTERNS
===============================================================================

    try:
        d = PersianDate.of(year, 12, 30)
    except NotLeapYearError as e:
        notify_user(f"{e.year} has no Esfand 30")
    except InvalidDateError as e:
        return {"error": e.code, "year": e.year}

NotLeapYearError subclasses DayOutOfRangeError, so a generic day-range
handler still sees it, while a caller that cares can catch it first.

All validation errors are raised synchronously at construction. None are
retryable: the same input always fails the same way.
"""


class PersianCalendarError(Exception):
    """
    Base exception for all Persian calendar errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "PERSIAN_CALENDAR_ERROR"


# Date validation exceptions


class InvalidDateError(PersianCalendarError):
    """Base exception for a (year, month, day) triple that is not a legal date."""

    code: str = "INVALID_DATE"


class YearOutOfRangeError(InvalidDateError):
    """Year lies outside the supported range."""

    code: str = "YEAR_OUT_OF_RANGE"

    def __init__(self, year: int, min_year: int, max_year: int):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(
            f"Year is out of range: '{year}' (expected {min_year}..{max_year})"
        )


class InvalidMonthError(InvalidDateError):
    """Month number outside 1..12, or a missing month."""

    code: str = "INVALID_MONTH"

    def __init__(self, month: object):
        self.month = month
        if month is None:
            message = "Month must not be None"
        else:
            message = f"Invalid month number: '{month}'"
        super().__init__(message)


class DayOutOfRangeError(InvalidDateError):
    """Day lies outside the valid range of its month for the given year."""

    code: str = "DAY_OUT_OF_RANGE"

    def __init__(
        self,
        year: int,
        month: str,
        day: int,
        max_day: int,
        message: str | None = None,
    ):
        self.year = year
        self.month = month
        self.day = day
        self.max_day = max_day
        super().__init__(
            message or f"Invalid date '{month} {day}': day must be in 1..{max_day}"
        )


class NotLeapYearError(DayOutOfRangeError):
    """
    Esfand 30 requested in a year that is not a leap year.

    Reported instead of the generic DayOutOfRangeError because it names
    the actionable cause.
    """

    code: str = "NOT_LEAP_YEAR"

    def __init__(self, year: int):
        super().__init__(
            year=year,
            month="ESFAND",
            day=30,
            max_day=29,
            message=f"Invalid date 'ESFAND 30' as '{year}' is not a leap year",
        )


# Argument exceptions


class InvalidArgumentError(PersianCalendarError):
    """An argument is outside the domain of the operation."""

    code: str = "INVALID_ARGUMENT"

    def __init__(self, argument: str, value: object, reason: str):
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(f"{argument}: '{value}' {reason}")


class NullReferenceError(PersianCalendarError):
    """None was passed where a value is required."""

    code: str = "NULL_REFERENCE"

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must not be None")


# Conversion exceptions


class ConversionInvariantError(PersianCalendarError):
    """
    Gregorian-to-Persian conversion produced a triple that fails validation.

    This is a defect in the converter, never a user input problem.
    """

    code: str = "CONVERSION_INVARIANT_VIOLATION"

    def __init__(self, gregorian: str, persian: tuple[int, int, int], reason: str):
        self.gregorian = gregorian
        self.persian = persian
        self.reason = reason
        super().__init__(
            f"Converting {gregorian} produced invalid Persian date "
            f"{persian[0]:04d}-{persian[1]:02d}-{persian[2]:02d}: {reason}"
        )
