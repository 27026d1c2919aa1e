"""
Tests for Persian date validation.

Rules apply in order: year range, month, day range. Esfand 30 in a
non-leap year is reported as NotLeapYearError.
"""

import pytest

from persian_calendar.domain.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    days_in_month,
    is_leap_year,
    is_valid,
    validate,
)
from persian_calendar.domain.months import Month
from persian_calendar.exceptions import (
    DayOutOfRangeError,
    InvalidDateError,
    InvalidMonthError,
    NotLeapYearError,
    YearOutOfRangeError,
)


class TestYearRange:
    """Tests for the year bound."""

    def test_bounds(self):
        assert MIN_YEAR == 0
        assert MAX_YEAR == 9377

    def test_boundaries_accepted(self):
        assert validate(MIN_YEAR, 1, 1) is Month.FARVARDIN
        assert validate(MAX_YEAR, 12, 29) is Month.ESFAND

    def test_negative_year_rejected(self):
        with pytest.raises(YearOutOfRangeError) as exc_info:
            validate(-1, 1, 1)
        assert exc_info.value.code == "YEAR_OUT_OF_RANGE"
        assert exc_info.value.year == -1

    def test_year_after_max_rejected(self):
        with pytest.raises(YearOutOfRangeError):
            validate(MAX_YEAR + 1, 1, 1)

    def test_year_checked_before_month(self):
        with pytest.raises(YearOutOfRangeError):
            validate(-1, 13, 40)


class TestMonth:
    """Tests for month resolution during validation."""

    def test_month_13_rejected(self):
        with pytest.raises(InvalidMonthError):
            validate(1396, 13, 1)

    def test_month_zero_rejected(self):
        with pytest.raises(InvalidMonthError):
            validate(1396, 0, 1)

    def test_none_month_rejected(self):
        with pytest.raises(InvalidMonthError):
            validate(1396, None, 1)

    def test_month_checked_before_day(self):
        with pytest.raises(InvalidMonthError):
            validate(1396, 13, 40)

    def test_enum_and_int_resolve_identically(self):
        assert validate(1396, 3, 15) is validate(1396, Month.KHORDAD, 15)


class TestDayRange:
    """Tests for the day bound."""

    @pytest.mark.parametrize("month", list(Month))
    def test_day_32_rejected_in_every_month(self, month):
        with pytest.raises(DayOutOfRangeError) as exc_info:
            validate(1399, month, 32)
        assert type(exc_info.value) is DayOutOfRangeError
        assert exc_info.value.code == "DAY_OUT_OF_RANGE"

    @pytest.mark.parametrize("month", list(Month))
    def test_day_zero_rejected(self, month):
        with pytest.raises(DayOutOfRangeError):
            validate(1399, month, 0)

    def test_day_31_in_30_day_month_rejected(self):
        with pytest.raises(DayOutOfRangeError) as exc_info:
            validate(1396, Month.MEHR, 31)
        assert exc_info.value.max_day == 30
        assert "MEHR 31" in str(exc_info.value)

    def test_last_day_of_each_month_accepted(self):
        for month in Month:
            validate(1396, month, month.days)

    def test_esfand_31_in_leap_year_is_generic_range_error(self):
        with pytest.raises(DayOutOfRangeError) as exc_info:
            validate(1399, Month.ESFAND, 31)
        assert type(exc_info.value) is DayOutOfRangeError


class TestEsfandBoundary:
    """Esfand 30 exists only in leap years."""

    @pytest.mark.parametrize("year", range(1390, 1410))
    def test_esfand_30_valid_iff_leap(self, year):
        if is_leap_year(year):
            assert validate(year, 12, 30) is Month.ESFAND
        else:
            with pytest.raises(NotLeapYearError) as exc_info:
                validate(year, 12, 30)
            assert exc_info.value.code == "NOT_LEAP_YEAR"
            assert exc_info.value.year == year

    def test_not_leap_year_message_names_the_year(self):
        with pytest.raises(NotLeapYearError, match="'1396' is not a leap year"):
            validate(1396, Month.ESFAND, 30)

    def test_not_leap_year_is_a_day_range_error(self):
        assert issubclass(NotLeapYearError, DayOutOfRangeError)
        assert issubclass(NotLeapYearError, InvalidDateError)

    def test_days_in_month(self):
        assert days_in_month(1399, Month.ESFAND) == 30
        assert days_in_month(1400, Month.ESFAND) == 29
        assert days_in_month(1400, Month.FARVARDIN) == 31


class TestIsValid:
    """Tests for the boolean form."""

    def test_valid_and_invalid(self):
        assert is_valid(1396, 3, 15)
        assert not is_valid(-1, 1, 1)
        assert not is_valid(1396, 13, 1)
        assert not is_valid(1396, 1, 32)
        assert not is_valid(1396, 12, 30)

    def test_type_errors_propagate(self):
        with pytest.raises(TypeError):
            is_valid("1396", 1, 1)
        with pytest.raises(TypeError):
            is_valid(1396, 1, 1.5)
