"""Tests for the Month table."""

import pytest

from persian_calendar.domain.months import Month
from persian_calendar.exceptions import InvalidMonthError


class TestMonthTable:
    """The table holds exactly one member per ordinal 1..12."""

    def test_twelve_members_in_order(self):
        assert [m.number for m in Month] == list(range(1, 13))

    def test_day_counts(self):
        assert [m.days for m in Month] == [31] * 6 + [30] * 5 + [29]

    def test_names(self):
        assert Month.FARVARDIN.persian_name == "فروردین"
        assert Month.ESFAND.persian_name == "اسفند"
        assert Month.DEY.english_name == "Dey"

    def test_total_days_in_common_year(self):
        assert sum(m.days for m in Month) == 365

    def test_str_and_repr(self):
        assert str(Month.MEHR) == "MEHR"
        assert repr(Month.MEHR) == "Month.MEHR"


class TestMonthOf:
    """Tests for Month.of."""

    @pytest.mark.parametrize("number", range(1, 13))
    def test_resolves_every_ordinal(self, number):
        assert Month.of(number).number == number

    def test_known_members(self):
        assert Month.of(1) is Month.FARVARDIN
        assert Month.of(12) is Month.ESFAND

    @pytest.mark.parametrize("number", [0, 13, -1, 100])
    def test_out_of_range_rejected(self, number):
        with pytest.raises(InvalidMonthError) as exc_info:
            Month.of(number)
        assert exc_info.value.code == "INVALID_MONTH"
        assert exc_info.value.month == number

    def test_none_rejected(self):
        with pytest.raises(InvalidMonthError, match="must not be None"):
            Month.of(None)

    def test_wrong_type_rejected(self):
        with pytest.raises(TypeError):
            Month.of("3")
        with pytest.raises(TypeError):
            Month.of(True)
