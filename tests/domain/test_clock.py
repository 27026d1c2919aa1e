"""Tests for the clock collaborator."""

from datetime import date

import pytest

from persian_calendar.domain.clock import Clock, DeterministicClock, SystemClock


class TestDeterministicClock:
    """The test clock only moves when told to."""

    def test_fixed_date(self):
        clock = DeterministicClock(date(2017, 6, 5))
        assert clock.today() == date(2017, 6, 5)
        assert clock.today() == date(2017, 6, 5)

    def test_default_date(self):
        assert DeterministicClock().today() == date(2024, 3, 20)

    def test_advance(self):
        clock = DeterministicClock(date(2024, 2, 28))
        clock.advance()
        assert clock.today() == date(2024, 2, 29)
        clock.advance(days=2)
        assert clock.today() == date(2024, 3, 2)

    def test_set_date_resets_advance(self):
        clock = DeterministicClock(date(2024, 1, 1))
        clock.advance(days=10)
        clock.set_date(date(2020, 5, 5))
        assert clock.today() == date(2020, 5, 5)


class TestSystemClock:
    """The production clock reads the local date."""

    def test_today(self):
        before = date.today()
        value = SystemClock().today()
        after = date.today()
        assert value in (before, after)

    def test_clock_is_abstract(self):
        with pytest.raises(TypeError):
            Clock()
