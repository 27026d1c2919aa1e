"""
Pytest fixtures for the Persian calendar test suite.

Provides:
- Logging isolation between tests
- A deterministic clock
- Common dates used across modules
"""

from datetime import date

import pytest

from persian_calendar.domain.clock import DeterministicClock
from persian_calendar.domain.persian_date import PersianDate
from persian_calendar.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def deterministic_clock() -> DeterministicClock:
    """Clock pinned to 2017-06-05 (Persian 1396-03-15)."""
    return DeterministicClock(date(2017, 6, 5))


@pytest.fixture
def khordad_15() -> PersianDate:
    return PersianDate.of(1396, 3, 15)


@pytest.fixture
def shahrivar_10() -> PersianDate:
    return PersianDate.of(1396, 6, 10)
