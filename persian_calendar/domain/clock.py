"""
Clock -- Deterministic "today" abstraction.

Responsibility:
    Provides an injectable clock interface so that domain code never calls
    ``date.today()`` directly. The clock is the external collaborator that
    supplies the current Gregorian date to ``PersianDate.now()``.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O (except SystemClock,
    which is the one sanctioned I/O boundary for time).

Failure modes:
    - None. Clocks return an already-valid Gregorian ``date``.
"""

from abc import ABC, abstractmethod
from datetime import date, timedelta


class Clock(ABC):
    """
    Abstract clock interface.

    Contract:
        Anything that needs the current date receives a Clock instance.
        Domain code must NEVER call ``date.today()`` directly.

    Guarantees:
        - ``today()`` returns a proleptic Gregorian ``date``.
    """

    @abstractmethod
    def today(self) -> date:
        """Get the current Gregorian date."""
        ...


class SystemClock(Clock):
    """
    Production clock that reads the system date in the local time zone.

    Non-goals:
        Not suitable for deterministic replay or testing.
    """

    def today(self) -> date:
        return date.today()


class DeterministicClock(Clock):
    """
    Test clock with a controlled date.

    Guarantees:
        - ``today()`` returns the same value on repeated calls until
          ``advance()`` or ``set_date()`` is called.
    """

    def __init__(self, fixed_date: date | None = None):
        """
        Initialize with optional fixed date.

        Args:
            fixed_date: If provided, clock always returns this date.
                        If None, uses 2024-03-20 (Persian 1403-01-01).
        """
        self._fixed_date = fixed_date or date(2024, 3, 20)
        self._advance_days = 0

    def today(self) -> date:
        return self._fixed_date + timedelta(days=self._advance_days)

    def set_date(self, value: date) -> None:
        """Set the clock to a specific date."""
        self._fixed_date = value
        self._advance_days = 0

    def advance(self, days: int = 1) -> None:
        """Advance the clock by the specified number of days."""
        self._advance_days += days
