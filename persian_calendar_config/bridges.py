"""
Config -> Kernel Bridges.

Functions that turn CalendarSettings into kernel objects. These live in
persian_calendar_config (the producer) because the kernel must NEVER
import persian_calendar_config.

Usage:
    from persian_calendar_config import get_active_config
    from persian_calendar_config.bridges import apply_logging, build_clock

    settings = get_active_config()
    apply_logging(settings)
    today = PersianDate.now(build_clock(settings))
"""

from __future__ import annotations

import logging

from persian_calendar.domain.clock import Clock, DeterministicClock, SystemClock
from persian_calendar.domain.months import Month
from persian_calendar.logging_config import configure_logging
from persian_calendar_config.schema import CalendarSettings


def build_clock(settings: CalendarSettings) -> Clock:
    """Return the clock selected by ``settings.clock``."""
    if settings.clock.source == "fixed":
        return DeterministicClock(settings.clock.fixed_date)
    return SystemClock()


def apply_logging(settings: CalendarSettings, **kwargs) -> None:
    """Configure the persian_calendar logger at the configured level.

    Extra keyword arguments (``stream``, ``handler``) pass through to
    ``configure_logging``.
    """
    configure_logging(level=logging.getLevelName(settings.logging.level), **kwargs)


def month_display_name(month: Month, settings: CalendarSettings) -> str:
    """Name of ``month`` in the configured display style."""
    if settings.display.month_names == "english":
        return month.english_name
    return month.persian_name
