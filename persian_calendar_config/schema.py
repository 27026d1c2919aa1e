"""
CalendarSettings schema.

Typed, frozen form of the YAML configuration. YAML documents are parsed
into these types by the loader and handed to callers by
``get_active_config()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

MONTH_NAME_STYLES = ("persian", "english")
CLOCK_SOURCES = ("system", "fixed")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingSettings:
    """Level applied to the persian_calendar logger hierarchy."""

    level: str = "WARNING"


@dataclass(frozen=True)
class DisplaySettings:
    """How month names are rendered by the bridges."""

    month_names: str = "persian"  # persian | english


@dataclass(frozen=True)
class ClockSettings:
    """Which clock backs ``PersianDate.now()``."""

    source: str = "system"  # system | fixed
    fixed_date: date | None = None  # Gregorian; required when source == fixed


@dataclass(frozen=True)
class CalendarSettings:
    """The complete runtime configuration."""

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    clock: ClockSettings = field(default_factory=ClockSettings)
    checksum: str = ""
