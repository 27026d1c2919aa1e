"""
Configuration Loader (``persian_calendar_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into the typed, frozen
``persian_calendar_config.schema`` dataclasses.  Callers should go through
``persian_calendar_config.get_active_config()`` instead.

Invariants enforced
-------------------
* Unknown option values raise ``ValueError`` with a descriptive message;
  no silent fallback for a value that is present but wrong.
* Every parsed object is a frozen dataclass from ``schema.py``.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Invalid date format  -> ``ValueError`` from ``date.fromisoformat``.
"""

from __future__ import annotations

import hashlib
import json
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from persian_calendar_config.schema import (
    CLOCK_SOURCES,
    LOG_LEVELS,
    MONTH_NAME_STYLES,
    CalendarSettings,
    ClockSettings,
    DisplaySettings,
    LoggingSettings,
)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_date(value: Any) -> date:
    """
    Parse a date from YAML (string or date object).

    Raises:
        ValueError: if ``value`` is not a valid date representation.
    """
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise ValueError(f"Cannot parse date from {value!r}")


def parse_logging(data: dict[str, Any]) -> LoggingSettings:
    """Parse LoggingSettings from a dict."""
    level = str(data.get("level", LoggingSettings.level)).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {LOG_LEVELS}")
    return LoggingSettings(level=level)


def parse_display(data: dict[str, Any]) -> DisplaySettings:
    """Parse DisplaySettings from a dict."""
    month_names = data.get("month_names", DisplaySettings.month_names)
    if month_names not in MONTH_NAME_STYLES:
        raise ValueError(
            f"Unknown month name style {month_names!r}; expected one of {MONTH_NAME_STYLES}"
        )
    return DisplaySettings(month_names=month_names)


def parse_clock(data: dict[str, Any]) -> ClockSettings:
    """Parse ClockSettings from a dict. A fixed clock requires ``fixed_date``."""
    source = data.get("source", ClockSettings.source)
    if source not in CLOCK_SOURCES:
        raise ValueError(f"Unknown clock source {source!r}; expected one of {CLOCK_SOURCES}")
    fixed_date = parse_date(data["fixed_date"]) if data.get("fixed_date") else None
    if source == "fixed" and fixed_date is None:
        raise ValueError("Clock source 'fixed' requires a fixed_date")
    return ClockSettings(source=source, fixed_date=fixed_date)


def parse_settings(data: dict[str, Any]) -> CalendarSettings:
    """
    Parse a complete CalendarSettings from a YAML document.

    Missing sections take their schema defaults.
    """
    return CalendarSettings(
        logging=parse_logging(data.get("logging") or {}),
        display=parse_display(data.get("display") or {}),
        clock=parse_clock(data.get("clock") or {}),
        checksum=compute_checksum(data),
    )


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Postconditions:
        - Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
