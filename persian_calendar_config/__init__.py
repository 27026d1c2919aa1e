"""
persian_calendar_config -- single public entrypoint for runtime configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  No other component may read configuration
    files or environment variables directly.  Returns a frozen
    ``CalendarSettings``.

Architecture position:
    Configuration -- YAML-driven settings.  This package sits above
    ``persian_calendar``.  The kernel MUST NEVER import from
    ``persian_calendar_config``; bridges in this package translate
    settings into kernel objects.

Failure modes:
    - ``FileNotFoundError`` -- the requested configuration file is missing.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ValueError`` -- an option holds an unknown value.
"""

from __future__ import annotations

import logging
from pathlib import Path

from persian_calendar_config.loader import load_yaml_file, parse_settings
from persian_calendar_config.schema import CalendarSettings

_logger = logging.getLogger("persian_calendar.config")

# Packaged defaults
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"


def get_active_config(config_path: Path | None = None) -> CalendarSettings:
    """The ONLY public configuration entrypoint.

    Guarantees:
        - The returned ``CalendarSettings`` passed loader validation.
        - A ``PERSIAN_CALENDAR_CONFIG_TRACE`` log entry is emitted on every
          successful call.

    Non-goals:
        - No caching across calls; callers hold the returned settings.

    Args:
        config_path: Override path to a YAML file. Defaults to the
            packaged defaults.yaml.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If an option is invalid.
    """
    path = config_path or _DEFAULT_CONFIG_PATH
    settings = parse_settings(load_yaml_file(path))

    _logger.info(
        "PERSIAN_CALENDAR_CONFIG_TRACE",
        extra={
            "trace_type": "PERSIAN_CALENDAR_CONFIG_TRACE",
            "config_path": str(path),
            "checksum": settings.checksum,
            "log_level": settings.logging.level,
            "month_names": settings.display.month_names,
            "clock_source": settings.clock.source,
        },
    )

    return settings


__all__ = ["CalendarSettings", "get_active_config"]
