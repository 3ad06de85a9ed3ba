#zeller\infra\settings.py
"""
infra/settings.py

Settings derived from environment variables.

RunSettings (CLI options handed to weekday_from_string):
- ZELLER_ISO: 1/true/yes/y/on or 0/false/no/n/off (default: unset)
- ZELLER_CALENDAR: "gregorian" or "julian" (default: unset)
- ZELLER_DAY_NAMES: comma-separated names, Saturday first (default: unset)
- ZELLER_DAYFIRST: read "05/07/2010" as 5 July (default: false)

LogSettings (read by infra.logger.LoggerFactory):
- ZELLER_LOGLEVEL: logging level name (default: INFO)
- ZELLER_LOGFILE: optional log file path

Option values are handed to compute_weekday as-is; validation stays in the core.
"""

import logging
import os

from zeller.patterns.patterns import FLAG_FALSE, FLAG_TRUE, LIST_SEP


def _env_str(name):
    """Stripped env value, or None when unset or blank."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_flag(name):
    """True/False for a recognized flag; None if unset; raw string if unrecognized."""
    raw = _env_str(name)
    if raw is None:
        return None
    if FLAG_TRUE.match(raw):
        return True
    if FLAG_FALSE.match(raw):
        return False
    return raw


def _env_list(name):
    raw = _env_str(name)
    return LIST_SEP.split(raw) if raw is not None else None


class RunSettings:
    """Optional compute_weekday arguments plus date-parsing preferences."""

    def __init__(self, iso=None, calendar_type=None, day_names=None, dayfirst=False):
        self.iso = iso
        self.calendar_type = calendar_type
        self.day_names = day_names
        self.dayfirst = dayfirst

    @classmethod
    def from_env(cls):
        return cls(
            iso=_env_flag("ZELLER_ISO"),
            calendar_type=_env_str("ZELLER_CALENDAR"),
            day_names=_env_list("ZELLER_DAY_NAMES"),
            dayfirst=_env_flag("ZELLER_DAYFIRST") is True,
        )

    def as_kwargs(self):
        """Keyword arguments for weekday_from_string."""
        return {
            "iso": self.iso,
            "calendar_type": self.calendar_type,
            "day_names": self.day_names,
            "dayfirst": self.dayfirst,
        }


class LogSettings:
    """Level and optional log file for LoggerFactory."""

    def __init__(self, level_name="INFO", logfile=None):
        self.level_name = level_name.upper()
        self.logfile = logfile

    @classmethod
    def from_env(cls):
        return cls(
            level_name=_env_str("ZELLER_LOGLEVEL") or "INFO",
            logfile=_env_str("ZELLER_LOGFILE"),
        )

    @property
    def level(self):
        # Unknown names fall back to INFO
        level = logging.getLevelName(self.level_name)
        return level if isinstance(level, int) else logging.INFO
