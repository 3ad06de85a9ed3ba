#zeller\infra\__init__.py

from .constants import (CALENDAR_TYPES, CONSTANTS, DEFAULT_DAY_NAMES, GREGORIAN,
                        INVALID_PARAMETER, ISO_DAY_NAMES, JULIAN, MISSING_PARAMETER,
                        THIRTY_DAY_MONTHS, USAGE)
from .logger import LoggerFactory
from .settings import LogSettings, RunSettings

__all__ = [
    "LoggerFactory",
    "RunSettings",
    "LogSettings",
    "CONSTANTS",
    "USAGE",
    "DEFAULT_DAY_NAMES",
    "ISO_DAY_NAMES",
    "GREGORIAN",
    "JULIAN",
    "CALENDAR_TYPES",
    "THIRTY_DAY_MONTHS",
    "MISSING_PARAMETER",
    "INVALID_PARAMETER",
]
