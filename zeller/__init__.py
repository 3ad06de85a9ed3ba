"""
zeller: day of the week for Julian and Gregorian calendar dates
via Zeller's congruence.

    from zeller import compute_weekday, weekday_from_string
    compute_weekday(5, 7, 2010)           # "Monday"
    weekday_from_string("7/5/2010", True) # 1
"""

from .core.congruence import WeekdayCalculator, compute_weekday
from .core.errors import InvalidParameterError, MissingParameterError, WeekdayError
from .utils.dateparse import DateParser, weekday_from_string

__version__ = "1.0.0"

__all__ = [
    "compute_weekday",
    "weekday_from_string",
    "WeekdayCalculator",
    "DateParser",
    "WeekdayError",
    "MissingParameterError",
    "InvalidParameterError",
]
