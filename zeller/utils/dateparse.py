#zeller\utils\dateparse.py
"""
Date-string adapter implemented as a class.
- DateParser.components(text, dayfirst) -> (day, month, year)
- weekday_from_string(text, ...) -> compute_weekday on the parsed date
"""

from dateutil import parser as dateparser

from zeller.core.congruence import compute_weekday
from zeller.core.errors import InvalidParameterError
from zeller.infra.logger import LoggerFactory

log = LoggerFactory.get_logger("zeller.dateparse")


class DateParser:
    """Free-form date text -> day/month/year via dateutil."""

    @staticmethod
    def components(text, dayfirst=False):
        """Return (day_of_month, month, year); month is 1-indexed."""
        if not isinstance(text, str):
            raise InvalidParameterError("date", f"The date must be a string. {text!r} is invalid.", text)
        try:
            dt = dateparser.parse(text, dayfirst=dayfirst)
        except (ValueError, OverflowError) as e:
            raise InvalidParameterError("date", f"Could not parse date {text!r}: {e}", text) from e
        log.debug("Parsed %r -> %04d-%02d-%02d", text, dt.year, dt.month, dt.day)
        return dt.day, dt.month, dt.year


def weekday_from_string(text, iso=None, calendar_type=None, day_names=None, dayfirst=False):
    """
    Given a date string, return which day of the week it is.

    "7/5/2010" -> "Monday" (month first unless dayfirst=True).
    Options are forwarded to compute_weekday unchanged.
    """
    day_of_month, month, year = DateParser.components(text, dayfirst=dayfirst)
    return compute_weekday(day_of_month, month, year, iso, calendar_type, day_names)
