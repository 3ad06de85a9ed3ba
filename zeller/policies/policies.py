"""
policies/policies.py

Calendar rules for the zeller package.

Encapsulates:
- Required-parameter checks
- Month and day-of-month ranges
- Thirty-day months and February length (Gregorian leap rule, always)
- Option checks: calendar type, ISO flag, day-name table

Checks run in a fixed order; the first failure wins.
"""

from zeller.core.errors import InvalidParameterError, MissingParameterError
from zeller.infra.constants import CALENDAR_TYPES, THIRTY_DAY_MONTHS


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


class Policies:
    """Stateless rule set; `validate` applies every rule in order."""

    # ----- Leap years -----
    @staticmethod
    def is_leap_year(year):
        """Gregorian rule: every 4th year, except centuries not divisible by 400."""
        return year % 4 == 0 and year % 100 != 0 or year % 400 == 0

    # ----- Required -----
    @staticmethod
    def check_required(day_of_month, month, year):
        if day_of_month is None:
            raise MissingParameterError("day_of_month", "The day of the month is required.")
        if month is None:
            raise MissingParameterError("month", "The month is required.")
        if year is None:
            raise MissingParameterError("year", "The year is required.")

    # ----- Ranges -----
    @staticmethod
    def check_month(month):
        if not _is_int(month) or month < 1 or month > 12:
            raise InvalidParameterError(
                "month",
                f"The month must be between 1 (January) and 12 (December). {month!r} is invalid.",
                month,
            )

    @staticmethod
    def check_day_of_month(day_of_month):
        if not _is_int(day_of_month) or day_of_month < 1 or day_of_month > 31:
            raise InvalidParameterError(
                "day_of_month",
                f"The day of the month must be between 1 and 31. {day_of_month!r} is invalid.",
                day_of_month,
            )

    @staticmethod
    def check_month_length(day_of_month, month):
        if month in THIRTY_DAY_MONTHS and day_of_month > 30:
            raise InvalidParameterError(
                "day_of_month",
                f"Month {month} does not have day {day_of_month}.",
                day_of_month,
            )

    @classmethod
    def check_february(cls, day_of_month, month, year):
        if not _is_int(year):
            raise InvalidParameterError("year", f"The year must be an integer. {year!r} is invalid.", year)
        if month != 2:
            return
        last_day = 29 if cls.is_leap_year(year) else 28
        if day_of_month > last_day:
            raise InvalidParameterError(
                "day_of_month",
                f"Month 2 (February) does not have day {day_of_month} this year ({year}).",
                day_of_month,
            )

    # ----- Options -----
    @staticmethod
    def check_calendar_type(calendar_type):
        if calendar_type is None:
            return
        if not isinstance(calendar_type, str) or calendar_type.lower() not in CALENDAR_TYPES:
            raise InvalidParameterError(
                "calendar_type",
                f'Calendar type must be "Gregorian" or "Julian". {calendar_type!r} is invalid.',
                calendar_type,
            )

    @staticmethod
    def check_iso(iso):
        if iso is not None and not isinstance(iso, bool):
            raise InvalidParameterError("iso", f"ISO must be True or False. {iso!r} is invalid.", iso)

    @staticmethod
    def check_day_names(day_names):
        if day_names is None:
            return
        if not isinstance(day_names, (list, tuple)) or len(day_names) != 7:
            raise InvalidParameterError(
                "day_names",
                "Day names must be a sequence of 7 strings from Saturday to Friday. "
                f"{day_names!r} is invalid.",
                day_names,
            )
        for i, name in enumerate(day_names):
            if not isinstance(name, str):
                raise InvalidParameterError(
                    "day_names",
                    "Day names must be a sequence of 7 strings from Saturday to Friday. "
                    f"{name!r} at position {i} is invalid.",
                    day_names,
                )

    # ----- All rules -----
    @classmethod
    def validate(cls, day_of_month, month, year, iso=None, calendar_type=None, day_names=None):
        """Raise the first MissingParameterError/InvalidParameterError that applies."""
        cls.check_required(day_of_month, month, year)
        cls.check_month(month)
        cls.check_day_of_month(day_of_month)
        cls.check_month_length(day_of_month, month)
        cls.check_february(day_of_month, month, year)
        cls.check_calendar_type(calendar_type)
        cls.check_iso(iso)
        cls.check_day_names(day_names)
