"""
core/congruence.py

WeekdayCalculator: Zeller's congruence for the proleptic Gregorian and
Julian calendars.
- Validates arguments (see policies.Policies)
- Fills defaults for absent options
- Computes the congruence remainder h (0 = Saturday ... 6 = Friday)
- Returns a day name from the table, or the ISO weekday (1 = Monday ... 7 = Sunday)

See https://en.wikipedia.org/wiki/Zeller%27s_congruence
"""

from zeller.infra.constants import DEFAULT_DAY_NAMES, GREGORIAN
from zeller.policies.policies import Policies


class WeekdayCalculator:
    """Pure weekday computation; holds only its default day-name table."""

    def __init__(self, day_names=None, policies=None):
        self.policies = policies if policies else Policies()
        if day_names is not None:
            self.policies.check_day_names(day_names)
        self.day_names = tuple(day_names) if day_names is not None else DEFAULT_DAY_NAMES

    @staticmethod
    def remainder(day_of_month, month, year, calendar_type=GREGORIAN):
        """
        Congruence remainder h for an already validated date.
        January and February keep their month number and take the previous year.
        """
        q = day_of_month
        m = month
        y = year if month >= 3 else year - 1

        if calendar_type.lower() == GREGORIAN:
            return (q + (26 * (m + 1)) // 10 + y + y // 4 + 6 * (y // 100) + y // 400) % 7
        return (q + (26 * (m + 1)) // 10 + y + y // 4 + 5) % 7

    @staticmethod
    def to_iso(h):
        """Shift a Saturday-based remainder to ISO numbering (Monday = 1)."""
        return ((h + 5) % 7) + 1

    def compute(self, day_of_month=None, month=None, year=None, iso=None, calendar_type=None, day_names=None):
        """
        Day of the week for the given date.

        Returns the name at index h of `day_names` (or the calculator's table),
        or the ISO weekday number when `iso` is True. Raises
        MissingParameterError / InvalidParameterError on bad input.
        """
        self.policies.validate(day_of_month, month, year, iso, calendar_type, day_names)

        if calendar_type is None:
            calendar_type = GREGORIAN
        if iso is None:
            iso = False

        h = self.remainder(day_of_month, month, year, calendar_type)

        if iso:
            return self.to_iso(h)
        names = day_names if day_names is not None else self.day_names
        return names[h]


_DEFAULT_CALCULATOR = WeekdayCalculator()


def compute_weekday(day_of_month=None, month=None, year=None, iso=None, calendar_type=None, day_names=None):
    """
    Compute the day of the week with Zeller's congruence.

    compute_weekday(5, 7, 2010)                    -> "Monday"
    compute_weekday(5, 7, 2010, True)              -> 1
    compute_weekday(5, 7, 2010, False, "julian")   -> "Sunday"
    """
    return _DEFAULT_CALCULATOR.compute(day_of_month, month, year, iso, calendar_type, day_names)
