"""
core/errors.py

Structured validation errors for compute_weekday.

Every error carries:
  kind    -> "MissingParameter" or "InvalidParameter"
  field   -> name of the offending argument
  value   -> the offending value (None for missing parameters)
  message -> human-readable description
"""

from zeller.infra.constants import INVALID_PARAMETER, MISSING_PARAMETER, USAGE


class WeekdayError(ValueError):
    """Base class for weekday computation failures."""

    kind = None

    def __init__(self, field, message, value=None):
        self.field = field
        self.message = message
        self.value = value
        super().__init__(f"{self.kind}: {message}\nFormat: {USAGE}")


class MissingParameterError(WeekdayError):
    """A required argument (day_of_month, month, year) was not supplied."""

    kind = MISSING_PARAMETER


class InvalidParameterError(WeekdayError):
    """A supplied argument is outside its domain."""

    kind = INVALID_PARAMETER
