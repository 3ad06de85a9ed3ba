#zeller\infra\constants.py

"""
infra/constants.py

Immutable project-wide constants in a frozen dataclass.
Provides a singleton `CONSTANTS` plus module-level re-exports.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Constants:
    """Immutable container for shared constants (no imports, no side effects)."""
    usage = "compute_weekday(day_of_month, month, year, [iso], [calendar_type], [day_names])"

    # Indexed by congruence remainder: 0 = Saturday ... 6 = Friday
    default_day_names = (
        "Saturday", "Sunday", "Monday", "Tuesday",
        "Wednesday", "Thursday", "Friday",
    )

    # ISO weekday number -> English name
    iso_day_names = {
        1: "Monday", 2: "Tuesday", 3: "Wednesday", 4: "Thursday",
        5: "Friday", 6: "Saturday", 7: "Sunday",
    }

    gregorian = "gregorian"
    julian = "julian"
    calendar_types = ("gregorian", "julian")

    thirty_day_months = (4, 6, 9, 11)

    # Error kinds
    missing_parameter = "MissingParameter"
    invalid_parameter = "InvalidParameter"


# Singleton instance
CONSTANTS = Constants()

# Convenience re-exports
USAGE = CONSTANTS.usage
DEFAULT_DAY_NAMES = CONSTANTS.default_day_names
ISO_DAY_NAMES = CONSTANTS.iso_day_names
GREGORIAN = CONSTANTS.gregorian
JULIAN = CONSTANTS.julian
CALENDAR_TYPES = CONSTANTS.calendar_types
THIRTY_DAY_MONTHS = CONSTANTS.thirty_day_months
MISSING_PARAMETER = CONSTANTS.missing_parameter
INVALID_PARAMETER = CONSTANTS.invalid_parameter
