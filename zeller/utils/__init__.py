#zeller\utils\__init__.py

from .dateparse import DateParser, weekday_from_string

__all__ = [
    "DateParser",
    "weekday_from_string",
]
