from datetime import date, timedelta

import pytest

from zeller import WeekdayCalculator, compute_weekday
from zeller.infra.constants import DEFAULT_DAY_NAMES, ISO_DAY_NAMES
from zeller.policies.policies import Policies

JAPANESE = ["土", "日", "月", "火", "水", "木", "金"]


def _sample_dates(start, count, step_days):
    d = start
    for _ in range(count):
        yield d
        d += timedelta(days=step_days)


def test_returns_day_name():
    assert compute_weekday(5, 7, 2010) == "Monday"


def test_returns_iso_number():
    assert compute_weekday(5, 7, 2010, True) == 1


def test_returns_julian_day_name():
    assert compute_weekday(5, 7, 2010, False, "julian") == "Sunday"


def test_returns_julian_iso_number():
    assert compute_weekday(5, 7, 2010, True, "julian") == 7


def test_returns_localized_day_name():
    assert compute_weekday(5, 7, 2010, False, "gregorian", JAPANESE) == "月"
    assert compute_weekday(5, 7, 2010, None, None, JAPANESE) == "月"


def test_remainder_zero_is_saturday():
    assert WeekdayCalculator.remainder(3, 7, 2010) == 0
    assert compute_weekday(3, 7, 2010) == "Saturday"
    assert compute_weekday(3, 7, 2010, True) == 6


@pytest.mark.parametrize("calendar_type", ["Julian", "JULIAN", "Gregorian", "GREGORIAN"])
def test_calendar_type_is_case_insensitive(calendar_type):
    expected = compute_weekday(5, 7, 2010, False, calendar_type.lower())
    assert compute_weekday(5, 7, 2010, False, calendar_type) == expected


def test_iso_ignores_day_names():
    assert compute_weekday(5, 7, 2010, True, None, JAPANESE) == 1


def test_day_names_accepts_tuple():
    assert compute_weekday(5, 7, 2010, False, None, tuple(JAPANESE)) == "月"


@pytest.mark.parametrize(
    "d",
    [
        date(2010, 3, 1),
        date(2024, 3, 1),
        date(2000, 3, 1),
        date(2023, 12, 31),
        date(1970, 3, 1),
        date(1, 3, 1),
        date(1582, 10, 15),
        date(9999, 12, 31),
    ],
)
def test_gregorian_matches_datetime(d):
    assert compute_weekday(d.day, d.month, d.year, True) == d.isoweekday()
    assert compute_weekday(d.day, d.month, d.year) == d.strftime("%A")


def test_gregorian_matches_datetime_march_to_december():
    for d in _sample_dates(date(1890, 1, 1), 3000, 29):
        if d.month < 3:
            continue
        assert compute_weekday(d.day, d.month, d.year, True) == d.isoweekday(), d


@pytest.mark.parametrize(
    "day, month, year, calendar_type, expected",
    [
        (1, 1, 2010, "gregorian", "Tuesday"),
        (29, 2, 2024, "gregorian", "Sunday"),
        (1, 1, 2010, "julian", "Monday"),
    ],
)
def test_january_and_february_shift_only_the_year(day, month, year, calendar_type, expected):
    assert compute_weekday(day, month, year, False, calendar_type) == expected


def test_january_and_february_follow_the_formula():
    for d in _sample_dates(date(1890, 1, 1), 3000, 17):
        if d.month >= 3:
            continue
        y = d.year - 1
        h = (d.day + 26 * (d.month + 1) // 10 + y + y // 4 + 6 * (y // 100) + y // 400) % 7
        assert WeekdayCalculator.remainder(d.day, d.month, d.year) == h, d
        assert compute_weekday(d.day, d.month, d.year) == DEFAULT_DAY_NAMES[h], d


def test_julian_is_thirteen_days_behind_in_20th_and_21st_centuries():
    # Julian 1900-03-01 .. 2099-12-31, March to December, maps to Gregorian + 13 days
    for d in _sample_dates(date(1900, 3, 1), 2400, 31):
        if d.year >= 2100:
            break
        if d.month < 3:
            continue
        gregorian = d + timedelta(days=13)
        assert compute_weekday(d.day, d.month, d.year, True, "julian") == gregorian.isoweekday(), d


def test_gregorian_and_julian_differ_by_fixed_offset():
    offsets = set()
    for d in _sample_dates(date(1950, 1, 3), 500, 47):
        g = compute_weekday(d.day, d.month, d.year, True, "gregorian")
        j = compute_weekday(d.day, d.month, d.year, True, "julian")
        offsets.add((g - j) % 7)
    assert offsets == {1}


@pytest.mark.parametrize("calendar_type", ["gregorian", "julian"])
def test_iso_and_name_agree(calendar_type):
    for d in _sample_dates(date(1800, 1, 1), 800, 53):
        iso = compute_weekday(d.day, d.month, d.year, True, calendar_type)
        name = compute_weekday(d.day, d.month, d.year, False, calendar_type)
        assert ISO_DAY_NAMES[iso] == name


def test_repeated_calls_are_identical():
    results = {compute_weekday(17, 11, 1987, False, "julian", JAPANESE) for _ in range(50)}
    assert len(results) == 1


def test_negative_years_advance_by_year_length():
    # From 1 March of year y to 1 March of y+1 spans Feb of y+1
    for y in range(-410, 10):
        days = 366 if Policies.is_leap_year(y + 1) else 365
        this_year = compute_weekday(1, 3, y, True)
        next_year = compute_weekday(1, 3, y + 1, True)
        assert (next_year - this_year) % 7 == days % 7, y


def test_year_zero_is_leap_and_valid():
    assert compute_weekday(29, 2, 0) in ISO_DAY_NAMES.values()


def test_calculator_uses_its_own_default_table():
    calc = WeekdayCalculator(day_names=JAPANESE)
    assert calc.compute(5, 7, 2010) == "月"
    assert calc.compute(5, 7, 2010, day_names=["S", "U", "M", "T", "W", "R", "F"]) == "M"
    assert calc.compute(5, 7, 2010, True) == 1


@pytest.mark.parametrize("h, iso", [(0, 6), (1, 7), (2, 1), (3, 2), (4, 3), (5, 4), (6, 5)])
def test_to_iso(h, iso):
    assert WeekdayCalculator.to_iso(h) == iso
