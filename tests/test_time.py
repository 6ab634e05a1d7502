# tests/test_time.py

import random
from datetime import date

import pytest

from bikrami.core import time as t
from bikrami.core.errors import InvalidDateError
from bikrami.engines.panchang import normalize_date


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid date out of range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        assert t.to_jdn(t.from_jdn(jdn_in)) == jdn_in


def test_julian_calendar_roundtrip():
    random.seed(7)
    for _ in range(5000):
        jdn_in = random.randint(0, 5373484)
        assert t.julian_calendar_to_jdn(*t.jdn_to_julian_calendar(jdn_in)) == jdn_in


def test_known_epochs():
    assert t.to_jdn(date(2000, 1, 1)) == 2451545
    assert t.midnight_jd(date(2000, 1, 1)) == 2451544.5
    # Last Julian day before the 1582 reform
    assert t.julian_calendar_to_jdn(1582, 10, 4) == 2299160
    assert t.to_jdn(date(1582, 10, 15)) == 2299161
    # Kaliyuga epoch: 18 Feb 3102 BCE (Julian), astronomical year -3101
    assert t.jdn_to_julian_calendar(588466) == (-3101, 2, 18)


def test_reform_cutover_constant():
    assert t.jdn_to_julian_calendar(t.GREGORIAN_REFORM_JDN) == (1752, 9, 2)
    assert t.from_jdn(t.GREGORIAN_REFORM_JDN) == date(1752, 9, 13)


def test_weekday_index_sunday_first():
    assert t.weekday_index(date(2000, 1, 1)) == 6  # Saturday
    assert t.weekday_index(date(2024, 1, 7)) == 0  # Sunday
    for offset in range(14):
        d = date(2024, 3, 1 + offset)
        assert t.weekday_index(d) == (d.weekday() + 1) % 7


def test_normalize_gregorian():
    nd = normalize_date(date(2024, 1, 1))
    assert nd.gregorian == date(2024, 1, 1)
    assert nd.julian_day == 2460310.5
    assert nd.weekday == 1  # Monday


def test_normalize_julian_input():
    # Julian 1 Jan 1700 is Gregorian 11 Jan 1700
    nd = normalize_date(date(1700, 1, 1), is_julian=True)
    assert nd.gregorian == date(1700, 1, 11)
    assert nd.julian_day == t.to_jdn(date(1700, 1, 11)) - 0.5


def test_normalize_julian_triple():
    nd = normalize_date((1700, 2, 29), is_julian=True)
    assert nd.gregorian == date(1700, 3, 11)
    assert nd.julian_day == t.julian_calendar_to_jdn(1700, 2, 29) - 0.5


def test_julian_month_length():
    assert t.julian_month_length(1700, 2) == 29
    assert t.julian_month_length(1701, 2) == 28
    assert t.julian_month_length(-3100, 2) == 29
    assert t.julian_month_length(1700, 12) == 31


def test_invalid_dates():
    with pytest.raises(InvalidDateError):
        t.julian_calendar_to_jdn(1701, 2, 29)
    with pytest.raises(InvalidDateError):
        t.julian_calendar_to_jdn(1700, 13, 1)
    with pytest.raises(InvalidDateError):
        normalize_date((2023, 2, 29))
    # Julian 0001-01-01 falls in Gregorian year 0
    with pytest.raises(InvalidDateError):
        normalize_date(date(1, 1, 1), is_julian=True)
    with pytest.raises(InvalidDateError):
        t.from_jdn(t.MAX_JDN + 1)
    assert t.from_jdn(t.MIN_JDN) == date(1, 1, 1)
    assert normalize_date((1, 1, 3), is_julian=True).gregorian == date(1, 1, 1)
