from __future__ import annotations
import math
from datetime import date
from typing import Tuple

from .errors import InvalidDateError

# Last Julian-calendar day in Britain (1752-09-02 Julian = 1752-09-13 Gregorian)
GREGORIAN_REFORM_JDN = 2361221

# datetime.date range
MIN_JDN = 1721426  # 0001-01-01
MAX_JDN = 5373484  # 9999-12-31

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    if not MIN_JDN <= jdn <= MAX_JDN:
        raise InvalidDateError(f"JDN {jdn} is outside Gregorian 0001-01-01..9999-12-31")
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def julian_calendar_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Julian calendar date -> JDN."""
    if not 1 <= month <= 12 or not 1 <= day <= julian_month_length(year, month):
        raise InvalidDateError(f"{year}-{month:02d}-{day:02d} is not a Julian calendar date")
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083

def julian_month_length(year: int, month: int) -> int:
    # Every fourth year is leap, centuries included
    if month == 2 and year % 4 == 0:
        return 29
    return _MONTH_DAYS[month - 1]

def jdn_to_julian_calendar(jdn: int) -> Tuple[int, int, int]:
    """
    JDN -> proleptic Julian calendar (year, month, day).
    Returned as a tuple since the Julian year may fall outside `date`'s range.
    """
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day

def midnight_jd(d: date) -> float:
    """Julian Date at 00:00 UTC of a Gregorian date."""
    return to_jdn(d) - 0.5

def jd_to_jdn(jd: float) -> int:
    """JDN of the civil day containing the instant `jd` (days from noon)."""
    return int(math.floor(jd + 0.5))

def weekday_index(d: date) -> int:
    """Weekday with Sunday = 0 .. Saturday = 6."""
    return (to_jdn(d) + 1) % 7
