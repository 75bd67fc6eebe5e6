from __future__ import annotations
from datetime import date
from typing import Tuple


def civil_to_jdn(day: int, month: int, year: int) -> int:
    """
    Proleptic Gregorian date -> Julian Day Number (Fliegel-Van Flandern).

    Years use astronomical numbering: year 0 is 1 BCE, year -1 is 2 BCE.
    Year 0 is a leap year.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_civil(jdn: int) -> Tuple[int, int, int]:
    """Inverse of civil_to_jdn. Returns (day, month, year)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return day, month, year


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return civil_to_jdn(d.day, d.month, d.year)


def from_jdn(jdn: int) -> date:
    day, month, year = jdn_to_civil(jdn)
    return date(year, month, day)


def local_midnight_jd(jdn: int, tz_hours: float) -> float:
    """
    Julian Date (UT) of the local midnight that starts civil day `jdn`
    in a zone `tz_hours` east of Greenwich.
    """
    return jdn - 0.5 - tz_hours / 24.0
