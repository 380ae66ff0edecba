from __future__ import annotations
import calendar as pycal
import math
from datetime import MAXYEAR, MINYEAR, date
from typing import Tuple

from .errors import InvalidDate


def validate_gregorian(year: int, month: int, day: int) -> None:
    """Raise InvalidDate unless (year, month, day) is a real proleptic Gregorian date."""
    if not (MINYEAR <= year <= MAXYEAR):
        raise InvalidDate(f"year {year} outside {MINYEAR}..{MAXYEAR}")
    if not (1 <= month <= 12):
        raise InvalidDate(f"month {month} outside 1..12")
    last = pycal.monthrange(year, month)[1]
    if not (1 <= day <= last):
        raise InvalidDate(f"day {day} outside 1..{last} for {year}-{month:02d}")


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a proleptic Gregorian date to Julian Day Number (JDN)."""
    validate_gregorian(year, month, day)
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*jdn_to_gregorian(jdn))


def local_midnight_jd(jdn: int, utc_offset: float) -> float:
    """
    JD (UT) of the local midnight that opens civil day `jdn`
    at a meridian `utc_offset` hours east of Greenwich.
    """
    return jdn - 0.5 - utc_offset / 24.0


def civil_day(jd: float, utc_offset: float, tolerance: float = 0.0) -> int:
    """
    Bucket an instant (JD, UT) into the local civil day it falls on.

    An instant less than `tolerance` days after local midnight is assigned
    to the previous day. With tolerance 0 this is plain truncation.
    """
    local = jd + 0.5 + utc_offset / 24.0
    jdn = math.floor(local)
    if local - jdn < tolerance:
        jdn -= 1
    return int(jdn)
