"""
lichta.engines.lunar_year
-------------------------
Builds the lunar month table between two consecutive winter-solstice months.

Month 11 is by convention the month containing the winter solstice. When
13 new-moon months separate two months 11, the first month after month 11
that contains no major solar term is intercalary and repeats the ordinal
of the month before it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..core.errors import AstronomicalRangeError
from ..core.time import civil_day, gregorian_to_jdn, local_midnight_jd
from ..core.types import LunarMonth, LunarYear
from ..reference.astro_args import lunation_index
from ..reference.lunar import new_moon
from ..reference.solar import major_term_index, major_term_jdn

logger = logging.getLogger(__name__)

WINTER_SOLSTICE_TERM = 9  # 270 degrees


def new_moon_day(k: int, utc_offset: float, tolerance: float = 0.0) -> int:
    """Civil JDN on which new moon k falls at the given meridian."""
    return civil_day(new_moon(k), utc_offset, tolerance)


def winter_solstice_day(year: int, utc_offset: float, *, tolerance: float = 0.0, apparent: bool = False) -> int:
    """Civil JDN of the December solstice of Gregorian `year`."""
    closing = local_midnight_jd(gregorian_to_jdn(year, 12, 31) + 1, utc_offset)
    solstice = major_term_jdn(WINTER_SOLSTICE_TERM, closing, apparent=apparent)
    return civil_day(solstice, utc_offset, tolerance)


def month_11(year: int, utc_offset: float, *, tolerance: float = 0.0, apparent: bool = False) -> Tuple[int, int]:
    """
    Lunation index and start JDN of the month that contains the
    December solstice of Gregorian `year`.
    """
    solstice_day = winter_solstice_day(year, utc_offset, tolerance=tolerance, apparent=apparent)
    k = lunation_index(solstice_day)
    while new_moon_day(k, utc_offset, tolerance) > solstice_day:
        k -= 1
    while new_moon_day(k + 1, utc_offset, tolerance) <= solstice_day:
        k += 1
    return k, new_moon_day(k, utc_offset, tolerance)


def has_major_term(
    start_jdn: int,
    end_jdn: int,
    utc_offset: float,
    *,
    tolerance: float = 0.0,
    apparent: bool = False,
) -> bool:
    """True if a major solar term falls on a civil day in [start_jdn, end_jdn)."""
    closing = local_midnight_jd(end_jdn, utc_offset)
    term = major_term_index(closing, apparent=apparent)
    crossing = major_term_jdn(term, closing, apparent=apparent)
    return civil_day(crossing, utc_offset, tolerance) >= start_jdn


def _leap_position(
    starts: List[int],
    utc_offset: float,
    tolerance: float,
    apparent: bool,
) -> int:
    for pos in range(1, len(starts) - 1):
        if not has_major_term(starts[pos], starts[pos + 1], utc_offset, tolerance=tolerance, apparent=apparent):
            return pos
    raise AstronomicalRangeError("13-month span has no month without a major term")


def build_lunar_year(
    year: int,
    utc_offset: float,
    *,
    tolerance: float = 0.0,
    apparent: bool = False,
) -> LunarYear:
    """
    Month table from month 11 of lunar year `year - 1` up to month 11 of lunar year `year`.
    """
    k0, _ = month_11(year - 1, utc_offset, tolerance=tolerance, apparent=apparent)
    k1, _ = month_11(year, utc_offset, tolerance=tolerance, apparent=apparent)
    count = k1 - k0
    if count not in (12, 13):
        raise AstronomicalRangeError(f"{count} lunations between months 11 around {year}")

    # One lunation of margin on either side
    days = [new_moon_day(k, utc_offset, tolerance) for k in range(k0 - 1, k1 + 2)]
    for a, b in zip(days, days[1:]):
        if b <= a:
            raise AstronomicalRangeError(f"new moon days not increasing near JDN {a}")
    starts = days[1:-1]

    leap_pos: Optional[int] = None
    if count == 13:
        leap_pos = _leap_position(starts, utc_offset, tolerance, apparent)

    months: List[LunarMonth] = []
    ordinal = 11
    lunar_year = year - 1
    leap_month: Optional[int] = None
    for pos in range(count):
        is_leap = False
        if pos > 0:
            if pos == leap_pos:
                is_leap = True
                leap_month = ordinal
            else:
                ordinal = ordinal % 12 + 1
        if ordinal == 1 and not is_leap:
            lunar_year = year
        months.append(LunarMonth(
            ordinal=ordinal,
            is_leap=is_leap,
            start_jdn=starts[pos],
            end_jdn=starts[pos + 1],
            lunar_year=lunar_year,
            lunation=k0 + pos,
        ))

    logger.debug(
        "built lunar year %d at UTC%+g: %d months, leap month %s",
        year, utc_offset, count, leap_month,
    )
    return LunarYear(year=year, utc_offset=utc_offset, months=tuple(months), leap_month=leap_month)
