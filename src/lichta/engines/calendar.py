"""
lichta.engines.calendar
-----------------------
The Orchestrator. Maps civil Julian Day Numbers onto the lunar month tables
built by engines.lunar_year, selecting the historical meridian per date.
"""

from __future__ import annotations

from dataclasses import asdict, replace
from datetime import date
from functools import partial
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import AstronomicalRangeError, InvalidDate
from ..core.time import from_jdn, gregorian_to_jdn, jdn_to_gregorian, local_midnight_jd
from ..core.types import LichTaDate, LunarMonth, LunarYear
from ..reference.lunar import new_moon
from ..reference.solar import sun_longitude
from .cache import LunarYearCache
from .lunar_year import build_lunar_year
from .specs import VIETNAM, CalendarParams


class LichTaCalendar:
    """
    Gregorian <-> Lich Ta conversion for one set of CalendarParams.

    The cache is optional and owned by the caller; results never depend on it.
    """
    def __init__(self, params: CalendarParams = VIETNAM, cache: Optional[LunarYearCache] = None):
        self.params = params
        self.cache = cache

    def lunar_year(self, year: int, utc_offset: float) -> LunarYear:
        """Month table from month 11 of lunar year `year - 1` to month 11 of `year`."""
        build = partial(
            build_lunar_year,
            year,
            utc_offset,
            tolerance=self.params.midnight_tolerance,
            apparent=self.params.apparent_longitude,
        )
        if self.cache is None:
            return build()
        key = (year, utc_offset, self.params.midnight_tolerance, self.params.apparent_longitude)
        return self.cache.get_or_build(key, build)

    # ---------------------------------------------------------
    # Forward: Gregorian to Lich Ta
    # ---------------------------------------------------------

    def _table_for(self, jdn: int, year: int, utc_offset: float) -> LunarYear:
        # Month 11 of `year` opens in late November or December
        table = self.lunar_year(year + 1, utc_offset)
        if jdn < table.start_jdn:
            table = self.lunar_year(year, utc_offset)
        return table

    def convert(self, year: int, month: int, day: int) -> LichTaDate:
        jdn = gregorian_to_jdn(year, month, day)
        self.params.check_year(year)
        utc_offset = self.params.utc_offset(date(year, month, day))
        m = self._table_for(jdn, year, utc_offset).month_containing(jdn)
        return LichTaDate(year=m.lunar_year, month=m.ordinal, is_leap=m.is_leap, day=jdn - m.start_jdn + 1)

    def from_jdn(self, jdn: int) -> LichTaDate:
        return self.convert(*jdn_to_gregorian(jdn))

    def day_info(self, d: date) -> LichTaDate:
        return self.convert(d.year, d.month, d.day)

    # ---------------------------------------------------------
    # Month-level API (lunar-year keyed)
    # ---------------------------------------------------------

    def _civil_months(self, year: int) -> List[LunarMonth]:
        """
        Months labelled with lunar year `year`, each day reckoned on the
        meridian in force on that day, exactly as `convert` sees them.

        Tables `year` and `year + 1` hold every such month. A month that
        straddles the cutover is stitched from its days before the cutover on
        the old meridian and its days from the cutover on the new one.
        """
        p = self.params
        lo = gregorian_to_jdn(year - 1, 11, 1)
        hi = gregorian_to_jdn(year + 2, 1, 1)
        if p.offset_before == p.offset_from:
            windows = [(p.offset_from, lo, hi)]
        else:
            cut = gregorian_to_jdn(p.cutover.year, p.cutover.month, p.cutover.day)
            windows = [
                (p.offset_before, lo, min(cut, hi)),
                (p.offset_from, max(cut, lo), hi),
            ]

        pieces: Dict[Tuple[int, bool], LunarMonth] = {}
        for utc_offset, w_lo, w_hi in windows:
            if w_lo >= w_hi:
                continue
            for table_year in (year, year + 1):
                for m in self.lunar_year(table_year, utc_offset).months:
                    if m.lunar_year != year:
                        continue
                    start, end = max(m.start_jdn, w_lo), min(m.end_jdn, w_hi)
                    if start >= end:
                        continue
                    key = (m.ordinal, m.is_leap)
                    seen = pieces.get(key)
                    if seen is None:
                        pieces[key] = replace(m, start_jdn=start, end_jdn=end)
                    else:
                        pieces[key] = replace(
                            seen,
                            start_jdn=min(seen.start_jdn, start),
                            end_jdn=max(seen.end_jdn, end),
                        )
        return sorted(pieces.values(), key=lambda m: m.start_jdn)

    def months_in_year(self, year: int) -> List[LunarMonth]:
        """
        Months of lunar year `year` in order, 12 or 13 entries.

        Lunar year `min_year - 1` is also accepted, reduced to the months
        that reach into the supported span.
        """
        p = self.params
        if year == p.min_year - 1:
            first = gregorian_to_jdn(p.min_year, 1, 1)
            return [m for m in self._civil_months(year) if m.end_jdn > first]
        p.check_year(year)
        return self._civil_months(year)

    def month_bounds(self, year: int, month: int, *, is_leap: bool = False) -> LunarMonth:
        if not (1 <= month <= 12):
            raise InvalidDate(f"lunar month {month} outside 1..12")
        for m in self.months_in_year(year):
            if m.ordinal == month and m.is_leap == is_leap:
                return m
        if year == self.params.min_year - 1 and not is_leap:
            raise AstronomicalRangeError(
                f"lunar month {month}/{year} lies before {self.params.min_year}-01-01"
            )
        raise InvalidDate(f"lunar year {year} has no leap month {month}")

    def leap_month(self, year: int) -> Optional[int]:
        for m in self.months_in_year(year):
            if m.is_leap:
                return m.ordinal
        return None

    def new_year_day(self, year: int) -> date:
        return from_jdn(self.month_bounds(year, 1).start_jdn)

    # ---------------------------------------------------------
    # Inverse: Lich Ta to Gregorian
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, day: int, *, is_leap: bool = False) -> int:
        m = self.month_bounds(year, month, is_leap=is_leap)
        if not (1 <= day <= m.length):
            raise InvalidDate(f"day {day} outside 1..{m.length} for lunar month {month}/{year}")
        jdn = m.start_jdn + day - 1
        self.params.check_year(jdn_to_gregorian(jdn)[0])
        return jdn

    def to_gregorian(self, t: LichTaDate) -> date:
        return from_jdn(self.to_jdn(t.year, t.month, t.day, is_leap=t.is_leap))

    # ---------------------------------------------------------
    # Diagnostics
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {"params": self.params.info(), "cached": self.cache is not None}

    def explain(self, d: date) -> Dict[str, Any]:
        jdn = gregorian_to_jdn(d.year, d.month, d.day)
        self.params.check_year(d.year)
        utc_offset = self.params.utc_offset(d)
        table = self._table_for(jdn, d.year, utc_offset)
        m = table.month_containing(jdn)
        return {
            "date": d,
            "jdn": jdn,
            "utc_offset": utc_offset,
            "table_year": table.year,
            "table_leap_month": table.leap_month,
            "month": asdict(m),
            "new_moon_jd_ut": new_moon(m.lunation),
            "sun_longitude_midnight": sun_longitude(
                local_midnight_jd(jdn, utc_offset), apparent=self.params.apparent_longitude
            ),
            "lichta": self.convert(d.year, d.month, d.day),
        }
