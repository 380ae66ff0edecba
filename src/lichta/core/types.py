from __future__ import annotations
from bisect import bisect_right
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class LichTaDate:
    year: int
    month: int
    is_leap: bool
    day: int

    def __str__(self) -> str:
        leap_tag = "n" if self.is_leap else ""
        return f"{self.day:02d}/{self.month:02d}{leap_tag}/{self.year}"

@dataclass(frozen=True)
class LunarMonth:
    """Half-open civil-day interval [start_jdn, end_jdn) between two new moons."""
    ordinal: int
    is_leap: bool
    start_jdn: int
    end_jdn: int
    lunar_year: int
    lunation: int  # index k of the opening new moon

    @property
    def length(self) -> int:
        return self.end_jdn - self.start_jdn

    def contains(self, jdn: int) -> bool:
        return self.start_jdn <= jdn < self.end_jdn

@dataclass(frozen=True)
class LunarYear:
    """
    Month table from month 11 of lunar year `year - 1` up to, not including,
    month 11 of lunar year `year`.
    """
    year: int
    utc_offset: float
    months: Tuple[LunarMonth, ...]
    leap_month: Optional[int] = None

    @property
    def start_jdn(self) -> int:
        return self.months[0].start_jdn

    @property
    def end_jdn(self) -> int:
        return self.months[-1].end_jdn

    @property
    def has_leap_month(self) -> bool:
        return self.leap_month is not None

    def month_containing(self, jdn: int) -> LunarMonth:
        if not (self.start_jdn <= jdn < self.end_jdn):
            raise KeyError(f"JDN {jdn} outside lunar year table {self.year}")
        starts = [m.start_jdn for m in self.months]
        return self.months[bisect_right(starts, jdn) - 1]
