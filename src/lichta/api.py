from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .core.types import LichTaDate, LunarMonth
from .engines.cache import LunarYearCache
from .engines.calendar import LichTaCalendar
from .engines.specs import VIETNAM, CalendarParams


def _cal(params: CalendarParams, cache: Optional[LunarYearCache]) -> LichTaCalendar:
    return LichTaCalendar(params, cache)

def convert_gregorian_to_lichta(
    year: int,
    month: int,
    day: int,
    *,
    params: CalendarParams = VIETNAM,
    cache: Optional[LunarYearCache] = None,
) -> LichTaDate:
    return _cal(params, cache).convert(year, month, day)

def from_date(d: date, *, params: CalendarParams = VIETNAM, cache: Optional[LunarYearCache] = None) -> LichTaDate:
    return _cal(params, cache).day_info(d)

def to_gregorian(t: LichTaDate, *, params: CalendarParams = VIETNAM, cache: Optional[LunarYearCache] = None) -> date:
    return _cal(params, cache).to_gregorian(t)

def explain(d: date, *, params: CalendarParams = VIETNAM) -> Dict[str, Any]:
    return _cal(params, None).explain(d)

# ============================================================
# Month-level API
# ============================================================

def months_in_year(
    year: int, *, params: CalendarParams = VIETNAM, cache: Optional[LunarYearCache] = None
) -> List[LunarMonth]:
    return _cal(params, cache).months_in_year(year)

def month_bounds(
    year: int,
    month: int,
    *,
    is_leap: bool = False,
    params: CalendarParams = VIETNAM,
    cache: Optional[LunarYearCache] = None,
) -> LunarMonth:
    return _cal(params, cache).month_bounds(year, month, is_leap=is_leap)

def leap_month(year: int, *, params: CalendarParams = VIETNAM, cache: Optional[LunarYearCache] = None) -> Optional[int]:
    return _cal(params, cache).leap_month(year)

def new_year_day(year: int, *, params: CalendarParams = VIETNAM, cache: Optional[LunarYearCache] = None) -> date:
    return _cal(params, cache).new_year_day(year)
