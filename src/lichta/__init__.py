"""lichta public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    convert_gregorian_to_lichta,
    from_date,
    to_gregorian,
    explain,
    months_in_year,
    month_bounds,
    leap_month,
    new_year_day,
)
from .core.errors import AstronomicalRangeError, InvalidDate, LichTaError
from .core.time import gregorian_to_jdn, jdn_to_gregorian
from .core.types import LichTaDate, LunarMonth, LunarYear
from .engines.cache import LunarYearCache
from .engines.calendar import LichTaCalendar
from .engines.specs import (
    TIMEZONE_CUTOVER,
    UTC_OFFSET_BEFORE_CUTOVER,
    UTC_OFFSET_FROM_CUTOVER,
    VIETNAM,
    CalendarParams,
)

__all__ = [
    "convert_gregorian_to_lichta",
    "from_date",
    "to_gregorian",
    "explain",
    "months_in_year",
    "month_bounds",
    "leap_month",
    "new_year_day",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "LichTaDate",
    "LunarMonth",
    "LunarYear",
    "LunarYearCache",
    "LichTaCalendar",
    "CalendarParams",
    "VIETNAM",
    "TIMEZONE_CUTOVER",
    "UTC_OFFSET_BEFORE_CUTOVER",
    "UTC_OFFSET_FROM_CUTOVER",
    "LichTaError",
    "InvalidDate",
    "AstronomicalRangeError",
]
