from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict

from ..core.errors import AstronomicalRangeError


# ============================================================
# HISTORICAL MERIDIAN
# ============================================================

# Vietnamese almanacs were computed on the UTC+8 meridian until the end of
# 1967 and on UTC+7 from 1968-01-01 (the year Tết fell on different days
# in the North and the South).
TIMEZONE_CUTOVER = date(1968, 1, 1)
UTC_OFFSET_BEFORE_CUTOVER = 8.0
UTC_OFFSET_FROM_CUTOVER = 7.0

# ============================================================
# VALIDATED SPAN
# ============================================================

# Span over which the truncated new-moon and solar series (reference/)
# keep month boundaries within a few minutes.
MIN_YEAR = 1200
MAX_YEAR = 2199

# Instants less than this many days after local midnight go to the
# previous civil day. 0.0 is plain truncation, as in the published tables.
DEFAULT_MIDNIGHT_TOLERANCE = 0.0


@dataclass(frozen=True)
class CalendarParams:
    """Pure data payload describing how the lunisolar calendar is reckoned."""
    name: str
    cutover: date = TIMEZONE_CUTOVER
    offset_before: float = UTC_OFFSET_BEFORE_CUTOVER
    offset_from: float = UTC_OFFSET_FROM_CUTOVER
    min_year: int = MIN_YEAR
    max_year: int = MAX_YEAR
    midnight_tolerance: float = DEFAULT_MIDNIGHT_TOLERANCE
    apparent_longitude: bool = False

    def __post_init__(self) -> None:
        if self.min_year > self.max_year:
            raise ValueError("min_year must be <= max_year")
        if not (MIN_YEAR <= self.min_year and self.max_year <= MAX_YEAR):
            raise ValueError(f"supported years must lie within {MIN_YEAR}..{MAX_YEAR}")
        if not (0.0 <= self.midnight_tolerance < 1.0):
            raise ValueError("midnight_tolerance must be in [0, 1) days")
        for off in (self.offset_before, self.offset_from):
            if not (-12.0 <= off <= 14.0):
                raise ValueError(f"UTC offset {off} out of range")

    def utc_offset(self, d: date) -> float:
        """Offset (hours east of UTC) used to bucket events for civil date `d`."""
        return self.offset_before if d < self.cutover else self.offset_from

    def check_year(self, year: int) -> None:
        if not (self.min_year <= year <= self.max_year):
            raise AstronomicalRangeError(
                f"year {year} outside supported range {self.min_year}..{self.max_year}"
            )

    def with_fixed_offset(self, hours: float, *, name: str | None = None) -> "CalendarParams":
        """Same rules reckoned on a single meridian for all dates."""
        return replace(
            self,
            name=name or f"{self.name}@{hours:+g}",
            offset_before=float(hours),
            offset_from=float(hours),
        )

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cutover": self.cutover.isoformat(),
            "offset_before": self.offset_before,
            "offset_from": self.offset_from,
            "years": (self.min_year, self.max_year),
            "midnight_tolerance": self.midnight_tolerance,
            "apparent_longitude": self.apparent_longitude,
        }


VIETNAM = CalendarParams(name="vietnam")
