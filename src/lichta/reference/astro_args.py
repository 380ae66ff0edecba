from __future__ import annotations

import math
from math import fmod


# ------------------------------------------------------------
# Angle helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0

# ------------------------------------------------------------
# Time variables
# ------------------------------------------------------------

J2000 = 2451545.0  # JD at J2000.0
JULIAN_CENTURY = 36525.0


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / JULIAN_CENTURY


# ------------------------------------------------------------
# Mean periods (days)
# ------------------------------------------------------------

# Mean synodic month used for lunation indexing.
SYNODIC_MONTH = 29.530588853

# Mean tropical year; only seeds the solar-term solver.
TROPICAL_YEAR = 365.2421896698

# Mean solar motion inverse, days per degree of longitude.
DAYS_PER_DEGREE = TROPICAL_YEAR / 360.0

# JD of the mean new moon with lunation index k = 0 (1900 January 1).
LUNATION_EPOCH_JD = 2415021.076998695


def lunation_index(jd: float) -> int:
    """Index k of the mean new moon nearest to `jd`."""
    return math.floor((jd - LUNATION_EPOCH_JD) / SYNODIC_MONTH + 0.5)
