# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa


@dataclass(frozen=True)
class SolarCoordinates:
    """Geometric (true) and apparent solar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd: float) -> SolarCoordinates:
    """
    Solar longitude for a given JD using the truncated series of
    Meeus, Astronomical Algorithms (1998), ch. 25 (accurate to ~0.01 deg).

    The traditional tables feed UT straight into the series; the ~1 minute
    of ΔT over the supported span is below the series' own error.
    """
    T = aa.T_centuries(jd)
    T2 = T * T
    M_deg = 357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2
    L0_deg = 280.46645 + 36000.76983 * T + 0.0003032 * T2
    M_rad = math.radians(M_deg)

    # Equation of center
    C_sun = (
        (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000290 * math.sin(3.0 * M_rad)
    )
    L_true = aa.wrap_deg(L0_deg + C_sun)

    # Aberration and leading nutation term
    Omega_rad = math.radians(125.04 - 1934.136 * T)
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def sun_longitude(jd: float, *, apparent: bool = False) -> float:
    """Ecliptic longitude of the sun in [0, 360)."""
    coords = solar_longitude(jd)
    return coords.L_app_deg if apparent else coords.L_true_deg


def major_term_index(jd: float, *, apparent: bool = False) -> int:
    """Index 0..11 of the 30-degree sector the sun occupies at `jd`."""
    return int(sun_longitude(jd, apparent=apparent) // 30.0) % 12


_TERM_TOL_DEG = 1e-7
_TERM_MAX_ITER = 30


def _refine_crossing(jd: float, target_deg: float, apparent: bool) -> float:
    for _ in range(_TERM_MAX_ITER):
        delta = aa.wrap180(sun_longitude(jd, apparent=apparent) - target_deg)
        jd -= delta * aa.DAYS_PER_DEGREE
        if abs(delta) < _TERM_TOL_DEG:
            break
    return jd


def major_term_jdn(term_index: int, ref_jd: float, *, apparent: bool = False) -> float:
    """
    JD of the most recent crossing of `term_index * 30` degrees at or before `ref_jd`.

    Term 0 is the March equinox, term 9 the winter solstice.
    """
    target = (term_index % 12) * 30.0
    elapsed = aa.wrap_deg(sun_longitude(ref_jd, apparent=apparent) - target)
    jd = _refine_crossing(ref_jd - elapsed * aa.DAYS_PER_DEGREE, target, apparent)
    if jd > ref_jd:
        # Seed sat right on the crossing and converged past ref_jd
        jd = _refine_crossing(jd - aa.TROPICAL_YEAR, target, apparent)
    return jd
