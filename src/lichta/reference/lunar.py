# reference/lunar.py

from __future__ import annotations

import math

# Meeus (1998) truncated new-moon series, lunation index k counted from
# the new moon of 1900 January 1. Coefficients are fixed data: the valid
# span of the calendar (engines.specs) depends on them.

# (multiplier of M, multiplier of M', multiplier of F, coefficient in days)
NEW_MOON_TERMS = (
    (0, 1, 0, -0.4068),
    (0, 2, 0, 0.0161),
    (0, 3, 0, -0.0004),
    (0, 0, 2, 0.0104),
    (1, 1, 0, -0.0051),
    (1, -1, 0, -0.0074),
    (1, 0, 2, 0.0004),
    (-1, 0, 2, -0.0004),
    (0, 1, 2, -0.0006),
    (0, -1, 2, 0.0010),
    (1, 2, 0, 0.0005),
)


def mean_new_moon(k: int) -> float:
    """JDE of the mean new moon k, with the small secular perturbation term."""
    T = k / 1236.85
    T2 = T * T
    T3 = T2 * T
    jde = 2415020.75933 + 29.53058868 * k + 0.0001178 * T2 - 0.000000155 * T3
    return jde + 0.00033 * math.sin(math.radians(166.56 + 132.87 * T - 0.009173 * T2))


def delta_t_days(T: float) -> float:
    """ΔT (days) as the polynomial paired with this series; T in centuries from 1900."""
    T2 = T * T
    T3 = T2 * T
    if T < -11:
        return 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3
    return -0.000278 + 0.000265 * T + 0.000262 * T2


def new_moon(k: int) -> float:
    """
    JD (UT) of the true new moon with lunation index k.

    Closed-form truncated series (a few minutes of error over the supported span).
    """
    T = k / 1236.85
    T2 = T * T
    T3 = T2 * T

    # Sun's mean anomaly, Moon's mean anomaly, Moon's argument of latitude
    M = math.radians(359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3)
    Mp = math.radians(306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3)
    F = math.radians(21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3)

    correction = (0.1734 - 0.000393 * T) * math.sin(M) + 0.0021 * math.sin(2.0 * M)
    for m, mp, f, coef in NEW_MOON_TERMS:
        correction += coef * math.sin(m * M + mp * Mp + f * F)

    return mean_new_moon(k) + correction - delta_t_days(T)
