# reference/lunar.py

from __future__ import annotations

import math

from .solar import VN_TIME_ZONE

# JD of the k=0 new moon of this series (1900-01-01 13:52 UT) and the mean synodic month
EPOCH_NEW_MOON_JD = 2415021.076998695
SYNODIC_MONTH = 29.530588853


def new_moon_jd(k: int) -> float:
    """
    JD (UT) of the k-th new moon after 1900-01-01.

    Meeus, Astronomical Algorithms, ch. 49, truncated periodic terms, with a
    polynomial Delta T correction.
    """
    T = k / 1236.85
    T2 = T * T
    T3 = T2 * T
    dr = math.pi / 180.0
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * T2 - 0.000000155 * T3
    jd1 += 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * dr)
    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3
    C1 = (0.1734 - 0.000393 * T) * math.sin(M * dr) + 0.0021 * math.sin(2 * dr * M)
    C1 = C1 - 0.4068 * math.sin(Mpr * dr) + 0.0161 * math.sin(dr * 2 * Mpr)
    C1 = C1 - 0.0004 * math.sin(dr * 3 * Mpr)
    C1 = C1 + 0.0104 * math.sin(dr * 2 * F) - 0.0051 * math.sin(dr * (M + Mpr))
    C1 = C1 - 0.0074 * math.sin(dr * (M - Mpr)) + 0.0004 * math.sin(dr * (2 * F + M))
    C1 = C1 - 0.0004 * math.sin(dr * (2 * F - M)) - 0.0006 * math.sin(dr * (2 * F + Mpr))
    C1 = C1 + 0.0010 * math.sin(dr * (2 * F - Mpr)) + 0.0005 * math.sin(dr * (2 * Mpr + M))
    if T < -11:
        deltat = 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3
    else:
        deltat = -0.000278 + 0.000265 * T + 0.000262 * T2
    return jd1 + C1 - deltat


def new_moon_day(k: int, time_zone: float = VN_TIME_ZONE) -> int:
    """Local civil JDN containing the k-th new moon."""
    return math.floor(new_moon_jd(k) + 0.5 + time_zone / 24.0)


def lunation_near(jd: float) -> int:
    """Index k of the new moon nearest to `jd`."""
    return math.floor((jd - EPOCH_NEW_MOON_JD) / SYNODIC_MONTH + 0.5)
