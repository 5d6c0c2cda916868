# reference/solar.py

from __future__ import annotations

import math

# Local meridian of the Vietnamese calendar (UTC+7), in hours.
VN_TIME_ZONE = 7.0


def sun_longitude_rad(jd_ut: float) -> float:
    """
    Apparent solar longitude in radians, wrapped to [0, 2*pi), for a JD (UT).

    Low-precision Meeus series, good to about 0.01 deg.
    """
    T = (jd_ut - 2451545.0) / 36525.0
    T2 = T * T
    M = math.radians(357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2)
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2
    DL = (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(M)
    DL += (0.019993 - 0.000101 * T) * math.sin(2 * M) + 0.000290 * math.sin(3 * M)
    L = math.radians(L0 + DL)
    return L - 2 * math.pi * math.floor(L / (2 * math.pi))


def _local_midnight(day_number: int, time_zone: float) -> float:
    # JDN n starts at JD n - 0.5 (UT midnight); shift to local midnight
    return day_number - 0.5 - time_zone / 24.0


def principal_term_index(day_number: int, time_zone: float = VN_TIME_ZONE) -> int:
    """Sun sector 0..11 (30 deg each) at local midnight starting JDN `day_number`."""
    return math.floor(sun_longitude_rad(_local_midnight(day_number, time_zone)) / math.pi * 6)


def solar_term_index(jd: int, time_zone: float = VN_TIME_ZONE) -> int:
    """Solar term 0..23 (15 deg each) in effect at the end of civil day `jd`."""
    return math.floor(sun_longitude_rad(_local_midnight(jd + 1, time_zone)) / math.pi * 12)
