from __future__ import annotations
from datetime import date

from .types import SolarDate

# First JDN of the Gregorian calendar (1582-10-15). Earlier days are Julian.
GREGORIAN_START_JDN = 2299161


def to_jdn(day: int, month: int, year: int) -> int:
    """Julian Day Number of a civil date, Julian calendar before the 1582 reform.

    Inputs are not validated: 31/2/2023 maps to the same day as 3/3/2023.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jd = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if jd < GREGORIAN_START_JDN:
        jd = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return jd

def from_jdn(jd: int) -> SolarDate:
    """Fliegel-Van Flandern inverse of to_jdn, with the Julian branch before the reform."""
    if jd >= GREGORIAN_START_JDN:
        a = jd + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jd + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return SolarDate(day=day, month=month, year=year, jd=jd)

def date_to_jdn(d: date) -> int:
    return to_jdn(d.day, d.month, d.year)

def jdn_to_date(jd: int) -> date:
    """datetime.date for a JDN; only defined from the Gregorian reform on."""
    if jd < GREGORIAN_START_JDN:
        raise ValueError(f"JDN {jd} precedes the Gregorian reform; datetime.date would be proleptic")
    s = from_jdn(jd)
    return date(s.year, s.month, s.day)
