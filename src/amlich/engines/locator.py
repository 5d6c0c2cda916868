"""
amlich.engines.locator
----------------------
Finds the lunar month containing a JDN in a decoded year table, and resolves
a requested (month, leap) label to its month-start record.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional, Sequence

from ..core.types import LunarDate


def find_lunar_date(jd: int, months: Sequence[LunarDate]) -> Optional[LunarDate]:
    """
    Lunar date of `jd` given month-start records sorted by JDN.

    Returns None when `jd` lies before the first record; the caller then
    retries with the previous lunar year.
    """
    i = bisect_right([m.jd for m in months], jd) - 1
    if i < 0:
        return None
    start = months[i]
    return LunarDate(start.day + jd - start.jd, start.month, start.year, start.leap, jd)


def find_month(months: Sequence[LunarDate], month: int, leap: bool = False) -> LunarDate:
    if not (1 <= month <= 12):
        raise ValueError(f"lunar month must be in 1..12, got {month}")
    for m in months:
        if m.month == month and m.leap == leap:
            return m
    year = months[0].year if months else "?"
    if leap:
        raise ValueError(f"Month {month} in year {year} is not a leap month.")
    raise ValueError(f"Month {month} not found in year {year}")
