from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .core.table import MAX_YEAR, MIN_YEAR, YearCodeTable
from .core.time import from_jdn, to_jdn
from .core.types import DayInfo, LunarDate, SolarDate
from .attributes.canchi import day_can_chi, month_can_chi, year_can_chi
from .attributes.registry import compute_attributes
from .engines.locator import find_lunar_date, find_month
from .engines.year_code import YearCode, decode_lunar_year, year_end_jdn

log = logging.getLogger(__name__)

_table: Optional[YearCodeTable] = None

def set_table(table: YearCodeTable) -> None:
    global _table
    _table = table

def get_table() -> YearCodeTable:
    if _table is None:
        raise RuntimeError("Year-code table not initialized")
    return _table

def supported_range() -> Tuple[int, int]:
    return MIN_YEAR, MAX_YEAR

def _supported(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR and year in get_table()

# ============================================================
# Year table access
# ============================================================

def lookup_year_code(year: int) -> int:
    """Packed code of lunar year `year`; raises YearNotSupportedError without table data."""
    return get_table().lookup(year)

@lru_cache(maxsize=64)
def _decode(year: int, code: int) -> Tuple[LunarDate, ...]:
    return tuple(decode_lunar_year(year, code))

def _year_months(year: int) -> Tuple[LunarDate, ...]:
    # keyed on the code itself, so shards replaced in place are picked up
    return _decode(year, lookup_year_code(year))

def _year_end(year: int) -> int:
    return year_end_jdn(year, lookup_year_code(year))

def months_in_year(year: int) -> List[LunarDate]:
    return list(_year_months(year))

def leap_month(year: int) -> int:
    """Leap month number of lunar year `year`, 0 if it has none."""
    return YearCode.unpack(lookup_year_code(year)).leap_month

def new_year_day(year: int) -> SolarDate:
    """Solar date of Tet (lunar 1/1) of `year`."""
    return from_jdn(_year_months(year)[0].jd)

def month_bounds(year: int, month: int, *, leap: bool = False) -> Tuple[SolarDate, SolarDate]:
    """First and last solar day of a lunar month."""
    months = _year_months(year)
    start = find_month(months, month, leap)
    i = months.index(start)
    end = months[i + 1].jd if i + 1 < len(months) else _year_end(year)
    return from_jdn(start.jd), from_jdn(end - 1)

def days_in_month(year: int, month: int, *, leap: bool = False) -> int:
    first, last = month_bounds(year, month, leap=leap)
    return last.jd - first.jd + 1

# ============================================================
# Conversions
# ============================================================

def _locate(jd: int, year: int) -> Optional[LunarDate]:
    # a day of solar year Y lies in lunar year Y or Y - 1
    table = get_table()
    for y in (year, year - 1):
        if y not in table:
            continue
        months = _year_months(y)
        if months[0].jd <= jd < _year_end(y):
            return find_lunar_date(jd, months)
        log.debug("jd %d is not in lunar year %d", jd, y)
    log.debug("jd %d is outside the year-code table", jd)
    return None

def solar_to_lunar(day: int, month: int, year: int) -> Optional[LunarDate]:
    """Lunar date of a solar date; None outside the supported years."""
    if not _supported(year):
        log.debug("solar year %d not supported", year)
        return None
    return _locate(to_jdn(day, month, year), year)

def lunar_to_solar(day: int, month: int, year: int, leap: bool = False) -> Optional[SolarDate]:
    """
    Solar date of a lunar date; None outside the supported years.

    Raises ValueError when `month` is not 1..12 or `leap` is requested for a
    month that is not the year's leap month. A missing leap month is an error,
    not a silent fallback to the ordinary month of the same number.
    """
    if not _supported(year):
        log.debug("lunar year %d not supported", year)
        return None
    start = find_month(_year_months(year), month, leap)
    return from_jdn(start.jd + day - 1)

# ============================================================
# Day aggregate
# ============================================================

def _day_info(solar: SolarDate, lunar: LunarDate, attributes: Sequence[str]) -> DayInfo:
    info = DayInfo(
        solar=solar,
        lunar=lunar,
        year_can_chi=year_can_chi(lunar.year),
        month_can_chi=month_can_chi(lunar.month, lunar.year),
        day_can_chi=day_can_chi(solar.jd),
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def day_info(day: int, month: int, year: int, *, attributes: Sequence[str] = ()) -> Optional[DayInfo]:
    lunar = solar_to_lunar(day, month, year)
    if lunar is None:
        return None
    return _day_info(from_jdn(lunar.jd), lunar, attributes)

def from_lunar(
    day: int,
    month: int,
    year: int,
    leap: bool = False,
    *,
    attributes: Sequence[str] = (),
) -> Optional[DayInfo]:
    solar = lunar_to_solar(day, month, year, leap)
    if solar is None:
        return None
    # re-locate so that an overflowing day (e.g. 30 of a 29-day month) is labelled correctly
    lunar = _locate(solar.jd, solar.year)
    if lunar is None:
        log.debug("lunar %d/%d/%d overflows the year-code table", day, month, year)
        return None
    return _day_info(solar, lunar, attributes)

def today(*, attributes: Sequence[str] = ()) -> Optional[DayInfo]:
    d = date.today()
    return day_info(d.day, d.month, d.year, attributes=attributes)
