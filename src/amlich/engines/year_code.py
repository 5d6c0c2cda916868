"""
amlich.engines.year_code
------------------------
Unpacks the per-year lunar structure code and expands it into the ordered
list of month starts for that lunar year.

Code layout (LSB first):

    bits  0..3   leap month number, 0 = no leap month
    bits  4..15  ordinary month lengths, bit 15 = month 1 ... bit 4 = month 12
                 (set = 30 days, clear = 29 days)
    bit  16      leap month length (set = 30 days)
    bits 17..    days from solar 1 January to the lunar New Year (Tet)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..core.time import to_jdn
from ..core.types import LunarDate

SHORT_MONTH = 29
LONG_MONTH = 30

_LEAP_MONTH_MASK = 0xF
_MONTH_FLAGS_SHIFT = 4
_LEAP_LENGTH_BIT = 16
_TET_OFFSET_SHIFT = 17


def _month_days(flag: int) -> int:
    return LONG_MONTH if flag else SHORT_MONTH


@dataclass(frozen=True)
class YearCode:
    leap_month: int                 # 0 or 1..12
    leap_month_days: int            # 29/30; meaningless when leap_month == 0
    month_days: Tuple[int, ...]     # lengths of ordinary months 1..12
    tet_offset: int                 # days after solar 1 January

    def __post_init__(self) -> None:
        if not (0 <= self.leap_month <= 12):
            raise ValueError("leap_month must be in 0..12")
        if len(self.month_days) != 12:
            raise ValueError("month_days must hold 12 lengths")
        if any(n not in (SHORT_MONTH, LONG_MONTH) for n in self.month_days):
            raise ValueError("month lengths must be 29 or 30")
        if self.leap_month_days not in (SHORT_MONTH, LONG_MONTH):
            raise ValueError("leap_month_days must be 29 or 30")
        if self.tet_offset < 0:
            raise ValueError("tet_offset must be non-negative")

    @classmethod
    def unpack(cls, code: int) -> "YearCode":
        if code < 0:
            raise ValueError(f"year code must be non-negative, got {code}")
        flags = code >> _MONTH_FLAGS_SHIFT
        # month 12 sits in the lowest flag bit
        days = [0] * 12
        for i in range(12):
            days[11 - i] = _month_days(flags & 0x1)
            flags >>= 1
        return cls(
            leap_month=code & _LEAP_MONTH_MASK,
            leap_month_days=_month_days((code >> _LEAP_LENGTH_BIT) & 0x1),
            month_days=tuple(days),
            tet_offset=code >> _TET_OFFSET_SHIFT,
        )

    def pack(self) -> int:
        code = self.tet_offset << _TET_OFFSET_SHIFT
        if self.leap_month_days == LONG_MONTH:
            code |= 1 << _LEAP_LENGTH_BIT
        for m, n in enumerate(self.month_days, start=1):
            if n == LONG_MONTH:
                code |= 1 << (_MONTH_FLAGS_SHIFT + 12 - m)
        return code | self.leap_month

    @property
    def month_count(self) -> int:
        return 13 if self.leap_month else 12

    @property
    def total_days(self) -> int:
        n = sum(self.month_days)
        return n + self.leap_month_days if self.leap_month else n


def decode_lunar_year(year: int, code: int) -> List[LunarDate]:
    """
    First day of every month of lunar year `year`, in chronological order.

    The leap month (if any) directly follows the ordinary month it repeats.
    """
    yc = YearCode.unpack(code)
    jd = to_jdn(1, 1, year) + yc.tet_offset

    months: List[LunarDate] = []
    for mm in range(1, 13):
        months.append(LunarDate(1, mm, year, False, jd))
        jd += yc.month_days[mm - 1]
        if mm == yc.leap_month:
            months.append(LunarDate(1, mm, year, True, jd))
            jd += yc.leap_month_days
    return months


def year_end_jdn(year: int, code: int) -> int:
    """JDN of the day after the last day of lunar year `year`."""
    yc = YearCode.unpack(code)
    return to_jdn(1, 1, year) + yc.tet_offset + yc.total_days
