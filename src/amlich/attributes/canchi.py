from __future__ import annotations

from ..reference.solar import solar_term_index
from ..tables.labels import CAN, CHI, TIET_KHI, TUAN


def _label(can: int, chi: int) -> str:
    return f"{CAN[can % 10]} {CHI[chi % 12]}"

def year_can_chi(year: int) -> str:
    return _label(year + 6, year + 8)

def day_can_chi(jd: int) -> str:
    return _label(jd + 9, jd + 1)

def month_can_chi(month: int, year: int) -> str:
    """Stem follows the year stem (two steps per year), branch is fixed per month (month 1 = Dần)."""
    year_can = (year + 6) % 10
    return _label(year_can * 2 + month, month + 1)

def weekday_name(jd: int) -> str:
    return TUAN[(jd + 1) % 7]

def solar_term(jd: int) -> str:
    """Tiết khí in effect at the end of civil day `jd` (UTC+7)."""
    return TIET_KHI[solar_term_index(jd)]
