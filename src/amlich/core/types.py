from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

@dataclass(frozen=True)
class SolarDate:
    day: int
    month: int
    year: int
    jd: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

@dataclass(frozen=True)
class LunarDate:
    """
    One lunar day. Decoded year tables reuse it with day=1 as the
    first day of each month occurrence.
    """
    day: int
    month: int
    year: int
    leap: bool
    jd: int

    def __str__(self) -> str:
        s = f"{self.day}/{self.month}/{self.year}"
        return s + " (nhuận)" if self.leap else s

@dataclass(frozen=True)
class DayInfo:
    solar: SolarDate
    lunar: LunarDate
    year_can_chi: str
    month_can_chi: str
    day_can_chi: str
    attributes: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"Solar: {self.solar}, Lunar: {self.lunar}"
