from __future__ import annotations
from typing import Any, Dict

from .canchi import weekday_name
from .registry import register_attribute, jdn
from ..reference.solar import solar_term_index
from ..tables.labels import TIET_KHI

def weekday(info) -> Dict[str, Any]:
    # 0=Sunday..6=Saturday
    return {"weekday": int((jdn(info) + 1) % 7), "weekday_name": weekday_name(jdn(info))}

def solar_term_attrs(info) -> Dict[str, Any]:
    n = solar_term_index(jdn(info))
    return {"solar_term_index": n, "solar_term": TIET_KHI[n]}

register_attribute("weekday", weekday)
register_attribute("solar_term", solar_term_attrs)
