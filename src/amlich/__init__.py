"""amlich public API.

Vietnamese lunisolar calendar conversions (years 1200..2199) and Can-Chi labels.
Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the year-code table on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    solar_to_lunar,
    lunar_to_solar,
    lookup_year_code,
    day_info,
    from_lunar,
    today,
    months_in_year,
    leap_month,
    new_year_day,
    month_bounds,
    days_in_month,
    supported_range,
    set_table,
    get_table,
)
from .attributes.canchi import year_can_chi, month_can_chi, day_can_chi, weekday_name, solar_term
from .attributes.registry import available_attributes, register_attribute
from .core.errors import AmlichError, YearNotSupportedError
from .core.time import to_jdn, from_jdn
from .core.types import DayInfo, LunarDate, SolarDate
from .engines.year_code import YearCode, decode_lunar_year

__all__ = [
    "solar_to_lunar",
    "lunar_to_solar",
    "lookup_year_code",
    "day_info",
    "from_lunar",
    "today",
    "months_in_year",
    "leap_month",
    "new_year_day",
    "month_bounds",
    "days_in_month",
    "supported_range",
    "set_table",
    "get_table",
    "year_can_chi",
    "month_can_chi",
    "day_can_chi",
    "weekday_name",
    "solar_term",
    "available_attributes",
    "register_attribute",
    "AmlichError",
    "YearNotSupportedError",
    "to_jdn",
    "from_jdn",
    "DayInfo",
    "LunarDate",
    "SolarDate",
    "YearCode",
    "decode_lunar_year",
]
