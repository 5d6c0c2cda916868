"""
amlich.design.year_codes
------------------------
Design tool: computes the packed year codes stored in amlich.tables.year_codes
from an astronomical model of new moons and solar longitude.

Rules of the Vietnamese lunisolar calendar:
  * a month starts on the local civil day of a new moon;
  * month 11 is the month containing the winter solstice;
  * a year (month 11 to month 11) with 13 months repeats the first month
    after month 11 that contains no principal term, as a leap month.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..core.time import to_jdn
from ..core.types import LunarDate
from ..engines.year_code import LONG_MONTH, SHORT_MONTH, YearCode
from ..reference.lunar import SYNODIC_MONTH, lunation_near, new_moon_day
from ..reference.solar import VN_TIME_ZONE, principal_term_index

log = logging.getLogger(__name__)

# JDN of 1900-01-01 (epoch of the new moon series, as an integer day)
_EPOCH_JDN = 2415021


@dataclass(frozen=True)
class GeneratorParams:
    time_zone: float = VN_TIME_ZONE  # hours east of UTC

    def __post_init__(self) -> None:
        if not (-12.0 <= self.time_zone <= 14.0):
            raise ValueError("time_zone must be in -12..14 hours")


def lunar_month_11(year: int, params: GeneratorParams = GeneratorParams()) -> int:
    """JDN of the first day of lunar month 11 (the month holding the winter solstice) of `year`."""
    tz = params.time_zone
    off = to_jdn(31, 12, year) - _EPOCH_JDN
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, tz)
    # sun already past 270 deg: that new moon starts month 12
    if principal_term_index(nm, tz) >= 9:
        nm = new_moon_day(k - 1, tz)
    return nm


def leap_month_offset(a11: int, params: GeneratorParams = GeneratorParams()) -> int:
    """Position (1..12) after month 11 of the first month without a principal term."""
    tz = params.time_zone
    k = lunation_near(a11)
    i = 1
    arc = principal_term_index(new_moon_day(k + i, tz), tz)
    while True:
        last = arc
        i += 1
        arc = principal_term_index(new_moon_day(k + i, tz), tz)
        if arc == last or i >= 14:
            break
    return i - 1


def months_from_month_11(year: int, params: GeneratorParams = GeneratorParams()) -> List[LunarDate]:
    """Month starts from month 11 of `year` up to (excluding) month 11 of `year + 1`."""
    tz = params.time_zone
    a11 = lunar_month_11(year, params)
    b11 = lunar_month_11(year + 1, params)
    k = lunation_near(a11)
    count = 13 if b11 - a11 > 365 else 12
    leap_pos = leap_month_offset(a11, params) if count == 13 else None

    out: List[LunarDate] = []
    for i in range(count):
        raw = 11 + i
        if leap_pos is not None and i >= leap_pos:
            raw -= 1
        month, y = (raw - 12, year + 1) if raw > 12 else (raw, year)
        out.append(LunarDate(1, month, y, i == leap_pos, new_moon_day(k + i, tz)))
    return out


def compute_year_code(year: int, params: GeneratorParams = GeneratorParams()) -> int:
    starts = months_from_month_11(year - 1, params) + months_from_month_11(year, params)
    months = [m for m in starts if m.year == year]
    following = [m for m in starts if m.year > year]
    if not months or not following:
        raise RuntimeError(f"Could not bracket lunar year {year}")

    first = months[0]
    if first.month != 1 or first.leap:
        raise RuntimeError(f"Lunar year {year} does not start with month 1: {first}")

    ends = [m.jd for m in months[1:]] + [following[0].jd]
    month_days: Dict[int, int] = {}
    leap_month, leap_days = 0, SHORT_MONTH
    for m, end in zip(months, ends):
        n = end - m.jd
        if n not in (SHORT_MONTH, LONG_MONTH):
            raise RuntimeError(f"Month {m} has {n} days")
        if m.leap:
            leap_month, leap_days = m.month, n
        else:
            month_days[m.month] = n

    yc = YearCode(
        leap_month=leap_month,
        leap_month_days=leap_days,
        month_days=tuple(month_days[mm] for mm in range(1, 13)),
        tet_offset=first.jd - to_jdn(1, 1, year),
    )
    return yc.pack()


def compute_century(century: int, params: GeneratorParams = GeneratorParams()) -> Tuple[int, ...]:
    log.info("computing year codes for %d..%d (UTC%+g)", century * 100, century * 100 + 99, params.time_zone)
    return tuple(compute_year_code(y, params) for y in range(century * 100, century * 100 + 100))


def format_century(century: int, codes: Tuple[int, ...], per_line: int = 10) -> str:
    lines = [f"TK{century + 1} = ("]
    for i in range(0, len(codes), per_line):
        lines.append("    " + ", ".join(f"0x{c:06x}" for c in codes[i : i + per_line]) + ",")
    lines.append(")")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="amlich year-codes",
        description="Design tool: generate packed lunar year codes per century.",
    )
    parser.add_argument("--from-century", type=int, default=12, help="First century index (12 = years 1200..1299)")
    parser.add_argument("--to-century", type=int, default=21, help="Last century index, inclusive")
    parser.add_argument("--time-zone", type=float, default=VN_TIME_ZONE, help="Meridian in hours east of UTC")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Compare against the stored tables instead of printing them.",
    )
    args = parser.parse_args(argv)

    if args.to_century < args.from_century:
        raise SystemExit("--to-century must be >= --from-century")

    params = GeneratorParams(time_zone=args.time_zone)

    if args.check:
        from ..tables.year_codes import CENTURIES

        mismatches = 0
        for c in range(args.from_century, args.to_century + 1):
            stored = CENTURIES.get(c)
            if stored is None:
                print(f"century {c}: no stored table")
                mismatches += 1
                continue
            for y, (got, want) in enumerate(zip(compute_century(c, params), stored), start=c * 100):
                if got != want:
                    mismatches += 1
                    print(f"{y}: computed 0x{got:06x}, stored 0x{want:06x}")
        print(f"{mismatches} mismatch(es)")
        return 1 if mismatches else 0

    for c in range(args.from_century, args.to_century + 1):
        print(format_century(c, compute_century(c, params)))
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
