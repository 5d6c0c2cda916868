#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from typing import List, Optional, Set

import amlich
from amlich.ephemeris import DEFAULT_EPHEMERIS, load_ephemeris
from amlich.reference.solar import VN_TIME_ZONE


def ephemeris_new_moon_days(ts, eph, start_year: int, end_year: int, time_zone: float) -> Set[int]:
    """Local civil JDNs of all new moons in the solar years start_year-1 .. end_year+1."""
    from skyfield import almanac

    t0 = ts.utc(start_year - 1, 1, 1)
    t1 = ts.utc(end_year + 2, 1, 1)
    times, phases = almanac.find_discrete(t0, t1, almanac.moon_phases(eph))
    out: Set[int] = set()
    for t, ph in zip(times, phases):
        if int(ph) == 0:
            # JD (UT) -> civil JDN at the local meridian
            out.add(math.floor(t.ut1 + 0.5 + time_zone / 24.0))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check table month starts against JPL ephemeris new moons.")
    p.add_argument("--start-year", type=int, default=1901)
    p.add_argument("--end-year", type=int, default=2049)
    p.add_argument("--ephemeris", default=DEFAULT_EPHEMERIS, help="BSP file name (default: de421.bsp)")
    p.add_argument("--data-dir", default=".", help="Directory holding/downloading the BSP file")
    p.add_argument("--time-zone", type=float, default=VN_TIME_ZONE)
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    ts, eph = load_ephemeris(args.ephemeris, args.data_dir)
    nm_days = ephemeris_new_moon_days(ts, eph, args.start_year, args.end_year, args.time_zone)

    total = 0
    mismatches = 0
    for Y in range(args.start_year, args.end_year + 1):
        for m in amlich.months_in_year(Y):
            total += 1
            if m.jd not in nm_days:
                mismatches += 1
                near = min(nm_days, key=lambda j: abs(j - m.jd))
                print(f"{Y} month {m.month}{'+' if m.leap else ''}: table {amlich.from_jdn(m.jd)}, "
                      f"ephemeris {amlich.from_jdn(near)}")

    print(f"{total} month starts checked, {mismatches} differ from {args.ephemeris}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
