from __future__ import annotations

import argparse
from typing import List, Optional

import amlich


def ddmm(d: amlich.SolarDate) -> str:
    return f"{d.day:02d}/{d.month:02d}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the lunar New Year (Tết) table with Can-Chi and leap months.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("ddmm", "full"),
        default="ddmm",
        help="Display format of the Tết column (default: ddmm).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=1,
        help="After the table, list the years whose Tết falls in this solar month (default: 1=January).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    lo, hi = amlich.supported_range()
    if Y0 < lo or Y1 > hi:
        raise SystemExit(f"years must lie in {lo}..{hi}")

    def fmt(d: amlich.SolarDate) -> str:
        return ddmm(d) if args.dates == "ddmm" else str(d)

    headers = ["Year", "Can Chi", "Tết", "Leap", "Days"]
    colw = [5, 10, 11, 5, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[int, amlich.SolarDate]] = []

    for Y in range(Y0, Y1 + 1):
        tet = amlich.new_year_day(Y)
        leap = amlich.leap_month(Y)
        days = sum(amlich.days_in_month(Y, m.month, leap=m.leap) for m in amlich.months_in_year(Y))
        row = [str(Y), amlich.year_can_chi(Y), fmt(tet), str(leap) if leap else "-", str(days)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if tet.month == args.list_month:
            hits.append((Y, tet))

    print(f"\nTết occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    for Y, d in hits:
        print(f"{d}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
