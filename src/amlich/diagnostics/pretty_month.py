from __future__ import annotations

import argparse
import calendar as pycal

import amlich


def dow_header() -> str:
    return "CN     T2     T3     T4     T5     T6     T7"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def to_weeks(first_jd: int, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first_jd + 1) % 7  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in cells:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def lunar_month_calendar(Y: int, M: int, is_leap: bool) -> None:
    first, last = amlich.month_bounds(Y, M, leap=is_leap)

    cells = []
    for jd in range(first.jd, last.jd + 1):
        s = amlich.from_jdn(jd)
        cells.append((f"{jd - first.jd + 1:2d}", f"{s.day:02d}/{s.month:02d}"))

    leap_tag = " nhuận" if is_leap else ""
    title = f"Tháng {M}{leap_tag} năm {amlich.year_can_chi(Y)} ({Y})   ({first} .. {last})"
    print_grid(title, to_weeks(first.jd, cells))


def solar_month_calendar(gy: int, gm: int) -> None:
    last_day = pycal.monthrange(gy, gm)[1]

    cells = []
    for d in range(1, last_day + 1):
        lunar = amlich.solar_to_lunar(d, gm, gy)
        if lunar is None:
            bot = "--"
        else:
            leap_tag = "+" if lunar.leap else ""
            bot = f"{lunar.day:02d}/{lunar.month:02d}{leap_tag}"
        cells.append((f"{d:2d}", bot))

    title = f"Tháng {gm:02d}/{gy} (dương lịch)"
    print_grid(title, to_weeks(amlich.to_jdn(1, gm, gy), cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a solar-month calendar with paired labels."
    )
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2023 2)")
    p.add_argument("--leap", action="store_true",
                   help="If set, the lunar month is the leap instance.")

    p.add_argument("--solar", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Solar month to print: GY GM (e.g. 2023 3)")

    args = p.parse_args(argv)

    if not args.lunar and not args.solar:
        lunar_month_calendar(Y=2023, M=2, is_leap=True)
        solar_month_calendar(gy=2023, gm=3)
        return 0

    if args.lunar:
        Y, M = args.lunar
        try:
            lunar_month_calendar(Y=Y, M=M, is_leap=args.leap)
        except ValueError as e:
            raise SystemExit(str(e))

    if args.solar:
        gy, gm = args.solar
        solar_month_calendar(gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
