from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# exit status for a date outside the year-code table
EXIT_UNSUPPORTED = 2


def _parse_ymd(s: str) -> tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_day(info) -> None:
    print(info)
    print(f"  Năm   {info.year_can_chi}")
    print(f"  Tháng {info.month_can_chi}")
    print(f"  Ngày  {info.day_can_chi}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")


def cmd_day(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich day", description="Solar -> lunar date with Can-Chi labels")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    y, m, d = args.date
    info = amlich.day_info(d, m, y, attributes=tuple(args.attr))
    if info is None:
        lo, hi = amlich.supported_range()
        print(f"{y:04d}-{m:02d}-{d:02d}: not supported (years {lo}..{hi})", file=sys.stderr)
        return EXIT_UNSUPPORTED
    _print_day(info)
    return 0


def cmd_solar(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich solar", description="Lunar -> solar date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="the month is the leap (nhuận) month")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        info = amlich.from_lunar(args.day, args.month, args.year, args.leap, attributes=tuple(args.attr))
    except ValueError as e:
        raise SystemExit(str(e))
    if info is None:
        lo, hi = amlich.supported_range()
        print(f"lunar year {args.year}: not supported (years {lo}..{hi})", file=sys.stderr)
        return EXIT_UNSUPPORTED
    _print_day(info)
    return 0


def cmd_year(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich year", description="Months of a lunar year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    Y = args.year
    try:
        months = amlich.months_in_year(Y)
    except amlich.YearNotSupportedError as e:
        print(e, file=sys.stderr)
        return EXIT_UNSUPPORTED

    print(f"Năm {amlich.year_can_chi(Y)} ({Y}), code=0x{amlich.lookup_year_code(Y):06x}")
    print(f"{'Tháng':<8}{'Can Chi':<12}{'Bắt đầu':<12}Số ngày")
    for m in months:
        label = f"{m.month}{'+' if m.leap else ''}"
        start = amlich.from_jdn(m.jd)
        n = amlich.days_in_month(Y, m.month, leap=m.leap)
        print(f"{label:<8}{amlich.month_can_chi(m.month, Y):<12}{str(start):<12}{n}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese lunar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # conversions
    sub.add_parser("day", help="Solar -> lunar date (YYYY-MM-DD)")
    sub.add_parser("solar", help="Lunar -> solar date (Y M D [--leap])")
    sub.add_parser("year", help="Print the months of a lunar year")

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/solar month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print Tet table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "tet-scatter", "round-trip", "ephem-new-moons"],
        help="Which diagnostic to run",
    )

    # design tools
    sub.add_parser("year-codes", help="Generate packed year-code tables from the astronomical model.")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("amlich.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("amlich.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-months": "amlich.diagnostics.leap_months",
            "tet-scatter": "amlich.diagnostics.tet_scatter",
            "round-trip": "amlich.diagnostics.round_trip",
            "ephem-new-moons": "amlich.diagnostics.ephem.validate_new_moons",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "year-codes":
        return _run_module_main("amlich.design.year_codes", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
