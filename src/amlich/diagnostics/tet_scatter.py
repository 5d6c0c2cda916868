#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import amlich


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "amlich[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "amlich[diagnostics]"') from e


def day_of_year(d: amlich.SolarDate) -> int:
    return d.jd - amlich.to_jdn(1, 1, d.year) + 1


def days_since_winter_solstice(d: amlich.SolarDate) -> int:
    """Days since 22 December of the previous solar year, with Dec 22 = 1."""
    return d.jd - amlich.to_jdn(22, 12, d.year - 1) + 1


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        tet = amlich.new_year_day(int(Y))
        if metric == "doy":
            y[i] = float(day_of_year(tet))
        elif metric == "since-solstice":
            y[i] = float(days_since_winter_solstice(tet))
        else:
            raise ValueError("metric must be 'doy' or 'since-solstice'")

    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Tết dates across the table range.")
    p.add_argument("--start-year", type=int, default=1200)
    p.add_argument("--end-year", type=int, default=2199)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="tet_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-solstice", "doy"),
        default="doy",
        help="Y-axis metric (default: day of year).",
    )
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since winter solstice (Dec 22 = 1)")
    ax.set_title("Tết dates")

    x, y = build_series(np, args.start_year, args.end_year, metric=args.metric)
    ax.scatter(x, y, s=10, marker="o", c="tab:red", linewidths=0.0, alpha=0.45)

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="0.30", linewidth=1.8)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
