from __future__ import annotations

import argparse
import random
from typing import List, Optional

import amlich


def roundtrip_test(N: int, start_jd: int, end_jd: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jd = random.randint(start_jd, end_jd)
        s = amlich.from_jdn(jd)

        if amlich.to_jdn(s.day, s.month, s.year) != jd:
            failures += 1
            print("\nFAIL (jdn)")
            print("jd:", jd, "solar:", s)

        t = amlich.solar_to_lunar(s.day, s.month, s.year)
        if t is None:
            continue
        back = amlich.lunar_to_solar(t.day, t.month, t.year, t.leap)
        if back is None or back.jd != jd:
            failures += 1
            print("\nFAIL (lunar)")
            print("solar:", s)
            print("lunar:", t)
            print("back:", back)
        if failures >= max_failures:
            return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random solar -> lunar -> solar round trips.")
    p.add_argument("-N", type=int, default=5000)
    p.add_argument("--start", type=int, default=None, help="first solar year (default: table start)")
    p.add_argument("--end", type=int, default=None, help="last solar year (default: table end)")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    lo, hi = amlich.supported_range()
    start = lo if args.start is None else args.start
    end = hi if args.end is None else args.end
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(
        args.N,
        amlich.to_jdn(1, 1, start),
        amlich.to_jdn(31, 12, end),
        args.seed,
        max_failures=args.max_failures,
    )
    print(f"{args.N} samples in {start}..{end}: {failures} failure(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
