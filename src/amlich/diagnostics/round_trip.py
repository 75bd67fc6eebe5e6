from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import amlich


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_engines(s: str) -> List[str]:
    # "vietnam,china" -> ["vietnam", "china"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    engine: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        lunar = amlich.compute_lunar_date(d0, engine=engine)

        back_exact = amlich.to_gregorian(lunar, engine=engine, policy="all")
        if back_exact != [d0]:
            failures += 1
            print("\nFAIL (exact leap)")
            print("engine:", engine)
            print("d0:", d0)
            print("lunar:", lunar)
            print("back:", back_exact)
            print("explain:", amlich.explain(d0, engine=engine))
            if failures >= max_failures:
                return failures

        # Without the leap flag the regular month wins; only leap-month days may differ.
        back_any = amlich.find_civil_date(lunar.day, lunar.month, lunar.year, engine=engine)
        if back_any != d0 and not (lunar.leap and back_any is not None and back_any < d0):
            failures += 1
            print("\nFAIL (first match)")
            print("engine:", engine)
            print("d0:", d0)
            print("lunar:", lunar)
            print("back:", back_any)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: civil -> lunar -> civil.")
    p.add_argument("--engines", type=str, default="vietnam,china,korea",
                   help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per engine.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    engines = parse_engines(args.engines)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for eng in engines:
        print(f"Testing {eng} ...")
        f = roundtrip_test(eng, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
