from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import amlich


DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Vietnam", "vietnam"),
    ("China", "china"),
    ("Korea", "korea"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse calendar list from CLI.
    Example:
      --calendars "VN=vietnam,CN=china"
    If you pass just engines, names will be capitalized engines:
      --calendars "vietnam,china"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, eng = it.split("=", 1)
            out.append((name.strip(), eng.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the lunar New Year (Tết) date table for several calendars."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="",
        help='Comma list like "VN=vietnam,CN=china" (default: vietnam, china, korea).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--diff-only",
        action="store_true",
        help="Only print years in which the calendars disagree.",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in calendars]
    colw = [5] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    disagreements = 0
    for Y in range(Y0, Y1 + 1):
        dates = [amlich.new_year_day(Y, engine=eng)["date"] for _, eng in calendars]
        differ = len(set(dates)) > 1
        disagreements += differ
        if args.diff_only and not differ:
            continue
        row = [str(Y).ljust(colw[0])]
        for d, w in zip(dates, colw[1:]):
            row.append(fmt(d).ljust(w))
        if differ:
            row.append("*")
        print("  ".join(row))

    print(f"\nYears with differing New Year dates: {disagreements}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
