from __future__ import annotations

from datetime import timedelta
import argparse

import amlich
from amlich.attributes.tables import WEEKDAYS


def dow_header() -> str:
    return "  ".join(w.ljust(6) for w in WEEKDAYS).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print("  ".join(c[0] for c in wk))
        print("  ".join(c[1] for c in wk))
    print()


def to_weeks(first_weekday: int, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first_weekday)]  # Monday=0
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


def lunar_month_calendar(engine: str, Y: int, M: int, is_leap: bool) -> None:
    rows = amlich.days_in_month(Y, M, is_leap_month=is_leap, engine=engine)
    d0 = rows[0]["date"]
    d1 = rows[-1]["date"]
    cells = [(f"{r['day']:2d}", f"{r['date'].month:02d}-{r['date'].day:02d}") for r in rows]

    leap_tag = "L" if is_leap else ""
    title = f"{engine} lunar month  Y={Y}  M={M}{leap_tag}   ({d0} .. {d1})"
    print_grid(title, to_weeks(d0.weekday(), cells))


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    cells = []
    rows = amlich.month_days(gy, gm, engine=engine)
    for r in rows:
        t = r["lunar"]
        leap_tag = "L" if t.leap else ""
        # Day 1 of a lunar month shows the month number as well
        bot = f"{t.day}/{t.month}{leap_tag}" if t.day == 1 else f"{t.day:2d}"
        cells.append((f"{r['date'].day:2d}", bot))

    title = f"{engine} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, to_weeks(rows[0]["date"].weekday(), cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="vietnam", help="vietnam|china|korea (default: vietnam)")

    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2025 6)")
    p.add_argument("--leap", action="store_true",
                   help="If set, print the leap instance of the lunar month.")

    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 2)")

    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        # sensible default demo
        lunar_month_calendar(args.engine, Y=2025, M=1, is_leap=False)
        gregorian_month_calendar(args.engine, gy=2025, gm=2)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(args.engine, Y=Y, M=M, is_leap=args.leap)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
