#!/usr/bin/env python3
"""
Leap months laid out on the 19-year (Metonic) cycle.

Each row is one cycle of 19 lunar years, each column a year within it, and a
filled cell carries the number of the month repeated that year. Seven of the
nineteen cells of a row are normally filled, and the pattern drifts slowly
from row to row. With --text the plain table is printed instead.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import amlich

METONIC_YEARS = 19


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


def leap_month_of(engine: str, Y: int) -> Optional[int]:
    """Number of the month repeated as a leap month in lunar year Y, or None."""
    for m in amlich.months_in_year(Y, engine=engine):
        if m.leap:
            return m.month
    return None


def leap_table(engine: str, start_year: int, end_year: int) -> List[Tuple[int, int]]:
    out = []
    for Y in range(start_year, end_year + 1):
        M = leap_month_of(engine, Y)
        if M is not None:
            out.append((Y, M))
    return out


def metonic_grid(engine: str, start_year: int, cycles: int) -> List[List[Optional[int]]]:
    """grid[c][i] = leap month of year start_year + 19*c + i, or None."""
    return [
        [leap_month_of(engine, start_year + METONIC_YEARS * c + i) for i in range(METONIC_YEARS)]
        for c in range(cycles)
    ]


def _plot(engines: List[str], start_year: int, cycles: int, out: str, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    fig, axes = plt.subplots(
        len(engines), 1,
        figsize=(9, 0.45 * cycles * len(engines) + 1.5),
        squeeze=False,
    )
    cmap = plt.get_cmap("tab20", 12)
    cmap.set_bad("white")

    for ax, engine in zip(axes[:, 0], engines):
        grid = metonic_grid(engine, start_year, cycles)
        Z = np.ma.masked_invalid(np.array(
            [[np.nan if m is None else m for m in row] for row in grid], dtype=float
        ))
        ax.imshow(Z, cmap=cmap, vmin=0.5, vmax=12.5, aspect="equal")
        for c, row in enumerate(grid):
            for i, m in enumerate(row):
                if m is not None:
                    ax.text(i, c, str(m), ha="center", va="center", fontsize=8)

        ax.set_xticks(range(METONIC_YEARS))
        ax.set_xticklabels([f"+{i}" for i in range(METONIC_YEARS)], fontsize=7)
        ax.set_yticks(range(cycles))
        ax.set_yticklabels([str(start_year + METONIC_YEARS * c) for c in range(cycles)], fontsize=7)
        ax.set_xticks(np.arange(-0.5, METONIC_YEARS), minor=True)
        ax.set_yticks(np.arange(-0.5, cycles), minor=True)
        ax.grid(which="minor", color="0.85", lw=0.6)
        ax.tick_params(which="both", length=0)
        tz = amlich.engine_info(engine)["tz_hours"]
        ax.set_title(f"{engine} (UTC{tz:+g})", fontsize=9)

    fig.suptitle(title)
    fig.tight_layout()
    fig.savefig(out, dpi=200)
    print(f"Saved: {out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap months on the 19-year cycle, one panel per engine.")
    p.add_argument("--start-year", type=int, default=1957, help="First year of the first cycle")
    p.add_argument("--end-year", type=int, default=2050)
    p.add_argument("--engines", default="vietnam,china", help="Comma-separated engine names")
    p.add_argument("--out", default="leap_months_metonic.png")
    p.add_argument("--title", default="Leap months by 19-year cycle")
    p.add_argument("--text", action="store_true",
                   help="Print the leap-month table instead of plotting (no numpy/matplotlib needed).")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")
    engines = [e.strip() for e in args.engines.split(",") if e.strip()]
    known = amlich.list_engines()
    for e in engines:
        if e not in known:
            raise SystemExit(f"Unknown engine '{e}'. Known: {sorted(known)}")

    if args.text:
        for e in engines:
            print(e)
            for Y, M in leap_table(e, args.start_year, args.end_year):
                print(f"  {Y}: leap month {M}")
        return 0

    cycles = -(-(args.end_year - args.start_year + 1) // METONIC_YEARS)
    _plot(engines, args.start_year, cycles, args.out, args.title)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
