#!/usr/bin/env python3
"""
Grade the truncated new-moon and sun-longitude series against DE422.

For every lunation in the year range this reports
  * the new-moon residual in minutes (series - DE422),
  * how many new moons land on a different civil day in the chosen zone,
  * the sun-longitude residual at those instants in arcminutes, and how
    many new moons change their 30° sector (the month-11 and leap rules
    depend on it).
"""
from __future__ import annotations

import argparse
import math
from typing import List, Optional

from amlich.core.time import civil_to_jdn
from amlich.engines.deltat import delta_t_days
from amlich.engines.newmoon import LUNATIONS_PER_CENTURY, lunation_index_near, new_moon_jd
from amlich.engines.solar import sun_longitude
from amlich.ephemeris.de422 import DE422Lunar, signed_degrees


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


def civil_day(jd_ut: float, tz_hours: float) -> int:
    return math.floor(jd_ut + 0.5 + tz_hours / 24.0)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the truncated new-moon series against DE422.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--tz", type=float, default=7.0, help="Zone for civil-day comparison (default: 7)")
    p.add_argument("--out-png", default="", help="Optional residual plot")
    args = p.parse_args(argv)

    np = _need_numpy()

    print("Loading DE422...")
    eph = DE422Lunar.load()

    k0 = lunation_index_near(civil_to_jdn(1, 1, args.year_start))
    k1 = lunation_index_near(civil_to_jdn(31, 12, args.year_end))
    ks = range(k0, k1 + 1)

    # series instants are UT, DE422 wants TT
    series_ut = [new_moon_jd(k) for k in ks]
    dts = [delta_t_days(k / LUNATIONS_PER_CENTURY) for k in ks]
    truth = eph.new_moons_near(t + dt for t, dt in zip(series_ut, dts))

    moon_min = []
    sun_arcmin = []
    day_changes = 0
    sector_changes = 0
    for t_ut, dt, (t_tt, lon_true) in zip(series_ut, dts, truth):
        moon_min.append((t_ut + dt - t_tt) * 1440.0)
        if civil_day(t_ut, args.tz) != civil_day(t_tt - dt, args.tz):
            day_changes += 1

        lon_series = math.degrees(sun_longitude(t_tt - dt))
        sun_arcmin.append(signed_degrees(lon_series - lon_true) * 60.0)
        if int(lon_series // 30) != int(lon_true // 30):
            sector_changes += 1

    moon_min = np.array(moon_min)
    sun_arcmin = np.array(sun_arcmin)

    print(f"Lunations compared : {len(ks)} ({args.year_start}..{args.year_end})")
    print(f"New moon (minutes) : mean {moon_min.mean():+.2f}  rms {np.sqrt((moon_min ** 2).mean()):.2f}"
          f"  max |r| {np.abs(moon_min).max():.2f}")
    print(f"Civil-day changes  : {day_changes} at UTC{args.tz:+g}")
    print(f"Sun lon (arcmin)   : mean {sun_arcmin.mean():+.2f}  max |r| {np.abs(sun_arcmin).max():.2f}")
    print(f"Sector changes     : {sector_changes}")

    if args.out_png:
        plt = _need_matplotlib()
        years = [args.year_start + (k - k0) / (LUNATIONS_PER_CENTURY / 100.0) for k in ks]
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 6), sharex=True)
        ax1.scatter(years, moon_min, s=2, alpha=0.6)
        ax1.set_ylabel("New moon (min)")
        ax2.scatter(years, sun_arcmin, s=2, alpha=0.6, color="tab:orange")
        ax2.set_ylabel("Sun longitude (arcmin)")
        ax2.set_xlabel("Year")
        for ax in (ax1, ax2):
            ax.axhline(0.0, color="0.5", lw=0.8)
            ax.grid(True, alpha=0.3)
        fig.suptitle("Truncated series - DE422")
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
