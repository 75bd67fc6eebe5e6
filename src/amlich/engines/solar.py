"""
amlich.engines.solar
--------------------
Low-precision solar longitude (Meeus ch. 25, truncated): mean longitude,
mean anomaly and a three-term equation of centre. Good to roughly 0.01°,
i.e. a quarter of an hour of solar motion near a sector boundary.
"""

from __future__ import annotations

import math

from ..core.time import local_midnight_jd

J2000 = 2451545.0
TWO_PI = 2.0 * math.pi
DR = math.pi / 180.0


def sun_longitude(jd: float) -> float:
    """Solar ecliptic longitude in radians, wrapped to [0, 2π), at Julian Date `jd`."""
    T = (jd - J2000) / 36525.0
    T2 = T * T
    M = 357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2  # mean anomaly
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2                       # mean longitude
    C = (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(DR * M)
    C += (0.019993 - 0.000101 * T) * math.sin(DR * 2 * M) + 0.000290 * math.sin(DR * 3 * M)
    L = (L0 + C) * DR
    return L - TWO_PI * math.floor(L / TWO_PI)


def sun_longitude_sector(jdn: int, tz_hours: float, sectors: int = 12) -> int:
    """
    Sector index of the sun at the local midnight starting civil day `jdn`.

    sectors=12 gives 30° sectors 0..11 (sector 9 begins at the December
    solstice, 270°); sectors=24 gives the 15° solar-term buckets 0..23.
    """
    L = sun_longitude(local_midnight_jd(jdn, tz_hours))
    return int(L / TWO_PI * sectors)
