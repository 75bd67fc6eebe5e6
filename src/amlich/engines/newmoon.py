"""
amlich.engines.newmoon
----------------------
New-moon instants from a truncated Meeus-style periodic series.

Lunation k = 0 is the first new moon of 1900 (mean epoch JD 2415020.75933).
new_moon_jd(k) returns a UT Julian Date; new_moon_jdn(k, tz) returns the
civil day in the given zone on which that instant falls.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Tuple

from ..core.errors import InternalInvariantError
from .deltat import delta_t_days

LOGGER = logging.getLogger(__name__)

DR = math.pi / 180.0

NEW_MOON_EPOCH_JD = 2415020.75933
# JDN-domain epoch for the lunation estimate (mean epoch + local half-day).
LUNATION_EPOCH_JDN = 2415021.076998695
SYNODIC_MONTH = 29.530588853
LUNATIONS_PER_CENTURY = 1236.85

MAX_MONTH_START_STEPS = 2


def new_moon_jd(k: int) -> float:
    T = k / LUNATIONS_PER_CENTURY
    T2 = T * T
    T3 = T2 * T

    jd1 = NEW_MOON_EPOCH_JD + 29.53058868 * k + 0.0001178 * T2 - 0.000000155 * T3
    jd1 += 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * DR)

    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3     # sun anomaly
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3  # moon anomaly
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3     # moon arg. of latitude

    C1 = (0.1734 - 0.000393 * T) * math.sin(M * DR) + 0.0021 * math.sin(2 * DR * M)
    C1 = C1 - 0.4068 * math.sin(Mpr * DR) + 0.0161 * math.sin(DR * 2 * Mpr)
    C1 = C1 - 0.0004 * math.sin(DR * 3 * Mpr)
    C1 = C1 + 0.0104 * math.sin(DR * 2 * F) - 0.0051 * math.sin(DR * (M + Mpr))
    C1 = C1 - 0.0074 * math.sin(DR * (M - Mpr)) + 0.0004 * math.sin(DR * (2 * F + M))
    C1 = C1 - 0.0004 * math.sin(DR * (2 * F - M)) - 0.0006 * math.sin(DR * (2 * F + Mpr))
    C1 = C1 + 0.0010 * math.sin(DR * (2 * F - Mpr)) + 0.0005 * math.sin(DR * (2 * Mpr + M))

    return jd1 + C1 - delta_t_days(T)


@lru_cache(maxsize=8192)
def new_moon_jdn(k: int, tz_hours: float) -> int:
    return int(math.floor(new_moon_jd(k) + 0.5 + tz_hours / 24.0))


def lunation_index_near(jdn: int) -> int:
    """Mean-month estimate of the lunation in progress on `jdn`. Off by at most one."""
    return int(math.floor((jdn - LUNATION_EPOCH_JDN) / SYNODIC_MONTH))


def month_start_on_or_before(jdn: int, tz_hours: float) -> Tuple[int, int]:
    """
    Return (k, start) with new_moon_jdn(k) == start <= jdn < new_moon_jdn(k + 1).

    Starts from lunation_index_near and corrects by single steps; more than
    MAX_MONTH_START_STEPS corrections means the estimate is broken.
    """
    k = lunation_index_near(jdn)
    steps = 0
    while new_moon_jdn(k + 1, tz_hours) <= jdn:
        k += 1
        steps += 1
        if steps > MAX_MONTH_START_STEPS:
            break
    while steps <= MAX_MONTH_START_STEPS and new_moon_jdn(k, tz_hours) > jdn:
        k -= 1
        steps += 1

    if steps > MAX_MONTH_START_STEPS:
        LOGGER.error("month start search for JDN %d (tz=%s) did not settle", jdn, tz_hours)
        raise InternalInvariantError(
            f"month start search for JDN {jdn} exceeded {MAX_MONTH_START_STEPS} corrections"
        )
    if steps:
        LOGGER.debug("month start for JDN %d corrected by %d lunation(s) to k=%d", jdn, steps, k)
    return k, new_moon_jdn(k, tz_hours)
