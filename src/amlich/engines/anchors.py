"""
amlich.engines.anchors
----------------------
Year-level anchors of the lunisolar calendar.

Month 11 is, by rule, the lunar month containing the December solstice
(sun entering the 270° sector). The month-11 new moons of two consecutive
solar years bracket a lunar year; when 13 lunations fit between them, the
first lunation that contains no sector change (no major solar term) is the
leap month.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

from ..core.errors import InternalInvariantError
from ..core.time import civil_to_jdn
from .newmoon import LUNATION_EPOCH_JDN, SYNODIC_MONTH, new_moon_jdn
from .solar import sun_longitude_sector

LOGGER = logging.getLogger(__name__)

WINTER_SOLSTICE_SECTOR = 9  # 270° / 30°
MAX_ANCHOR_STEPS_BACK = 1
MAX_LEAP_SCAN = 14

# Anchor estimate epoch; differs from LUNATION_EPOCH_JDN by the fraction only.
_ANCHOR_EPOCH_JDN = 2415021


@lru_cache(maxsize=8192)
def month11_anchor(solar_year: int, tz_hours: float) -> int:
    """JDN of the new moon starting the lunar month that contains the December solstice."""
    off = civil_to_jdn(31, 12, solar_year) - _ANCHOR_EPOCH_JDN
    k = int(math.floor(off / SYNODIC_MONTH))
    for step in range(MAX_ANCHOR_STEPS_BACK + 1):
        nm = new_moon_jdn(k - step, tz_hours)
        if sun_longitude_sector(nm, tz_hours) < WINTER_SOLSTICE_SECTOR:
            if step:
                LOGGER.debug("month-11 anchor for %d stepped back to k=%d", solar_year, k - step)
            return nm

    LOGGER.error("month-11 anchor for %d (tz=%s) not found within %d step(s)",
                 solar_year, tz_hours, MAX_ANCHOR_STEPS_BACK)
    raise InternalInvariantError(f"month-11 anchor for {solar_year} not found")


@lru_cache(maxsize=8192)
def leap_month_offset(a11: int, tz_hours: float) -> int:
    """
    Offset (in lunations after the month-11 anchor `a11`) of the leap month.

    Only meaningful when the following anchor lies 13 lunations later.
    """
    k = int(math.floor((a11 - LUNATION_EPOCH_JDN) / SYNODIC_MONTH + 0.5))
    last = sun_longitude_sector(new_moon_jdn(k + 1, tz_hours), tz_hours)
    for i in range(2, MAX_LEAP_SCAN + 1):
        arc = sun_longitude_sector(new_moon_jdn(k + i, tz_hours), tz_hours)
        if arc == last:
            return i - 1
        last = arc

    LOGGER.error("no leap month within %d lunations after anchor JDN %d (tz=%s)",
                 MAX_LEAP_SCAN, a11, tz_hours)
    raise InternalInvariantError(f"leap month scan after JDN {a11} exceeded {MAX_LEAP_SCAN} lunations")


def lunations_between(a: int, b: int) -> int:
    """Whole synodic months between two new-moon JDNs: 12 or 13 for consecutive anchors."""
    return int(math.floor((b - a) / SYNODIC_MONTH + 0.5))
