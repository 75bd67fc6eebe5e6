"""
amlich.engines.calendar
-----------------------
The Orchestrator. Binds the new-moon locator, the solar sectors and the
month-11 anchors into civil <-> lunisolar conversion for one time zone.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from ..core.errors import InternalInvariantError, InvalidLunarDateError
from ..core.time import civil_to_jdn, jdn_to_civil, to_jdn
from ..core.types import CivilDate, DayInfo, EngineId, LunarDate, LunarMonth
from .anchors import leap_month_offset, lunations_between, month11_anchor
from .newmoon import SYNODIC_MONTH, month_start_on_or_before, new_moon_jdn

LOGGER = logging.getLogger(__name__)

# Years over which the truncated series are trusted.
EPHEMERIS_MIN_YEAR = 1
EPHEMERIS_MAX_YEAR = 3000

MAX_SEARCH_DAYS = 440
MIN_LUNAR_DAY = 1
MAX_LUNAR_DAY = 30
# A lunar year spans at most 13 months after the month-11 anchor of the previous year.
_MONTHS_SCAN = 17


def _check_range(year: int) -> None:
    if not (EPHEMERIS_MIN_YEAR <= year <= EPHEMERIS_MAX_YEAR):
        LOGGER.warning(
            "year %d is outside the calibrated range %d..%d; result is best-effort",
            year, EPHEMERIS_MIN_YEAR, EPHEMERIS_MAX_YEAR,
        )


class LunisolarCalendar:
    """
    Civil (proleptic Gregorian) <-> lunisolar conversion in a fixed zone
    `tz_hours` east of Greenwich. Holds no mutable state; the anchor
    computations it relies on are memoised module-wide.
    """

    def __init__(self, id: EngineId, tz_hours: float):
        self.id = id
        self.tz_hours = tz_hours

    def __repr__(self) -> str:
        return f"LunisolarCalendar({self.id.name!r}, tz_hours={self.tz_hours})"

    # ---------------------------------------------------------
    # Forward: civil -> lunisolar
    # ---------------------------------------------------------

    def _convert(self, jdn: int, year: int) -> Tuple[LunarDate, Dict[str, Any]]:
        """Label civil day `jdn` (which lies in civil `year`). Returns (date, anchors)."""
        tz = self.tz_hours
        k, month_start = month_start_on_or_before(jdn, tz)

        a11 = month11_anchor(year, tz)
        b11 = a11
        if a11 >= month_start:
            lunar_year = year
            a11 = month11_anchor(year - 1, tz)
        else:
            lunar_year = year + 1
            b11 = month11_anchor(year + 1, tz)

        day = jdn - month_start + 1
        diff = int(math.floor((month_start - a11) / SYNODIC_MONTH + 0.5))
        month = diff + 11
        leap = False
        leap_offset: Optional[int] = None
        if lunations_between(a11, b11) == 13:
            leap_offset = leap_month_offset(a11, tz)
            if diff >= leap_offset:
                month = diff + 10
                leap = diff == leap_offset

        if month > 12:
            month -= 12
        if month >= 11 and diff < 4:
            lunar_year -= 1

        if not (MIN_LUNAR_DAY <= day <= MAX_LUNAR_DAY):
            LOGGER.error("lunar day %d out of range for JDN %d (tz=%s)", day, jdn, tz)
            raise InternalInvariantError(f"lunar day {day} computed for JDN {jdn}")

        anchors = {
            "jdn": jdn,
            "lunation": k,
            "month_start": month_start,
            "next_month_start": new_moon_jdn(k + 1, tz),
            "a11": a11,
            "b11": b11,
            "month_offset": diff,
            "leap_offset": leap_offset,
        }
        return LunarDate(day, month, lunar_year, leap, jdn), anchors

    def solar_to_lunar(self, day: int, month: int, year: int) -> LunarDate:
        _check_range(year)
        return self._convert(civil_to_jdn(day, month, year), year)[0]

    def from_jdn(self, jdn: int) -> LunarDate:
        year = jdn_to_civil(jdn)[2]
        _check_range(year)
        return self._convert(jdn, year)[0]

    # ---------------------------------------------------------
    # Inverse: lunisolar -> civil (bounded search)
    # ---------------------------------------------------------

    @staticmethod
    def search_window(year: int) -> Tuple[int, int]:
        """Jan 1 of `year` through the last day of February of `year + 1`, as JDNs."""
        return civil_to_jdn(1, 1, year), civil_to_jdn(1, 3, year + 1) - 1

    def lunar_to_solar(
        self, day: int, month: int, year: int, *, leap: Optional[bool] = None
    ) -> Optional[CivilDate]:
        """
        First civil day in the search window labelled (day, month, year).

        With leap=None the regular and the leap month both qualify and the
        earlier one wins; leap=True/False restricts the match. Returns None
        when the label does not exist.
        """
        _check_range(year)
        first, last = self.search_window(year)
        if last - first + 1 > MAX_SEARCH_DAYS:
            LOGGER.error("search window for %d spans %d days", year, last - first + 1)
            raise InternalInvariantError(f"search window for {year} exceeds {MAX_SEARCH_DAYS} days")

        jdn = first
        while jdn <= last:
            lunar, anchors = self._convert(jdn, jdn_to_civil(jdn)[2])
            month_match = (
                lunar.month == month
                and lunar.year == year
                and (leap is None or lunar.leap == leap)
            )
            if not month_match:
                # Every day up to the next new moon carries the same month label.
                jdn = anchors["next_month_start"]
                continue
            if lunar.day == day:
                d, m, y = jdn_to_civil(jdn)
                return CivilDate(y, m, d)
            if lunar.day > day:
                jdn = anchors["next_month_start"]
                continue
            jdn += day - lunar.day
        return None

    def require_civil_date(
        self, day: int, month: int, year: int, *, leap: Optional[bool] = None
    ) -> CivilDate:
        found = self.lunar_to_solar(day, month, year, leap=leap)
        if found is None:
            tag = {None: "", True: " (leap)", False: " (regular)"}[leap]
            raise InvalidLunarDateError(f"No civil date for lunar {day}/{month}/{year}{tag}")
        return found

    # ---------------------------------------------------------
    # Month-level tools
    # ---------------------------------------------------------

    def months_in_year(self, year: int) -> List[LunarMonth]:
        """Ordered lunar months of lunar `year` (12 or 13 records)."""
        tz = self.tz_hours
        k, _ = month_start_on_or_before(month11_anchor(year - 1, tz), tz)
        months: List[LunarMonth] = []
        for n in range(k, k + _MONTHS_SCAN):
            start = new_moon_jdn(n, tz)
            label, _ = self._convert(start, jdn_to_civil(start)[2])
            if label.year < year:
                continue
            if label.year > year:
                break
            months.append(LunarMonth(
                year=year,
                month=label.month,
                leap=label.leap,
                lunation=n,
                first_jdn=start,
                last_jdn=new_moon_jdn(n + 1, tz) - 1,
            ))
        return months

    def new_year_jdn(self, year: int) -> int:
        """JDN of day 1 of month 1 of lunar `year` (Tết)."""
        return self.month_bounds(year, 1)[0]

    def month_bounds(self, year: int, month: int, leap: bool = False) -> Tuple[int, int]:
        """(first_jdn, last_jdn) of lunar month `month` of `year`."""
        if not (1 <= month <= 12):
            raise ValueError(f"month must be 1..12, got {month}")
        for m in self.months_in_year(year):
            if m.month == month and m.leap == leap:
                return m.first_jdn, m.last_jdn
        raise ValueError(f"Year {year} has no {'leap ' if leap else ''}month {month}")

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "tz_hours": self.tz_hours}

    def day_info(self, d: date, *, debug: bool = False, annotate: bool = False) -> DayInfo:
        jdn = to_jdn(d)
        _check_range(d.year)
        lunar, anchors = self._convert(jdn, d.year)

        annotation = None
        if annotate:
            from ..attributes.sexagenary import annotate as annotate_day
            annotation = annotate_day(jdn, lunar, self.tz_hours)

        return DayInfo(
            civil_date=d,
            engine=self.id,
            tz_hours=self.tz_hours,
            lunar=lunar,
            annotation=annotation,
            debug=anchors if debug else None,
        )

    def to_gregorian(self, t: LunarDate, *, policy: str = "all") -> List[date]:
        """
        policy="all"   -> [date] or [] when the label does not exist
        policy="raise" -> [date], raising InvalidLunarDateError when it does not
        The leap flag of `t` is honoured exactly.
        """
        if policy not in ("all", "raise"):
            raise ValueError("policy must be 'all' or 'raise'")
        if policy == "raise":
            return [self.require_civil_date(t.day, t.month, t.year, leap=t.leap).to_date()]
        found = self.lunar_to_solar(t.day, t.month, t.year, leap=t.leap)
        return [] if found is None else [found.to_date()]

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True, annotate=True).__dict__
