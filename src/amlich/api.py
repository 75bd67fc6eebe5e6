from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import InvalidLunarDateError
from .core.types import CalendarSpec, DayInfo, LunarDate, LunarMonth, SexagenaryAnnotation
from .core.time import from_jdn, to_jdn
from .attributes.registry import compute_attributes
from .attributes.sexagenary import annotate as annotate_day
from .engines.factory import make_engine as _make_engine
from .engines.specs import DEFAULT_ENGINE
from .holidays import Holiday, holidays_on

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _engine(engine: str, tz: Optional[float] = None) -> CalendarEngine:
    """Registered engine `engine`, rebuilt in zone `tz` when one is given."""
    eng = _reg().get(engine)
    if tz is None or tz == eng.tz_hours:
        return eng
    return _make_engine(CalendarSpec(id=eng.id, tz_hours=tz))

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

# ============================================================
# Conversion
# ============================================================

def compute_lunar_date(d: date, tz: Optional[float] = None, *, engine: str = DEFAULT_ENGINE) -> LunarDate:
    return _engine(engine, tz).solar_to_lunar(d.day, d.month, d.year)

def find_civil_date(
    day: int,
    month: int,
    year: int,
    *,
    leap: Optional[bool] = None,
    engine: str = DEFAULT_ENGINE,
    tz: Optional[float] = None,
) -> Optional[date]:
    """Civil date of lunar (day, month, year); None if that lunar day does not exist."""
    found = _engine(engine, tz).lunar_to_solar(day, month, year, leap=leap)
    return None if found is None else found.to_date()

def compute_annotation(
    lunar: LunarDate, *, engine: str = DEFAULT_ENGINE, tz: Optional[float] = None
) -> SexagenaryAnnotation:
    eng = _engine(engine, tz)
    jdn = lunar.jdn
    if jdn is None:
        civil = eng.lunar_to_solar(lunar.day, lunar.month, lunar.year, leap=lunar.leap)
        if civil is None:
            raise InvalidLunarDateError(f"No civil date for lunar {lunar}")
        jdn = to_jdn(civil.to_date())
    return annotate_day(jdn, lunar, eng.tz_hours)

def day_info(
    d: date,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    annotate: bool = False,
    debug: bool = False,
    tz: Optional[float] = None,
) -> DayInfo:
    info = _engine(engine, tz).day_info(d, debug=debug, annotate=annotate)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def to_gregorian(t: LunarDate, *, engine: Optional[str] = None, policy: str = "all") -> List[date]:
    eng = _reg().get(engine if engine is not None else DEFAULT_ENGINE)
    return eng.to_gregorian(t, policy=policy)

def explain(d: date, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

# ============================================================
# Engines
# ============================================================

def get_calendar(name: str, *, tz: Optional[float] = None) -> CalendarEngine:
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown engine spec '{name}'")
    spec = ALL_SPECS[name]
    if tz is not None:
        spec = spec.tweak(tz_hours=tz)
    return _make_engine(spec)

def make_engine(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Month-level API
# ============================================================

def months_in_year(Y: int, *, engine: str = DEFAULT_ENGINE) -> List[LunarMonth]:
    return _reg().get(engine).months_in_year(Y)

def month_bounds(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE, as_date: bool = True) -> dict:
    first_jdn, last_jdn = _reg().get(engine).month_bounds(Y, M, is_leap_month)
    out = {"Y": Y, "M": M, "is_leap_month": is_leap_month, "first_jdn": first_jdn, "last_jdn": last_jdn}
    if as_date:
        out["first_date"] = from_jdn(first_jdn)
        out["last_date"] = from_jdn(last_jdn)
    return out

def new_year_day(Y: int, *, engine: str = DEFAULT_ENGINE, as_date: bool = True) -> dict:
    jdn = _reg().get(engine).new_year_jdn(Y)
    out = {"Y": Y, "jdn": jdn}
    if as_date:
        out["date"] = from_jdn(jdn)
    return out

def days_in_month(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE) -> List[Dict[str, Any]]:
    """Civil days of lunar month (Y, M): one row per day, lunar day 1 first."""
    first_jdn, last_jdn = _reg().get(engine).month_bounds(Y, M, is_leap_month)
    return [
        {"date": from_jdn(jdn), "jdn": jdn, "day": jdn - first_jdn + 1}
        for jdn in range(first_jdn, last_jdn + 1)
    ]

def month_days(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> List[Dict[str, Any]]:
    """Days of Gregorian month (year, month) with their lunar dates."""
    eng = _reg().get(engine)
    first = date(year, month, 1)
    rows = []
    d = first
    while d.month == month:
        rows.append({"date": d, "jdn": to_jdn(d), "lunar": eng.solar_to_lunar(d.day, d.month, d.year)})
        d += timedelta(days=1)
    return rows

# ============================================================
# Holidays
# ============================================================

def holidays_for(d: date, *, engine: str = DEFAULT_ENGINE) -> List[Holiday]:
    lunar = _reg().get(engine).solar_to_lunar(d.day, d.month, d.year)
    return holidays_on(d, lunar)

def upcoming_holidays(start: date, days: int = 60, *, engine: str = DEFAULT_ENGINE) -> List[Tuple[date, Holiday]]:
    """Holidays falling on `start` and the following `days - 1` days, in date order."""
    eng = _reg().get(engine)
    out: List[Tuple[date, Holiday]] = []
    for i in range(days):
        d = start + timedelta(days=i)
        lunar = eng.solar_to_lunar(d.day, d.month, d.year)
        out.extend((d, h) for h in holidays_on(d, lunar))
    return out

def next_lunar_occurrence(
    day: int,
    month: int,
    after: date,
    *,
    max_years: int = 10,
    engine: str = DEFAULT_ENGINE,
) -> Optional[date]:
    """
    First civil date on or after `after` carrying lunar (day, month) in a
    regular month. Years in which that day does not exist (a 30th in a
    29-day month) are skipped; None after `max_years` lunar years.
    """
    eng = _reg().get(engine)
    start_year = eng.solar_to_lunar(after.day, after.month, after.year).year
    for y in range(start_year, start_year + max_years + 1):
        found = eng.lunar_to_solar(day, month, y, leap=False)
        if found is not None and found.to_date() >= after:
            return found.to_date()
    return None
