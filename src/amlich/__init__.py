"""amlich public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    compute_lunar_date,
    compute_annotation,
    find_civil_date,
    day_info,
    to_gregorian,
    explain,
    list_engines,
    engine_info,
    get_calendar,
    make_engine,
    register_engine,
    months_in_year,
    month_bounds,
    new_year_day,
    days_in_month,
    month_days,
    holidays_for,
    upcoming_holidays,
    next_lunar_occurrence,
)
from .core.errors import AmlichError, EngineUnavailableError, InvalidLunarDateError, InternalInvariantError
from .core.types import CalendarSpec, CanChi, CivilDate, LunarDate, SexagenaryAnnotation

__all__ = [
    "compute_lunar_date",
    "compute_annotation",
    "find_civil_date",
    "day_info",
    "to_gregorian",
    "explain",
    "list_engines",
    "engine_info",
    "get_calendar",
    "make_engine",
    "register_engine",
    "months_in_year",
    "month_bounds",
    "new_year_day",
    "days_in_month",
    "month_days",
    "holidays_for",
    "upcoming_holidays",
    "next_lunar_occurrence",
    "AmlichError",
    "InvalidLunarDateError",
    "InternalInvariantError",
    "EngineUnavailableError",
    "CalendarSpec",
    "CanChi",
    "CivilDate",
    "LunarDate",
    "SexagenaryAnnotation",
]
