"""
amlich.engines.factory
----------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations

from ..core.types import CalendarSpec
from .calendar import LunisolarCalendar


def make_engine(spec: CalendarSpec) -> LunisolarCalendar:
    """The universal entry point."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    return LunisolarCalendar(id=spec.id, tz_hours=spec.tz_hours)
