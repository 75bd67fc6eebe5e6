from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec, EngineId


# ============================================================
# TIME ZONES
# ============================================================

# Offsets east of Greenwich at which new moons and solar sectors are
# reduced to civil days. The zone is the only parameter that distinguishes
# the national calendars built on the same rules.
TZ_VIETNAM = 7.0
TZ_CHINA = 8.0
TZ_KOREA = 9.0


# ============================================================
# NATIONAL CALENDARS
# ============================================================

VIETNAM = CalendarSpec(
    id=EngineId("vietnamese", "vietnam", "1.0"),
    tz_hours=TZ_VIETNAM,
    meta={"description": "Vietnamese âm lịch, UTC+7 (official since 1968)"},
)

CHINA = CalendarSpec(
    id=EngineId("chinese", "china", "1.0"),
    tz_hours=TZ_CHINA,
    meta={"description": "Chinese nongli rules reduced at UTC+8"},
)

KOREA = CalendarSpec(
    id=EngineId("korean", "korea", "1.0"),
    tz_hours=TZ_KOREA,
    meta={"description": "Korean eumnyeok rules reduced at UTC+9"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "vietnam": VIETNAM,
    "china": CHINA,
    "korea": KOREA,
}

DEFAULT_ENGINE = "vietnam"
