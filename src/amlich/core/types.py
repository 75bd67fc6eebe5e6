from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

from ..attributes.tables import BRANCHES, STEMS

@dataclass(frozen=True)
class EngineId:
    family: Literal["vietnamese", "chinese", "korean", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class CivilDate:
    """Proleptic Gregorian date, astronomical year numbering (year 0 = 1 BCE)."""
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "CivilDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        # datetime.date only covers years 1..9999
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class LunarDate:
    day: int
    month: int
    year: int
    leap: bool = False
    jdn: Optional[int] = None

    def __str__(self) -> str:
        tag = " (leap)" if self.leap else ""
        return f"{self.day}/{self.month}/{self.year}{tag}"

@dataclass(frozen=True)
class LunarMonth:
    """One lunation labelled as a lunar month: [first_jdn, last_jdn]."""
    year: int
    month: int
    leap: bool
    lunation: int
    first_jdn: int
    last_jdn: int

    @property
    def length(self) -> int:
        return self.last_jdn - self.first_jdn + 1

@dataclass(frozen=True)
class CanChi:
    stem: int    # 0..9
    branch: int  # 0..11

    @property
    def stem_name(self) -> str:
        return STEMS[self.stem]

    @property
    def branch_name(self) -> str:
        return BRANCHES[self.branch]

    @property
    def name(self) -> str:
        return f"{self.stem_name} {self.branch_name}"

    @property
    def index(self) -> int:
        """Position 0..59 in the sexagenary cycle (0 = Giáp Tý)."""
        return (6 * self.stem - 5 * self.branch) % 60

    def __str__(self) -> str:
        return self.name

@dataclass(frozen=True)
class SexagenaryAnnotation:
    day_can_chi: CanChi
    month_can_chi: CanChi
    year_can_chi: CanChi
    lunar_mansion: str
    day_activity: str
    five_element: str
    auspicious_hours: Tuple[str, ...]
    solar_term: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day_can_chi.name,
            "month": self.month_can_chi.name,
            "year": self.year_can_chi.name,
            "lunar_mansion": self.lunar_mansion,
            "day_activity": self.day_activity,
            "five_element": self.five_element,
            "auspicious_hours": list(self.auspicious_hours),
            "solar_term": self.solar_term,
        }

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: EngineId
    tz_hours: float
    lunar: LunarDate
    annotation: Optional[SexagenaryAnnotation] = None
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a lunisolar calendar engine."""
    id: EngineId
    tz_hours: float
    meta: Dict[str, Any] = field(default_factory=dict)

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)
