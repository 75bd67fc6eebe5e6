"""
amlich.attributes.sexagenary
----------------------------
Can-Chi (stem-branch) names and the other cyclic day annotations.

Every cycle is a residue of the JDN or of the lunar (year, month) label.
The offsets below were fixed on a single reference day:

    2024-02-10  JDN 2460351  lunar 1/1/2024 (Tết Giáp Thìn)
    day Giáp Thìn, month Bính Dần, year Giáp Thìn, sao Đê, trực Mãn
"""

from __future__ import annotations

from typing import Tuple

from ..core.time import jdn_to_civil
from ..core.types import CanChi, LunarDate, SexagenaryAnnotation
from ..engines.solar import sun_longitude_sector
from .tables import (
    AUSPICIOUS_HOUR_TABLE,
    BRANCHES,
    DAY_ACTIVITIES,
    FIVE_ELEMENT_NAMES,
    LUNAR_MANSIONS,
    SOLAR_TERMS,
)

DAY_STEM_OFFSET = 9
DAY_BRANCH_OFFSET = 1
MONTH_STEM_OFFSET = 3
MONTH_BRANCH_OFFSET = 1
YEAR_STEM_OFFSET = 6
YEAR_BRANCH_OFFSET = 8
MANSION_OFFSET = 11

SOLAR_TERM_SECTORS = 24
SOLAR_TERM_SPLIT_DAY = 15


def can_chi(stem: int, branch: int) -> CanChi:
    return CanChi(stem % 10, branch % 12)


def day_can_chi(jdn: int) -> CanChi:
    return can_chi(jdn + DAY_STEM_OFFSET, jdn + DAY_BRANCH_OFFSET)


def month_can_chi(month: int, year: int) -> CanChi:
    """Month 1 is always a Dần month; its stem follows the year stem."""
    return can_chi(year * 12 + month + MONTH_STEM_OFFSET, month + MONTH_BRANCH_OFFSET)


def year_can_chi(year: int) -> CanChi:
    return can_chi(year + YEAR_STEM_OFFSET, year + YEAR_BRANCH_OFFSET)


def day_activity(day_branch: int, month_branch: int) -> str:
    """Trực of the day: Kiến on the day whose branch equals the month branch."""
    return DAY_ACTIVITIES[(day_branch - month_branch + 12) % 12]


def lunar_mansion(jdn: int) -> str:
    return LUNAR_MANSIONS[(jdn + MANSION_OFFSET) % 28]


def sexagenary_position(stem: int, branch: int) -> int:
    """
    Position 0..59 of a stem/branch pair in the 60-cycle (Giáp Tý = 0).

    Stem and branch advance together, so only pairs of equal parity occur;
    any other pair raises ValueError.
    """
    stem %= 10
    branch %= 12
    if stem % 2 != branch % 2:
        raise ValueError(
            f"{can_chi(stem, branch).name} is not a sexagenary combination (parity mismatch)"
        )
    return (6 * stem - 5 * branch) % 60


def five_element_name(stem: int, branch: int) -> str:
    return FIVE_ELEMENT_NAMES[sexagenary_position(stem, branch)]


def hour_label(branch: int) -> str:
    """Double-hour label, e.g. hour_label(2) == 'Dần (3h-5h)'."""
    branch %= 12
    return f"{BRANCHES[branch]} ({(2 * branch + 23) % 24}h-{2 * branch + 1}h)"


def auspicious_hours(day_branch: int) -> Tuple[str, ...]:
    return tuple(hour_label(b) for b in AUSPICIOUS_HOUR_TABLE[day_branch % 12])


def solar_term(jdn: int, tz_hours: float) -> str:
    """
    Approximate tiết khí, as printed on the almanac page.

    The 30° sector of the sun at local midnight names a pair of terms
    (sector * 2); the second term of the pair is used from the 16th of the
    civil month onwards. The name can lag or lead the true term by days.
    """
    day = jdn_to_civil(jdn)[0]
    index = sun_longitude_sector(jdn, tz_hours) * 2 + (1 if day > SOLAR_TERM_SPLIT_DAY else 0)
    return SOLAR_TERMS[index % SOLAR_TERM_SECTORS]


def solar_term_by_longitude(jdn: int, tz_hours: float) -> str:
    """The 15° bucket of the sun at local midnight: a term starts on the first day past its longitude."""
    return SOLAR_TERMS[sun_longitude_sector(jdn, tz_hours, SOLAR_TERM_SECTORS)]


def annotate(jdn: int, lunar: LunarDate, tz_hours: float) -> SexagenaryAnnotation:
    day = day_can_chi(jdn)
    month = month_can_chi(lunar.month, lunar.year)
    return SexagenaryAnnotation(
        day_can_chi=day,
        month_can_chi=month,
        year_can_chi=year_can_chi(lunar.year),
        lunar_mansion=lunar_mansion(jdn),
        day_activity=day_activity(day.branch, month.branch),
        five_element=five_element_name(day.stem, day.branch),
        auspicious_hours=auspicious_hours(day.branch),
        solar_term=solar_term(jdn, tz_hours),
    )
