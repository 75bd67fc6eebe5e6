"""
amlich.holidays
---------------
Fixed-date observances of the Vietnamese year, keyed either by the civil
(solar) date or by the lunar date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Literal, Optional, Tuple

from .core.types import LunarDate


@dataclass(frozen=True)
class Holiday:
    day: int
    month: int
    title: str
    calendar: Literal["solar", "lunar"]


SOLAR_HOLIDAYS: Tuple[Holiday, ...] = (
    Holiday(1, 1, "Tết Dương Lịch", "solar"),
    Holiday(14, 2, "Lễ Tình Nhân (Valentine)", "solar"),
    Holiday(27, 2, "Ngày Thầy Thuốc Việt Nam", "solar"),
    Holiday(8, 3, "Quốc Tế Phụ Nữ", "solar"),
    Holiday(30, 4, "Giải Phóng Miền Nam", "solar"),
    Holiday(1, 5, "Quốc Tế Lao Động", "solar"),
    Holiday(1, 6, "Quốc Tế Thiếu Nhi", "solar"),
    Holiday(2, 9, "Quốc Khánh Việt Nam", "solar"),
    Holiday(20, 10, "Ngày Phụ Nữ Việt Nam", "solar"),
    Holiday(20, 11, "Ngày Nhà Giáo Việt Nam", "solar"),
    Holiday(22, 12, "Ngày Quân Đội Nhân Dân", "solar"),
    Holiday(25, 12, "Lễ Giáng Sinh", "solar"),
)

# Observed in the regular month only; a leap month repeats none of them.
LUNAR_HOLIDAYS: Tuple[Holiday, ...] = (
    Holiday(1, 1, "Mùng 1 Tết Nguyên Đán", "lunar"),
    Holiday(2, 1, "Mùng 2 Tết Nguyên Đán", "lunar"),
    Holiday(3, 1, "Mùng 3 Tết Nguyên Đán", "lunar"),
    Holiday(15, 1, "Tết Nguyên Tiêu (Rằm Tháng Giêng)", "lunar"),
    Holiday(3, 3, "Tết Hàn Thực", "lunar"),
    Holiday(10, 3, "Giỗ Tổ Hùng Vương", "lunar"),
    Holiday(15, 4, "Lễ Phật Đản", "lunar"),
    Holiday(5, 5, "Tết Đoan Ngọ", "lunar"),
    Holiday(15, 7, "Lễ Vu Lan", "lunar"),
    Holiday(15, 8, "Tết Trung Thu", "lunar"),
    Holiday(23, 12, "Ông Công Ông Táo", "lunar"),
)

FIRST_DAY = "Mùng 1"
FULL_MOON_DAY = "Rằm"


def holidays_on(d: date, lunar: LunarDate) -> List[Holiday]:
    """Solar holidays of `d` followed by lunar holidays of `lunar` (the same day)."""
    out = [h for h in SOLAR_HOLIDAYS if h.day == d.day and h.month == d.month]
    if not lunar.leap:
        out.extend(h for h in LUNAR_HOLIDAYS if h.day == lunar.day and h.month == lunar.month)
    return out


def special_day(lunar: LunarDate) -> Optional[str]:
    if lunar.day == 1:
        return FIRST_DAY
    if lunar.day == 15:
        return FULL_MOON_DAY
    return None
