"""
amlich.attributes.tables
------------------------
Fixed name cycles of the Vietnamese almanac. Everything here is an
immutable tuple; the index conventions are:

  STEMS[0]    = Giáp   (Thiên Can, 10)
  BRANCHES[0] = Tý     (Địa Chi, 12; also the 12 double-hours, Tý = 23h-1h)
  SOLAR_TERMS[0] = Xuân phân (sun at 0°, then every 15°)
"""

from __future__ import annotations

from typing import Tuple

STEMS: Tuple[str, ...] = (
    "Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý",
)

BRANCHES: Tuple[str, ...] = (
    "Tý", "Sửu", "Dần", "Mão", "Thìn", "Tỵ", "Ngọ", "Mùi", "Thân", "Dậu", "Tuất", "Hợi",
)

# Trực, indexed by (day branch - month branch) mod 12
DAY_ACTIVITIES: Tuple[str, ...] = (
    "Kiến", "Trừ", "Mãn", "Bình", "Định", "Chấp", "Phá", "Nguy", "Thành", "Thu", "Khai", "Bế",
)

# Nhị thập bát tú
LUNAR_MANSIONS: Tuple[str, ...] = (
    "Giác", "Cang", "Đê", "Phòng", "Tâm", "Vĩ", "Cơ",
    "Đẩu", "Ngưu", "Nữ", "Hư", "Nguy", "Thất", "Bích",
    "Khuê", "Lâu", "Vị", "Mão", "Tất", "Chủy", "Sâm",
    "Tỉnh", "Quỷ", "Liễu", "Tinh", "Trương", "Dực", "Chẩn",
)

SOLAR_TERMS: Tuple[str, ...] = (
    "Xuân phân", "Thanh minh", "Cốc vũ", "Lập hạ", "Tiểu mãn", "Mang chủng",
    "Hạ chí", "Tiểu thử", "Đại thử", "Lập thu", "Xử thử", "Bạch lộ",
    "Thu phân", "Hàn lộ", "Sương giáng", "Lập đông", "Tiểu tuyết", "Đại tuyết",
    "Đông chí", "Tiểu hàn", "Đại hàn", "Lập xuân", "Vũ thủy", "Kinh trập",
)

# Nạp âm, indexed by position 0..59 in the sexagenary cycle (Giáp Tý = 0).
# Each name covers two consecutive positions.
_FIVE_ELEMENT_PAIRS: Tuple[str, ...] = (
    "Hải Trung Kim", "Lư Trung Hỏa", "Đại Lâm Mộc", "Lộ Bàng Thổ", "Kiếm Phong Kim",
    "Sơn Đầu Hỏa", "Giản Hạ Thủy", "Thành Đầu Thổ", "Bạch Lạp Kim", "Dương Liễu Mộc",
    "Tuyền Trung Thủy", "Ốc Thượng Thổ", "Tích Lịch Hỏa", "Tùng Bách Mộc", "Trường Lưu Thủy",
    "Sa Trung Kim", "Sơn Hạ Hỏa", "Bình Địa Mộc", "Bích Thượng Thổ", "Kim Bạch Kim",
    "Phúc Đăng Hỏa", "Thiên Hà Thủy", "Đại Trạch Thổ", "Thoa Xuyến Kim", "Tang Đố Mộc",
    "Đại Khê Thủy", "Sa Trung Thổ", "Thiên Thượng Hỏa", "Thạch Lựu Mộc", "Đại Hải Thủy",
)
FIVE_ELEMENT_NAMES: Tuple[str, ...] = tuple(name for name in _FIVE_ELEMENT_PAIRS for _ in range(2))

# Giờ hoàng đạo: branch indices of the six favourable double-hours,
# one row per day branch. Rows repeat with period 6.
_TY_NGO = (0, 1, 3, 6, 8, 9)
_SUU_MUI = (2, 3, 5, 7, 9, 11)
_DAN_THAN = (0, 1, 4, 5, 7, 8)
_MAO_DAU = (0, 2, 3, 6, 8, 10)
_THIN_TUAT = (2, 4, 5, 8, 9, 11)
_TY_HOI = (1, 4, 6, 7, 10, 11)

AUSPICIOUS_HOUR_TABLE: Tuple[Tuple[int, ...], ...] = (
    _TY_NGO,     # Tý
    _SUU_MUI,    # Sửu
    _DAN_THAN,   # Dần
    _MAO_DAU,    # Mão
    _THIN_TUAT,  # Thìn
    _TY_HOI,     # Tỵ
    _TY_NGO,     # Ngọ
    _SUU_MUI,    # Mùi
    _DAN_THAN,   # Thân
    _MAO_DAU,    # Dậu
    _THIN_TUAT,  # Tuất
    _TY_HOI,     # Hợi
)

# Monday-first, matching date.weekday()
WEEKDAYS: Tuple[str, ...] = ("T2", "T3", "T4", "T5", "T6", "T7", "CN")
