# tests/test_sexagenary.py

import pytest

from amlich.attributes import sexagenary as sx
from amlich.attributes.tables import (
    AUSPICIOUS_HOUR_TABLE,
    BRANCHES,
    FIVE_ELEMENT_NAMES,
    LUNAR_MANSIONS,
    SOLAR_TERMS,
    STEMS,
)
from amlich.core.time import civil_to_jdn, from_jdn
from amlich.engines.solar import sun_longitude_sector
from amlich.core.types import CanChi, LunarDate

TET_2024_JDN = 2460351


def test_table_sizes():
    assert len(STEMS) == 10
    assert len(BRANCHES) == 12
    assert len(LUNAR_MANSIONS) == 28
    assert len(SOLAR_TERMS) == 24
    assert len(FIVE_ELEMENT_NAMES) == 60
    assert len(AUSPICIOUS_HOUR_TABLE) == 12

def test_reference_day_annotation():
    """
    2024-02-10, Tết Giáp Thìn: a Giáp Thìn day in month Bính Dần.
    """
    a = sx.annotate(TET_2024_JDN, LunarDate(1, 1, 2024, jdn=TET_2024_JDN), 7)
    assert a.day_can_chi == CanChi(0, 4)
    assert a.day_can_chi.name == "Giáp Thìn"
    assert a.day_can_chi.index == 40
    assert a.month_can_chi.name == "Bính Dần"
    assert a.year_can_chi.name == "Giáp Thìn"
    assert a.five_element == "Phúc Đăng Hỏa"
    assert a.lunar_mansion == "Đê"
    assert a.day_activity == "Mãn"
    assert a.solar_term == "Đại hàn"
    assert a.auspicious_hours == (
        "Dần (3h-5h)", "Thìn (7h-9h)", "Tỵ (9h-11h)",
        "Thân (15h-17h)", "Dậu (17h-19h)", "Hợi (21h-23h)",
    )

def test_as_dict():
    a = sx.annotate(TET_2024_JDN, LunarDate(1, 1, 2024), 7)
    d = a.as_dict()
    assert d["day"] == "Giáp Thìn"
    assert d["auspicious_hours"][0] == "Dần (3h-5h)"

def test_day_cycle_has_period_60():
    for jdn in range(TET_2024_JDN, TET_2024_JDN + 500):
        assert sx.day_can_chi(jdn) == sx.day_can_chi(jdn + 60)

def test_sixty_consecutive_days_are_distinct():
    names = {sx.day_can_chi(jdn).name for jdn in range(TET_2024_JDN, TET_2024_JDN + 60)}
    assert len(names) == 60

def test_sexagenary_position():
    for i in range(60):
        assert sx.sexagenary_position(i % 10, i % 12) == i
        assert CanChi(i % 10, i % 12).index == i

def test_parity_mismatch_is_rejected():
    with pytest.raises(ValueError):
        sx.sexagenary_position(0, 1)
    with pytest.raises(ValueError):
        sx.five_element_name(1, 0)

def test_year_names():
    assert sx.year_can_chi(1984).name == "Giáp Tý"
    assert sx.year_can_chi(2023).name == "Quý Mão"
    assert sx.year_can_chi(2025).name == "Ất Tỵ"

def test_month_names_follow_year_stem():
    """Month 1 is always Dần; Giáp/Kỷ years open with Bính Dần."""
    assert sx.month_can_chi(1, 2024).name == "Bính Dần"
    assert sx.month_can_chi(1, 2029).name == "Bính Dần"
    assert sx.month_can_chi(1, 2025).name == "Mậu Dần"
    assert sx.month_can_chi(12, 2024).name == "Đinh Sửu"
    assert sx.month_can_chi(1, 2025).branch == sx.month_can_chi(1, 2024).branch

def test_day_activity_starts_on_month_branch():
    assert sx.day_activity(2, 2) == "Kiến"
    assert sx.day_activity(1, 2) == "Bế"

def test_mansion_cycle():
    assert sx.lunar_mansion(TET_2024_JDN) == "Đê"
    assert sx.lunar_mansion(TET_2024_JDN + 28) == "Đê"
    assert sx.lunar_mansion(TET_2024_JDN - 2) == "Giác"

def test_hour_labels():
    assert sx.hour_label(0) == "Tý (23h-1h)"
    assert sx.hour_label(2) == "Dần (3h-5h)"
    assert sx.hour_label(11) == "Hợi (21h-23h)"

@pytest.mark.parametrize("branch", range(12))
def test_auspicious_hours_complete(branch):
    hours = sx.auspicious_hours(branch)
    assert len(hours) == 6
    assert len(set(hours)) == 6
    # rows repeat every six branches
    assert hours == sx.auspicious_hours(branch + 6)

@pytest.mark.parametrize("ymd, term", [
    ((2024, 1, 7), "Đông chí"),     # sector 9, first half of the month
    ((2024, 2, 10), "Đại hàn"),     # sector 10, first half
    ((2024, 3, 19), "Kinh trập"),   # sector 11, second half
    ((2024, 3, 21), "Thanh minh"),  # sector 0 just after the equinox, second half
    ((2024, 5, 10), "Cốc vũ"),      # sector 1, first half
])
def test_almanac_solar_term(ymd, term):
    y, m, d = ymd
    assert sx.solar_term(civil_to_jdn(d, m, y), 7) == term

def test_almanac_solar_term_splits_on_the_16th():
    """Days 1..15 take the even term of the sector, days 16.. the odd one."""
    jdn = civil_to_jdn(1, 1, 2024)
    for offset in range(366):
        d = jdn + offset
        day = from_jdn(d).day
        sector = sun_longitude_sector(d, 7)
        expected = SOLAR_TERMS[(2 * sector + (1 if day > 15 else 0)) % 24]
        assert sx.solar_term(d, 7) == expected

def test_solar_term_by_longitude_near_boundaries():
    assert sx.solar_term_by_longitude(civil_to_jdn(19, 3, 2024), 7) == "Kinh trập"
    assert sx.solar_term_by_longitude(civil_to_jdn(21, 3, 2024), 7) == "Xuân phân"
    assert sx.solar_term_by_longitude(civil_to_jdn(20, 12, 2024), 7) == "Đại tuyết"
    assert sx.solar_term_by_longitude(civil_to_jdn(22, 12, 2024), 7) == "Đông chí"
    assert sx.solar_term_by_longitude(TET_2024_JDN, 7) == "Lập xuân"
