# tests/test_conversion.py

import logging
import random
from datetime import date, timedelta

import pytest

from amlich.core.errors import InternalInvariantError, InvalidLunarDateError
from amlich.core.time import civil_to_jdn, to_jdn
from amlich.core.types import CivilDate, LunarDate
from amlich.engines.calendar import LunisolarCalendar, MAX_SEARCH_DAYS
from amlich.engines.factory import make_engine
from amlich.engines.specs import CHINA, VIETNAM


@pytest.fixture(scope="module")
def vn():
    return make_engine(VIETNAM)

@pytest.fixture(scope="module")
def cn():
    return make_engine(CHINA)

def lunar_tuple(cal, d: date):
    t = cal.solar_to_lunar(d.day, d.month, d.year)
    return (t.day, t.month, t.year, t.leap)


# ---------------------------------------------------------
# Civil -> lunar
# ---------------------------------------------------------

@pytest.mark.parametrize("d, expected", [
    (date(2024, 2, 10), (1, 1, 2024, False)),
    (date(2024, 2, 9), (30, 12, 2023, False)),
    (date(2025, 1, 29), (1, 1, 2025, False)),
    (date(2023, 1, 22), (1, 1, 2023, False)),
    (date(2020, 1, 25), (1, 1, 2020, False)),
    (date(2000, 2, 5), (1, 1, 2000, False)),
    (date(2000, 1, 1), (25, 11, 1999, False)),
    (date(2024, 1, 1), (20, 11, 2023, False)),
    (date(2024, 12, 31), (1, 12, 2024, False)),
    (date(2025, 1, 1), (2, 12, 2024, False)),
    (date(2023, 3, 6), (15, 2, 2023, False)),
    (date(2023, 4, 5), (15, 2, 2023, True)),
    (date(2020, 6, 6), (15, 4, 2020, True)),
    (date(2020, 5, 7), (15, 4, 2020, False)),
    (date(2024, 9, 17), (15, 8, 2024, False)),
])
def test_known_conversions(vn, d, expected):
    assert lunar_tuple(vn, d) == expected

def test_output_carries_jdn(vn):
    t = vn.solar_to_lunar(10, 2, 2024)
    assert t.jdn == 2460351
    assert vn.from_jdn(2460351) == t

def test_time_zone_moves_tet_1985(vn, cn):
    """Tết 1985 fell a month apart in Hanoi (UTC+7) and Beijing (UTC+8)."""
    assert lunar_tuple(vn, date(1985, 1, 21)) == (1, 1, 1985, False)
    assert lunar_tuple(cn, date(1985, 1, 21)) == (1, 12, 1984, False)
    assert lunar_tuple(cn, date(1985, 2, 20)) == (1, 1, 1985, False)
    assert lunar_tuple(vn, date(1985, 2, 20)) == (1, 2, 1985, False)

def test_time_zone_moves_tet_2007(vn, cn):
    assert lunar_tuple(vn, date(2007, 2, 17)) == (1, 1, 2007, False)
    assert lunar_tuple(cn, date(2007, 2, 17)) == (30, 12, 2006, False)
    assert lunar_tuple(cn, date(2007, 2, 18)) == (1, 1, 2007, False)

def test_monotonic_labels(vn):
    """
    Every civil day either continues the lunar month (day + 1) or opens the
    next month on day 1. A leap month repeats the number of the regular month
    before it; otherwise the number goes up by one, and month 1 starts a new year.
    """
    d = date(2000, 1, 1)
    prev = vn.solar_to_lunar(d.day, d.month, d.year)
    leap_years = []
    while d < date(2040, 12, 31):
        d += timedelta(days=1)
        cur = vn.solar_to_lunar(d.day, d.month, d.year)
        if cur.day != 1:
            assert cur.day == prev.day + 1
            assert (cur.month, cur.leap, cur.year) == (prev.month, prev.leap, prev.year)
        else:
            assert prev.day in (29, 30)
            if cur.leap:
                assert not prev.leap
                assert (cur.month, cur.year) == (prev.month, prev.year)
                leap_years.append(cur.year)
            elif prev.month == 12:
                assert (cur.month, cur.year) == (1, prev.year + 1)
            else:
                assert (cur.month, cur.year) == (prev.month + 1, prev.year)
        prev = cur

    assert len(leap_years) == len(set(leap_years))
    assert {2001, 2004, 2006, 2009, 2012, 2014, 2017, 2020, 2023, 2025} <= set(leap_years)


# ---------------------------------------------------------
# Lunar -> civil
# ---------------------------------------------------------

def test_find_in_leap_year_2023(vn):
    assert vn.lunar_to_solar(15, 2, 2023) == CivilDate(2023, 3, 6)
    assert vn.lunar_to_solar(15, 2, 2023, leap=False) == CivilDate(2023, 3, 6)
    assert vn.lunar_to_solar(15, 2, 2023, leap=True) == CivilDate(2023, 4, 5)
    assert vn.lunar_to_solar(30, 2, 2023) == CivilDate(2023, 3, 21)
    assert vn.lunar_to_solar(29, 2, 2023, leap=True) == CivilDate(2023, 4, 19)

def test_missing_days_return_none(vn):
    # month 1 of 2023 has 29 days; the leap month 2 has 29 days
    assert vn.lunar_to_solar(30, 1, 2023) is None
    assert vn.lunar_to_solar(30, 2, 2023, leap=True) is None
    # no leap month 5 in 2023
    assert vn.lunar_to_solar(1, 5, 2023, leap=True) is None

def test_require_civil_date(vn):
    assert vn.require_civil_date(1, 1, 2024) == CivilDate(2024, 2, 10)
    with pytest.raises(InvalidLunarDateError):
        vn.require_civil_date(30, 1, 2023)

def test_to_gregorian_policies(vn):
    assert vn.to_gregorian(LunarDate(15, 2, 2023, leap=True)) == [date(2023, 4, 5)]
    assert vn.to_gregorian(LunarDate(30, 1, 2023)) == []
    with pytest.raises(InvalidLunarDateError):
        vn.to_gregorian(LunarDate(30, 1, 2023), policy="raise")
    with pytest.raises(ValueError):
        vn.to_gregorian(LunarDate(1, 1, 2023), policy="first")

def test_round_trip_sample(vn):
    rng = random.Random(2024)
    start = date(2000, 1, 1)
    span = (date(2040, 12, 31) - start).days
    for _ in range(400):
        d0 = start + timedelta(days=rng.randint(0, span))
        t = vn.solar_to_lunar(d0.day, d0.month, d0.year)
        assert vn.lunar_to_solar(t.day, t.month, t.year, leap=t.leap) == CivilDate.from_date(d0)

def test_search_window_is_bounded():
    for year in (1900, 2000, 2023, 2024, 2100):
        first, last = LunisolarCalendar.search_window(year)
        assert first == civil_to_jdn(1, 1, year)
        assert last - first + 1 <= MAX_SEARCH_DAYS

def test_oversized_search_window_raises(vn, monkeypatch):
    monkeypatch.setattr(LunisolarCalendar, "search_window", staticmethod(lambda year: (0, MAX_SEARCH_DAYS)))
    with pytest.raises(InternalInvariantError):
        vn.lunar_to_solar(1, 1, 2024)


# ---------------------------------------------------------
# Month-level tools
# ---------------------------------------------------------

def test_months_of_2023(vn):
    months = vn.months_in_year(2023)
    labels = [(m.month, m.leap, m.length) for m in months]
    assert labels == [
        (1, False, 29), (2, False, 30), (2, True, 29), (3, False, 29),
        (4, False, 30), (5, False, 30), (6, False, 29), (7, False, 30),
        (8, False, 30), (9, False, 29), (10, False, 30), (11, False, 29),
        (12, False, 30),
    ]
    assert months[0].first_jdn == to_jdn(date(2023, 1, 22))
    assert months[-1].last_jdn == to_jdn(date(2024, 2, 9))
    for a, b in zip(months, months[1:]):
        assert b.first_jdn == a.last_jdn + 1
        assert b.lunation == a.lunation + 1

def test_leap_month_bounds(vn):
    assert vn.month_bounds(2023, 2, leap=True) == (to_jdn(date(2023, 3, 22)), to_jdn(date(2023, 4, 19)))
    assert vn.month_bounds(2020, 4, leap=True)[0] == to_jdn(date(2020, 5, 23))
    assert vn.month_bounds(2025, 6, leap=True)[0] == to_jdn(date(2025, 7, 25))
    with pytest.raises(ValueError):
        vn.month_bounds(2023, 5, leap=True)
    with pytest.raises(ValueError):
        vn.month_bounds(2023, 13)

def test_new_year_jdn(vn, cn):
    assert vn.new_year_jdn(2024) == 2460351
    assert vn.new_year_jdn(1985) == to_jdn(date(1985, 1, 21))
    assert cn.new_year_jdn(1985) == to_jdn(date(1985, 2, 20))

def test_leap_month_table(vn):
    expected = {
        1995: 8, 1998: 5, 2001: 4, 2004: 2, 2006: 7, 2009: 5, 2012: 4, 2014: 9,
        2017: 6, 2020: 4, 2023: 2, 2025: 6, 2028: 5, 2031: 3, 2033: 11, 2036: 6,
        2039: 5, 2042: 2, 2044: 7,
    }
    found = {}
    for year in range(1995, 2046):
        months = vn.months_in_year(year)
        leaps = [m.month for m in months if m.leap]
        assert len(months) == 12 + len(leaps)
        if leaps:
            found[year] = leaps[0]
    assert found == expected

def test_metonic_leap_count(vn):
    """Any 19 consecutive lunar years hold 6 or 7 leap months (7 in practice)."""
    has_leap = [any(m.leap for m in vn.months_in_year(y)) for y in range(1901, 2101)]
    for i in range(len(has_leap) - 18):
        assert sum(has_leap[i:i + 19]) in (6, 7)


# ---------------------------------------------------------
# High-level engine methods and logging
# ---------------------------------------------------------

def test_day_info_debug(vn):
    info = vn.day_info(date(2023, 4, 5), debug=True)
    assert info.lunar.leap is True
    assert info.debug["a11"] == 2459908
    assert info.debug["leap_offset"] == 4
    assert info.debug["month_start"] == to_jdn(date(2023, 3, 22))

def test_explain_includes_annotation(vn):
    out = vn.explain(date(2024, 2, 10))
    assert out["annotation"].day_can_chi.name == "Giáp Thìn"
    assert out["debug"]["jdn"] == 2460351

def test_out_of_range_year_logs_warning(vn, caplog):
    with caplog.at_level(logging.WARNING, logger="amlich.engines.calendar"):
        vn.solar_to_lunar(1, 6, 3001)
    assert any("calibrated range" in r.getMessage() for r in caplog.records)

def test_in_range_year_is_quiet(vn, caplog):
    with caplog.at_level(logging.WARNING, logger="amlich.engines.calendar"):
        vn.solar_to_lunar(1, 6, 2024)
    assert not caplog.records
