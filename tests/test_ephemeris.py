# tests/test_ephemeris.py

import math
import sys

import pytest

from amlich.core.errors import EngineUnavailableError
from amlich.ephemeris import require_ephemeris
from amlich.ephemeris.de422 import (
    J2000,
    OBLIQUITY_J2000,
    DE422Lunar,
    ecliptic_longitude,
    of_date,
    signed_degrees,
)


@pytest.fixture
def no_ephemeris(monkeypatch):
    """Make the optional ephemeris packages unimportable."""
    monkeypatch.setitem(sys.modules, "jplephem", None)
    monkeypatch.setitem(sys.modules, "de422", None)

def equatorial(lon_deg):
    """Unit vector on the J2000 ecliptic at longitude lon_deg, in equatorial axes."""
    lam = math.radians(lon_deg)
    return (math.cos(lam), math.sin(lam) * math.cos(OBLIQUITY_J2000), math.sin(lam) * math.sin(OBLIQUITY_J2000))


class LinearSky(DE422Lunar):
    """Sun fixed at 280°, Moon gaining 12.19°/day; new moon at T0."""
    T0 = 2460351.0

    def __init__(self):
        super().__init__(ephemeris=None)

    def _sun_and_moon(self, jd_tt):
        return equatorial(280.0), equatorial(280.0 + 12.19 * (jd_tt - self.T0))


def test_require_ephemeris_reports_missing_extras(no_ephemeris):
    with pytest.raises(EngineUnavailableError, match="amlich\\[ephemeris\\]"):
        require_ephemeris()

def test_de422_load_reports_missing_extras(no_ephemeris):
    with pytest.raises(EngineUnavailableError):
        DE422Lunar.load()

def test_signed_degrees():
    assert signed_degrees(190.0) == pytest.approx(-170.0)
    assert signed_degrees(-190.0) == pytest.approx(170.0)
    assert signed_degrees(360.0) == pytest.approx(0.0)

def test_ecliptic_longitude_undoes_obliquity():
    for lon in (0.0, 45.0, 90.0, 270.0, 359.0):
        assert ecliptic_longitude(equatorial(lon)) == pytest.approx(lon % 360.0, abs=1e-9)

def test_of_date_precession():
    assert of_date(100.0, J2000) == pytest.approx(100.0)
    assert of_date(100.0, J2000 - 36525.0) == pytest.approx(100.0 - 1.396971)
    assert of_date(359.5, J2000 + 36525.0) == pytest.approx(0.896971)

def test_new_moon_bisection():
    sky = LinearSky()
    assert sky.phase_angle(sky.T0 - 1.0) < 0 < sky.phase_angle(sky.T0 + 1.0)
    assert sky.new_moon_near(sky.T0 + 0.7) == pytest.approx(sky.T0, abs=1e-6)
    [(t, lon)] = sky.new_moons_near([sky.T0 - 1.2])
    assert t == pytest.approx(sky.T0, abs=1e-6)
    assert lon == pytest.approx(of_date(280.0, sky.T0))

def test_new_moon_outside_bracket():
    sky = LinearSky()
    with pytest.raises(ValueError):
        sky.new_moon_near(sky.T0 + 5.0)
