"""
amlich.ephemeris.de422
----------------------
Geocentric Sun and Moon longitudes from JPL DE422 (via jplephem), and the
new-moon instants they imply. Used only to grade the truncated series in
amlich.engines; nothing in the conversion path imports this module.

All Julian dates here are TT. Longitudes are geometric, in degrees, on the
J2000 ecliptic unless converted with `of_date`.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from ..core.errors import EngineUnavailableError

J2000 = 2451545.0
OBLIQUITY_J2000 = math.radians(23.439291111)
# General precession in longitude, degrees per Julian century.
PRECESSION_PER_CENTURY = 1.396971
EARTH_MOON_MASS_RATIO = 81.30056907419062

# The series is good to minutes, so a two-day bracket always holds the root.
NEW_MOON_BRACKET_DAYS = 2.0
NEW_MOON_TOLERANCE_DAYS = 1e-7


def ecliptic_longitude(vec) -> float:
    """Longitude (deg, [0, 360)) of an equatorial J2000 position vector."""
    x, y, z = float(vec[0]), float(vec[1]), float(vec[2])
    y_ecl = y * math.cos(OBLIQUITY_J2000) + z * math.sin(OBLIQUITY_J2000)
    return math.degrees(math.atan2(y_ecl, x)) % 360.0


def of_date(lon_j2000: float, jd_tt: float) -> float:
    """Carry a J2000 longitude to the equinox of date (linear precession)."""
    T = (jd_tt - J2000) / 36525.0
    return (lon_j2000 + PRECESSION_PER_CENTURY * T) % 360.0


def signed_degrees(deg: float) -> float:
    """Angle folded into [-180, 180)."""
    return (deg + 180.0) % 360.0 - 180.0


class DE422Lunar:
    """
    Sun and Moon as seen from the geocentre.

    Needs the ephemeris extra:
      pip install "amlich[ephemeris]"
    """

    def __init__(self, ephemeris):
        self._eph = ephemeris

    @classmethod
    def load(cls) -> "DE422Lunar":
        try:
            import de422  # type: ignore
            from jplephem import Ephemeris  # type: ignore
        except ImportError as e:
            raise EngineUnavailableError(
                'DE422 ephemeris not available. Install: pip install "amlich[ephemeris]"'
            ) from e
        return cls(Ephemeris(de422))

    def _sun_and_moon(self, jd_tt: float):
        emb = self._eph.position("earthmoon", jd_tt)
        moon = self._eph.position("moon", jd_tt)
        sun = self._eph.position("sun", jd_tt)
        earth = emb - moon / (EARTH_MOON_MASS_RATIO + 1.0)
        return sun - earth, moon

    def sun_longitude(self, jd_tt: float) -> float:
        sun, _ = self._sun_and_moon(jd_tt)
        return ecliptic_longitude(sun)

    def phase_angle(self, jd_tt: float) -> float:
        """Moon minus Sun longitude in [-180, 180): negative before new moon, positive after."""
        sun, moon = self._sun_and_moon(jd_tt)
        return signed_degrees(ecliptic_longitude(moon) - ecliptic_longitude(sun))

    def new_moon_near(self, jd_tt: float) -> float:
        """The new moon within NEW_MOON_BRACKET_DAYS of `jd_tt`, by bisection."""
        lo = jd_tt - NEW_MOON_BRACKET_DAYS
        hi = jd_tt + NEW_MOON_BRACKET_DAYS
        if self.phase_angle(lo) >= 0.0 or self.phase_angle(hi) < 0.0:
            raise ValueError(f"no new moon within {NEW_MOON_BRACKET_DAYS} days of JD {jd_tt:.5f}")
        while hi - lo > NEW_MOON_TOLERANCE_DAYS:
            mid = 0.5 * (lo + hi)
            if self.phase_angle(mid) < 0.0:
                lo = mid
            else:
                hi = mid
        return 0.5 * (lo + hi)

    def new_moons_near(self, guesses: Iterable[float]) -> List[Tuple[float, float]]:
        """(new moon, sun longitude of date) for each guess."""
        out = []
        for g in guesses:
            t = self.new_moon_near(g)
            out.append((t, of_date(self.sun_longitude(t), t)))
        return out
