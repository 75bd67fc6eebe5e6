"""
amlich.engines.deltat
---------------------
ΔT (TT - UT) in days, as used by the new-moon series.

*** TIME COORDINATE WARNING ***
The argument `T` is Julian centuries since 1900 January 0.5, the coordinate
of the new-moon series (T = k / 1236.85 for lunation k). It is NOT the
J2000-based T used by the solar model.
"""

from __future__ import annotations

# Below T = -11 (about 800 CE) the modern parabola diverges; a separate
# quartic fit covers the ancient range.
ANCIENT_BRANCH_T = -11.0


def delta_t_days(T: float) -> float:
    T2 = T * T
    T3 = T2 * T
    if T < ANCIENT_BRANCH_T:
        return 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3
    return -0.000278 + 0.000265 * T + 0.000262 * T2


def delta_t_seconds(T: float) -> float:
    """Convenience wrapper for diagnostics."""
    return delta_t_days(T) * 86400.0
