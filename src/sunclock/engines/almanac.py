"""
sunclock.engines.almanac
------------------------
Sunrise/sunset times from the Almanac for Computers recipe.

Every stage is a pure function of its inputs, chained as
    day of year -> approximate time -> mean anomaly -> true longitude
    -> right ascension, declination -> hour angle -> UT.
The numeric constants are the almanac's own truncated values and must be
kept as printed; the results are only good to a minute or two, but they are
the published ones.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

from ..core.types import CivilDate, Coord, EventKind, SunEvent, Zenith
from .angles import deg2rad, rad2deg, wrap_deg, wrap_hours

logger = logging.getLogger(__name__)


# ============================================================
# Zenith table
# ============================================================
ZENITH_DEG: Dict[Zenith, float] = {
    Zenith.OFFICIAL: 90.0 + 50.0 / 60.0,  # refraction + solar semi-diameter
    Zenith.CIVIL: 96.0,
    Zenith.NAUTICAL: 102.0,
    Zenith.ASTRONOMICAL: 108.0,
}

def cos_zenith(zenith: Zenith) -> float:
    return math.cos(deg2rad(ZENITH_DEG[zenith]))


# ============================================================
# Calendar & time arguments
# ============================================================
def _tdiv(a: int, b: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def day_of_year(d: CivilDate) -> int:
    """
    Ordinal day from the almanac's closed formula:
      N1 = floor(275 M / 9)
      N2 = floor((M + 9) / 12)
      N3 = 1 + floor((Y - 4 floor(Y / 4) + 2) / 3)
      N  = N1 - N2 N3 + D - 30
    For years >= 0, N3 is 1 in leap years and 2 otherwise (century rule ignored).
    Quotients truncate toward zero and N3 is truncated after adding the 1,
    so years before 0 go through the same integer arithmetic.
    """
    n1 = _tdiv(275 * d.month, 9)
    n2 = _tdiv(d.month + 9, 12)
    n3 = int(1 + (d.year - 4 * _tdiv(d.year, 4) + 2) / 3)
    return n1 - (n2 * n3) + d.day - 30

def longitude_hour(lon_rad: float) -> float:
    return rad2deg(lon_rad) / 15.0

def approx_time(doy: int, lon_rad: float, kind: EventKind) -> float:
    """Days since Jan 0 at the guessed event: 06h local mean time for rise, 18h for set."""
    local_hour = 6.0 if kind == "rise" else 18.0
    return doy + (local_hour - longitude_hour(lon_rad)) / 24.0


# ============================================================
# Solar coordinates
# ============================================================
def sun_mean_anomaly(t: float) -> float:
    return (0.9856 * t) - 3.289

def sun_true_longitude(t: float) -> float:
    """Ecliptic longitude (deg) in [0,360), via a two-term equation of centre."""
    M = sun_mean_anomaly(t)
    L = (M
         + 1.916 * math.sin(deg2rad(M))
         + 0.020 * math.sin(deg2rad(2.0 * M))
         + 282.634)
    return wrap_deg(L)

def sun_right_ascension(L_deg: float) -> float:
    """
    Right ascension (deg), in the same quadrant as the true longitude.
    atan only spans half a turn, so the quadrant of L is restored by hand.
    """
    RA = rad2deg(math.atan(0.91764 * math.tan(deg2rad(L_deg))))
    L_quadrant = 90 * math.floor(L_deg / 90.0)
    RA_quadrant = 90 * math.floor(RA / 90.0)
    return RA + (L_quadrant - RA_quadrant)

def right_ascension_hours(RA_deg: float) -> float:
    return RA_deg / 15.0

def sun_declination(L_deg: float) -> Tuple[float, float]:
    """(sin δ, cos δ); the cosine is taken from the sine so the pair stays on the unit circle."""
    sin_decl = 0.39782 * math.sin(deg2rad(L_deg))
    cos_decl = math.cos(math.asin(sin_decl))
    return sin_decl, cos_decl


# ============================================================
# Hour angle & clock time
# ============================================================
def cos_hour_angle(cos_z: float, sin_decl: float, cos_decl: float, lat_rad: float) -> float:
    # cos H = (cos z - sin δ sin φ) / (cos δ cos φ)
    return (cos_z - sin_decl * math.sin(lat_rad)) / (cos_decl * math.cos(lat_rad))

def local_hour_angle(cos_h: float, kind: EventKind) -> float:
    """Hour angle in hours; only defined for cos_h in [-1, 1]."""
    H_deg = rad2deg(math.acos(cos_h))
    if kind == "rise":
        return (360.0 - H_deg) / 15.0
    return H_deg / 15.0

def local_mean_time(H_hours: float, RA_hours: float, t: float) -> float:
    return H_hours + RA_hours - (0.06571 * t) - 6.622

def universal_time(T_hours: float, lon_rad: float) -> float:
    return wrap_hours(T_hours - longitude_hour(lon_rad))


# ============================================================
# Driver
# ============================================================
def solve_event(d: CivilDate, coord: Coord, zenith: Zenith, kind: EventKind) -> SunEvent:
    """Run the full chain for one event. Polar cases return before acos."""
    t = approx_time(day_of_year(d), coord.lon_rad, kind)
    L = sun_true_longitude(t)
    sin_decl, cos_decl = sun_declination(L)

    cos_h = cos_hour_angle(cos_zenith(zenith), sin_decl, cos_decl, coord.lat_rad)
    if cos_h > 1.0:
        logger.debug("%s %s: cos H = %.6f, sun never rises", kind, d, cos_h)
        return SunEvent(kind=kind, status="never_rises")
    if cos_h < -1.0:
        logger.debug("%s %s: cos H = %.6f, sun never sets", kind, d, cos_h)
        return SunEvent(kind=kind, status="never_sets")

    H = local_hour_angle(cos_h, kind)
    RA = right_ascension_hours(sun_right_ascension(L))
    T = local_mean_time(H, RA, t)
    return SunEvent(kind=kind, status="occurs", utc_hours=universal_time(T, coord.lon_rad))
