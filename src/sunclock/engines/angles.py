from __future__ import annotations

import math


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def deg2rad(deg: float) -> float:
    return deg * math.pi / 180.0

def rad2deg(rad: float) -> float:
    return rad * 180.0 / math.pi

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360) by whole-turn steps."""
    while x_deg < 0.0:
        x_deg += 360.0
    while x_deg >= 360.0:
        x_deg -= 360.0
    return x_deg

def wrap_hours(x_hours: float) -> float:
    """Wrap clock hours to [0,24) by whole-day steps."""
    while x_hours < 0.0:
        x_hours += 24.0
    while x_hours >= 24.0:
        x_hours -= 24.0
    return x_hours
