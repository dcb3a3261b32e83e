from __future__ import annotations

from typing import List, Optional

from .core.errors import UnknownZenithError
from .core.registry import PlaceRegistry
from .core.types import CivilDate, Coord, Place, SunEvent, SunTimes, Zenith
from .engines.almanac import solve_event

_registry: Optional[PlaceRegistry] = None

def set_registry(reg: PlaceRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> PlaceRegistry:
    if _registry is None:
        raise RuntimeError("Place registry not initialized")
    return _registry

# ============================================================
# Rise / set
# ============================================================

def sunrise(date: CivilDate, coord: Coord, zenith: Zenith = Zenith.OFFICIAL) -> float:
    """
    Time of sunrise in decimal hours [0,24) UTC.

    Returns -1.0 if the sun never rises there on that date (polar night),
    and 0.0 if it never sets (polar day). Use `sunrise_event` to tell the
    latter apart from a rise at exactly 00:00 UTC.
    """
    return solve_event(date, coord, zenith, "rise").to_legacy()

def sunset(date: CivilDate, coord: Coord, zenith: Zenith = Zenith.OFFICIAL) -> float:
    """
    Time of sunset in decimal hours [0,24) UTC.

    Returns -1.0 if the sun never sets there on that date (polar day),
    and 0.0 if it never rises (polar night).
    """
    return solve_event(date, coord, zenith, "set").to_legacy()

def sunrise_event(date: CivilDate, coord: Coord, zenith: Zenith = Zenith.OFFICIAL) -> SunEvent:
    return solve_event(date, coord, zenith, "rise")

def sunset_event(date: CivilDate, coord: Coord, zenith: Zenith = Zenith.OFFICIAL) -> SunEvent:
    return solve_event(date, coord, zenith, "set")

def sun_times(date: CivilDate, coord: Coord, zenith: Zenith = Zenith.OFFICIAL) -> SunTimes:
    return SunTimes(
        rise=solve_event(date, coord, zenith, "rise"),
        set=solve_event(date, coord, zenith, "set"),
    )

def parse_zenith(name: str) -> Zenith:
    try:
        return Zenith(name.strip().lower())
    except ValueError:
        raise UnknownZenithError(
            f"Unknown zenith '{name}'. Available: {[z.value for z in Zenith]}"
        ) from None

# ============================================================
# Place presets
# ============================================================

def get_place(name: str) -> Place:
    return _reg().get(name)

def list_places() -> List[str]:
    return _reg().list()

def register_place(place: Place, *, overwrite: bool = False) -> None:
    _reg().register(place, overwrite=overwrite)
