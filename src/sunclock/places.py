"""
sunclock.places
---------------
Named observer presets (pure data) and the argparse glue shared by the CLI
and the diagnostics scripts.
"""

from __future__ import annotations

import argparse
from typing import Dict, Tuple

from .core.registry import PlaceRegistry
from .core.types import Coord, Place

PLACES: Dict[str, Place] = {
    # Royal Observatory transit circle
    "greenwich": Place("greenwich", 51.4769, -0.0005),
    # Worked example of the Almanac for Computers (Wayne, NJ)
    "almanac-example": Place("almanac-example", 40.9, -74.3),
    "quito": Place("quito", -0.1807, -78.4678),
    "lhasa": Place("lhasa", 29.65, 91.1),
    "longyearbyen": Place("longyearbyen", 78.2232, 15.6267),
    "mcmurdo": Place("mcmurdo", -77.8419, 166.6863),
}

DEFAULT_PLACE = "greenwich"


def build_registry() -> PlaceRegistry:
    return PlaceRegistry(dict(PLACES))


def add_location_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--place", default=None, help=f"Named preset (default: {DEFAULT_PLACE})")
    p.add_argument("--lat", type=float, default=None, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, default=None, help="Observer longitude in degrees (positive East)")


def coord_from_args(p: argparse.ArgumentParser, args: argparse.Namespace) -> Tuple[Coord, str]:
    """Resolve --place / --lat --lon into (Coord, label). Exits through p.error on bad input."""
    from . import api
    from .core.errors import UnknownPlaceError

    if args.place is not None and (args.lat is not None or args.lon is not None):
        p.error("use either --place or --lat/--lon, not both")

    if args.lat is not None or args.lon is not None:
        if args.lat is None or args.lon is None:
            p.error("--lat and --lon must be given together")
        return Coord.from_degrees(args.lat, args.lon), f"lat {args.lat:.4f}, lon {args.lon:.4f}"

    try:
        place = api.get_place(args.place or DEFAULT_PLACE)
    except UnknownPlaceError as e:
        p.error(e.args[0])
    return place.coord(), f"{place.name} (lat {place.lat_deg:.4f}, lon {place.lon_deg:.4f})"
