"""sunclock public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    sunrise,
    sunset,
    sunrise_event,
    sunset_event,
    sun_times,
    parse_zenith,
    get_place,
    list_places,
    register_place,
)
from .core.errors import (
    SunclockError,
    UnknownZenithError,
    UnknownPlaceError,
    EventDoesNotOccurError,
)
from .core.time import hours_to_hms, event_datetime
from .core.types import CivilDate, Coord, Place, SunEvent, SunTimes, Zenith

__all__ = [
    "sunrise",
    "sunset",
    "sunrise_event",
    "sunset_event",
    "sun_times",
    "parse_zenith",
    "get_place",
    "list_places",
    "register_place",
    "hours_to_hms",
    "event_datetime",
    "CivilDate",
    "Coord",
    "Place",
    "SunEvent",
    "SunTimes",
    "Zenith",
    "SunclockError",
    "UnknownZenithError",
    "UnknownPlaceError",
    "EventDoesNotOccurError",
]
