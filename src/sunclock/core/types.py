from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Literal, Optional

EventKind = Literal["rise", "set"]
EventStatus = Literal["occurs", "never_rises", "never_sets"]


@dataclass(frozen=True)
class CivilDate:
    """Gregorian calendar date. Not validated: bad dates give garbage times."""
    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, d: date) -> "CivilDate":
        return cls(day=d.day, month=d.month, year=d.year)


@dataclass(frozen=True)
class Coord:
    lat_rad: float    # latitude, radians (north positive)
    lon_rad: float    # longitude, radians (east positive)

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float) -> "Coord":
        return cls(lat_rad=math.radians(lat_deg), lon_rad=math.radians(lon_deg))


class Zenith(Enum):
    """Sun's zenith angle at the crossing event."""
    OFFICIAL = "official"          # 90 deg 50'
    CIVIL = "civil"                # 96 deg
    NAUTICAL = "nautical"          # 102 deg
    ASTRONOMICAL = "astronomical"  # 108 deg


@dataclass(frozen=True)
class SunEvent:
    """
    Outcome of a single rise or set computation.

    `utc_hours` is set only when `status == "occurs"`. The two other statuses
    describe the whole day: the sun stays below ("never_rises") or above
    ("never_sets") the zenith circle.
    """
    kind: EventKind
    status: EventStatus
    utc_hours: Optional[float] = None

    @property
    def occurs(self) -> bool:
        return self.status == "occurs"

    def to_legacy(self) -> float:
        """
        Collapse to the almanac's float convention:
          decimal UTC hours when the event occurs,
          -1.0 when the requested event itself is impossible
               (no sunrise in polar night, no sunset in polar day),
           0.0 for the opposite case.
        """
        if self.status == "occurs":
            return self.utc_hours
        impossible = "never_rises" if self.kind == "rise" else "never_sets"
        return -1.0 if self.status == impossible else 0.0


@dataclass(frozen=True)
class SunTimes:
    rise: SunEvent
    set: SunEvent

    @property
    def day_length_hours(self) -> Optional[float]:
        """Hours between rise and set; 24 in polar day, 0 in polar night, None if mixed."""
        if self.rise.occurs and self.set.occurs:
            return (self.set.utc_hours - self.rise.utc_hours) % 24.0
        if self.rise.status == self.set.status == "never_sets":
            return 24.0
        if self.rise.status == self.set.status == "never_rises":
            return 0.0
        return None


@dataclass(frozen=True)
class Place:
    """Named observer location, stored in degrees as published."""
    name: str
    lat_deg: float
    lon_deg: float    # east positive

    def coord(self) -> Coord:
        return Coord.from_degrees(self.lat_deg, self.lon_deg)
