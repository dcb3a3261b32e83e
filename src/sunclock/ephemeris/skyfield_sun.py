# ephemeris/skyfield_sun.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from sunclock.core.types import Zenith
from sunclock.engines.almanac import ZENITH_DEG


def _utc_hours(dt: datetime) -> float:
    return dt.hour + dt.minute / 60.0 + dt.second / 3600.0 + dt.microsecond / 3.6e9


@dataclass
class SkyfieldSunTimes:
    """
    Reference sunrise/sunset from a JPL kernel via skyfield.

    Requires optional deps:
      pip install "sunclock[ephemeris]"
    The kernel is downloaded into the working directory on first load.
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, kernel: str = "de421.bsp") -> "SkyfieldSunTimes":
        try:
            from skyfield.api import load  # type: ignore
        except ImportError as e:
            raise RuntimeError(
                "skyfield not available. Install extras:\n"
                "  pip install \"sunclock[ephemeris]\""
            ) from e
        return cls(ts=load.timescale(), eph=load(kernel))

    def _first_event(self, finder, d: date, lat_deg: float, lon_deg: float, zenith: Zenith) -> Optional[float]:
        from skyfield.api import wgs84  # type: ignore

        observer = self.eph["earth"] + wgs84.latlon(lat_deg, lon_deg)
        nxt = d + timedelta(days=1)
        t0 = self.ts.utc(d.year, d.month, d.day)
        t1 = self.ts.utc(nxt.year, nxt.month, nxt.day)
        times, happened = finder(observer, self.eph["sun"], t0, t1, horizon_degrees=90.0 - ZENITH_DEG[zenith])
        for t, ok in zip(times, happened):
            if ok:
                return _utc_hours(t.utc_datetime())
        return None

    def rise_utc_hours(self, d: date, lat_deg: float, lon_deg: float, zenith: Zenith = Zenith.OFFICIAL) -> Optional[float]:
        """First rising within UTC day d, or None."""
        from skyfield import almanac  # type: ignore
        return self._first_event(almanac.find_risings, d, lat_deg, lon_deg, zenith)

    def set_utc_hours(self, d: date, lat_deg: float, lon_deg: float, zenith: Zenith = Zenith.OFFICIAL) -> Optional[float]:
        """First setting within UTC day d, or None."""
        from skyfield import almanac  # type: ignore
        return self._first_event(almanac.find_settings, d, lat_deg, lon_deg, zenith)
