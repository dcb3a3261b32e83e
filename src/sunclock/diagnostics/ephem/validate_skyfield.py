#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import date, timedelta
from typing import List, Optional

import sunclock
from sunclock.ephemeris import require_ephemeris
from sunclock.ephemeris.skyfield_sun import SkyfieldSunTimes
from sunclock.places import add_location_arguments, coord_from_args


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunclock[diagnostics]"') from e


def residual_minutes(ours_hours: float, ref_hours: float) -> float:
    """Clock difference in minutes, wrapped to [-12h, 12h)."""
    return ((ours_hours - ref_hours + 12.0) % 24.0 - 12.0) * 60.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="sunclock ephem validate", description="Compare almanac rise/set times against skyfield (DE421).")
    p.add_argument("--start", default="2024-01-01", help="First date, YYYY-MM-DD")
    p.add_argument("--days", type=int, default=365)
    p.add_argument("--step-days", type=int, default=7)
    p.add_argument("--zenith", choices=[z.value for z in sunclock.Zenith], default="official")
    p.add_argument("--kernel", default="de421.bsp")
    add_location_arguments(p)
    args = p.parse_args(argv)

    require_ephemeris()
    np = _need_numpy()

    coord, label = coord_from_args(p, args)
    lat_deg, lon_deg = math.degrees(coord.lat_rad), math.degrees(coord.lon_rad)
    zenith = sunclock.parse_zenith(args.zenith)

    print(f"Loading {args.kernel}...")
    ref = SkyfieldSunTimes.load(args.kernel)

    y, m, d = map(int, args.start.split("-"))
    start = date(y, m, d)

    err_rise = []
    err_set = []
    skipped = 0
    for k in range(0, args.days, max(1, args.step_days)):
        day = start + timedelta(days=k)
        times = sunclock.sun_times(sunclock.CivilDate.from_date(day), coord, zenith)
        r_ref = ref.rise_utc_hours(day, lat_deg, lon_deg, zenith)
        s_ref = ref.set_utc_hours(day, lat_deg, lon_deg, zenith)

        if times.rise.occurs and r_ref is not None:
            err_rise.append(residual_minutes(times.rise.utc_hours, r_ref))
        else:
            skipped += 1
        if times.set.occurs and s_ref is not None:
            err_set.append(residual_minutes(times.set.utc_hours, s_ref))
        else:
            skipped += 1

    print(f"Location: {label}, zenith={zenith.value}")
    for name, errs in (("rise", err_rise), ("set", err_set)):
        if not errs:
            print(f"  {name}: no comparable events")
            continue
        a = np.asarray(errs, dtype=float)
        print(
            f"  {name}: n={a.size:4d}  mean={a.mean():+7.3f} min  "
            f"rms={math.sqrt(float(np.mean(a * a))):6.3f} min  max|e|={np.abs(a).max():6.3f} min"
        )
    if skipped:
        print(f"  skipped (polar or missing reference event): {skipped}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
