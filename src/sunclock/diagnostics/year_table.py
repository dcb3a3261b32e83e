#!/usr/bin/env python3
from __future__ import annotations

import argparse
import csv
import sys
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

import sunclock
from sunclock.places import add_location_arguments, coord_from_args


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunclock[diagnostics]"') from e


def days_of_year(year: int) -> List[date]:
    start = date(year, 1, 1)
    n = (date(year + 1, 1, 1) - start).days
    return [start + timedelta(days=i) for i in range(n)]


@dataclass(frozen=True)
class YearSeries:
    """Daily almanac results; NaN where the event does not occur."""
    dates: List[date]
    day_index: "np.ndarray"   # 1-based day of the calendar year
    rise: "np.ndarray"
    set: "np.ndarray"
    day_length: "np.ndarray"


def build_year_series(np, year: int, coord: sunclock.Coord, zenith: sunclock.Zenith = sunclock.Zenith.OFFICIAL) -> YearSeries:
    dates = days_of_year(year)
    rise = np.full(len(dates), np.nan, dtype=float)
    set_ = np.full(len(dates), np.nan, dtype=float)
    length = np.full(len(dates), np.nan, dtype=float)

    for i, d in enumerate(dates):
        times = sunclock.sun_times(sunclock.CivilDate.from_date(d), coord, zenith)
        if times.rise.occurs:
            rise[i] = times.rise.utc_hours
        if times.set.occurs:
            set_[i] = times.set.utc_hours
        if times.day_length_hours is not None:
            length[i] = times.day_length_hours

    return YearSeries(
        dates=dates,
        day_index=np.arange(1, len(dates) + 1, dtype=int),
        rise=rise,
        set=set_,
        day_length=length,
    )


def _fmt(np, h: float) -> str:
    return "--:--:--.--" if np.isnan(h) else sunclock.hours_to_hms(float(h))


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="sunclock year-table", description="Daily almanac sunrise/sunset table for one year.")
    p.add_argument("year", type=int)
    add_location_arguments(p)
    p.add_argument("--zenith", choices=[z.value for z in sunclock.Zenith], default="official")
    p.add_argument("--step", type=int, default=1, help="Print every n-th day")
    p.add_argument("--csv", default=None, help="Write all days to this CSV file instead of printing")
    args = p.parse_args(argv)

    np = _need_numpy()
    coord, label = coord_from_args(p, args)
    series = build_year_series(np, args.year, coord, sunclock.parse_zenith(args.zenith))

    if args.csv:
        with open(args.csv, "w", newline="", encoding="utf-8") as fh:
            w = csv.writer(fh)
            w.writerow(["date", "rise_utc_hours", "set_utc_hours", "day_length_hours"])
            for i, d in enumerate(series.dates):
                w.writerow([d.isoformat(), series.rise[i], series.set[i], series.day_length[i]])
        print(f"Saved: {args.csv}")
        return 0

    print(f"{args.year}  {label}  zenith={args.zenith}")
    print(f"{'date':<12}{'rise (UTC)':<14}{'set (UTC)':<14}{'day length':<14}")
    for i in range(0, len(series.dates), max(1, args.step)):
        print(
            f"{series.dates[i].isoformat():<12}"
            f"{_fmt(np, series.rise[i]):<14}"
            f"{_fmt(np, series.set[i]):<14}"
            f"{_fmt(np, series.day_length[i]):<14}"
        )

    polar = int(np.sum(np.isnan(series.rise)))
    if polar:
        print(f"\nDays without a sunrise event: {polar}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
