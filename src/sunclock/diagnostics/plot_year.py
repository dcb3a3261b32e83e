#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import sunclock
from sunclock.places import add_location_arguments, coord_from_args
from sunclock.diagnostics.year_table import build_year_series


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunclock[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunclock[diagnostics]"') from e


COLORS: Dict[sunclock.Zenith, str] = {
    sunclock.Zenith.OFFICIAL: "tab:orange",
    sunclock.Zenith.CIVIL: "tab:blue",
    sunclock.Zenith.NAUTICAL: "tab:purple",
    sunclock.Zenith.ASTRONOMICAL: "0.35",
}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="sunclock plot-year", description="Plot almanac rise/set times and twilight over a year.")
    p.add_argument("year", type=int)
    add_location_arguments(p)
    p.add_argument("--outbase", default="sun_year", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    coord, label = coord_from_args(p, args)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 9,
    })

    fig, (ax_t, ax_l) = plt.subplots(2, 1, figsize=(9.2, 7.2), sharex=True, constrained_layout=True)

    for z in sunclock.Zenith:
        s = build_year_series(np, args.year, coord, z)
        color = COLORS[z]
        # scatter, not lines: UTC times wrap through midnight
        ax_t.scatter(s.day_index, s.rise, s=3, color=color, label=f"{z.value} rise")
        ax_t.scatter(s.day_index, s.set, s=3, color=color, marker="x", linewidths=0.6, label=f"{z.value} set")
        ax_l.plot(s.day_index, s.day_length, color=color, linewidth=1.4, label=z.value)

    ax_t.set_ylabel("UTC (hours)")
    ax_t.set_ylim(0, 24)
    ax_t.set_yticks(range(0, 25, 3))
    ax_t.grid(True, color="0.88", linewidth=0.7)
    ax_t.set_title(f"Almanac sunrise/sunset {args.year}: {label}")
    ax_t.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    ax_l.set_xlabel("Day of year")
    ax_l.set_ylabel("Hours above zenith circle")
    ax_l.set_ylim(0, 24)
    ax_l.grid(True, color="0.88", linewidth=0.7)
    ax_l.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
