from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ZENITH_CHOICES = ["official", "civil", "nautical", "astronomical", "all"]


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("sunclock").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _describe(event) -> str:
    import sunclock

    if event.occurs:
        return f"{event.utc_hours:7.4f} h  ({sunclock.hours_to_hms(event.utc_hours)} UTC)"
    if event.status == "never_rises":
        return "sun never rises (below the zenith circle all day)"
    return "sun never sets (above the zenith circle all day)"


def cmd_times(argv: list[str]) -> int:
    import sunclock
    from sunclock.engines.almanac import ZENITH_DEG
    from sunclock.places import add_location_arguments, coord_from_args

    p = argparse.ArgumentParser(prog="sunclock times", description="Sunrise/sunset in UTC decimal hours")
    p.add_argument("date", help="YYYY-MM-DD")
    add_location_arguments(p)
    p.add_argument("--zenith", choices=_ZENITH_CHOICES, default="official")
    p.add_argument("--legacy", action="store_true", help="Print the raw float results (-1.0 / 0.0 sentinels)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)
    if args.verbose:
        _setup_logging(True)

    d = _parse_ymd(args.date)
    coord, label = coord_from_args(p, args)
    cd = sunclock.CivilDate.from_date(d)

    if args.zenith == "all":
        zeniths = list(sunclock.Zenith)
    else:
        zeniths = [sunclock.parse_zenith(args.zenith)]

    print(f"Date    : {d.isoformat()}")
    print(f"Location: {label}")
    for z in zeniths:
        times = sunclock.sun_times(cd, coord, z)
        print()
        print(f"Zenith {z.value} ({ZENITH_DEG[z]:.4f} deg):")
        if args.legacy:
            print(f"  Rise: {times.rise.to_legacy():.6f}")
            print(f"  Set : {times.set.to_legacy():.6f}")
            continue
        print(f"  Rise: {_describe(times.rise)}")
        print(f"  Set : {_describe(times.set)}")
        length = times.day_length_hours
        if length is not None:
            print(f"  Day length: {sunclock.hours_to_hms(length)}")

    return 0


def cmd_places(argv: list[str]) -> int:
    import sunclock

    p = argparse.ArgumentParser(prog="sunclock places", description="List named observer presets")
    p.parse_args(argv)

    for name in sunclock.list_places():
        place = sunclock.get_place(name)
        print(f"  {name:<16} lat {place.lat_deg:9.4f}  lon {place.lon_deg:9.4f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `sunclock YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_times(argv)

    p = argparse.ArgumentParser(prog="sunclock", description="Almanac sunrise/sunset toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("times", help="Sunrise/sunset in UTC decimal hours", add_help=False)
    sub.add_parser("places", help="List named observer presets", add_help=False)

    # diagnostics
    sub.add_parser("year-table", help="Daily rise/set table for a year (needs numpy)", add_help=False)
    sub.add_parser("plot-year", help="Plot rise/set and twilight over a year (needs matplotlib)", add_help=False)

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "times":
        return cmd_times(rest)

    if args.cmd == "places":
        return cmd_places(rest)

    if args.cmd == "year-table":
        return _run_module_main("sunclock.diagnostics.year_table", rest)

    if args.cmd == "plot-year":
        return _run_module_main("sunclock.diagnostics.plot_year", rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate": "sunclock.diagnostics.ephem.validate_skyfield",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
