# tests/test_year_table.py

import csv

import pytest

import sunclock
from sunclock import CivilDate, Coord

np = pytest.importorskip("numpy")

from sunclock.diagnostics import year_table  # noqa: E402


def test_leap_year_length():
    assert len(year_table.days_of_year(2024)) == 366
    assert len(year_table.days_of_year(2023)) == 365

def test_series_matches_point_api():
    coord = Coord.from_degrees(51.4769, 0.0)
    s = year_table.build_year_series(np, 2021, coord)
    assert s.rise.shape == (365,)
    assert s.day_index[0] == 1 and s.day_index[-1] == 365
    assert not np.isnan(s.rise).any()

    i = 226  # 2021-08-15
    assert s.dates[i].isoformat() == "2021-08-15"
    assert s.rise[i] == sunclock.sunrise(CivilDate(15, 8, 2021), coord)
    assert s.set[i] == sunclock.sunset(CivilDate(15, 8, 2021), coord)

def test_series_polar_gaps():
    coord = Coord.from_degrees(78.0, 15.0)
    s = year_table.build_year_series(np, 2024, coord)
    assert np.isnan(s.rise).any()
    assert np.nanmax(s.day_length) == 24.0
    assert np.nanmin(s.day_length) == 0.0

def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "greenwich.csv"
    rc = year_table.main(["2024", "--place", "greenwich", "--csv", str(out)])
    assert rc == 0
    with open(out, newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == ["date", "rise_utc_hours", "set_utc_hours", "day_length_hours"]
    assert len(rows) == 367
    assert rows[1][0] == "2024-01-01"

def test_main_prints_table(capsys):
    rc = year_table.main(["2024", "--lat", "0", "--lon", "0", "--step", "30"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "2024-01-01" in out
    assert "2024-01-31" in out
