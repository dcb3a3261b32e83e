# tests/test_places.py

import math

import pytest

import sunclock
from sunclock.api import set_registry
from sunclock.places import build_registry


@pytest.fixture
def fresh_registry():
    """Give each test its own preset registry and restore the default afterwards."""
    set_registry(build_registry())
    yield
    set_registry(build_registry())

def test_default_places(fresh_registry):
    names = sunclock.list_places()
    assert names == sorted(names)
    assert {"greenwich", "almanac-example", "longyearbyen", "mcmurdo"} <= set(names)

def test_get_place_is_case_insensitive(fresh_registry):
    place = sunclock.get_place("Greenwich")
    assert place.name == "greenwich"
    coord = place.coord()
    assert coord.lat_rad == pytest.approx(math.radians(51.4769))

def test_unknown_place(fresh_registry):
    with pytest.raises(sunclock.UnknownPlaceError) as exc:
        sunclock.get_place("atlantis")
    assert "greenwich" in str(exc.value)
    with pytest.raises(KeyError):
        sunclock.get_place("atlantis")

def test_register_place(fresh_registry):
    home = sunclock.Place("reykjavik", 64.1466, -21.9426)
    sunclock.register_place(home)
    assert sunclock.get_place("reykjavik") == home

    with pytest.raises(KeyError):
        sunclock.register_place(sunclock.Place("reykjavik", 0.0, 0.0))

    sunclock.register_place(sunclock.Place("reykjavik", 64.0, -22.0), overwrite=True)
    assert sunclock.get_place("reykjavik").lat_deg == 64.0

def test_registry_changes_do_not_leak(fresh_registry):
    assert "reykjavik" not in sunclock.list_places()

def test_example_place_reproduces_worked_example(fresh_registry):
    coord = sunclock.get_place("almanac-example").coord()
    assert sunclock.sunrise(sunclock.CivilDate(25, 6, 1990), coord) == pytest.approx(9.441, abs=0.01)
