from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from .errors import UnknownPlaceError
from .types import Place

@dataclass
class PlaceRegistry:
    _places: Dict[str, Place]

    def get(self, name: str) -> Place:
        key = name.lower()
        if key not in self._places:
            raise UnknownPlaceError(f"Unknown place '{name}'. Available: {sorted(self._places)}")
        return self._places[key]

    def list(self) -> List[str]:
        return sorted(self._places.keys())

    def register(self, place: Place, *, overwrite: bool = False) -> None:
        key = place.name.lower()
        if (not overwrite) and (key in self._places):
            raise KeyError(f"Place '{place.name}' already exists. Use overwrite=True to replace.")
        self._places[key] = place
