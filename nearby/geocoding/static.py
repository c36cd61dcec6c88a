from __future__ import annotations

import re
from typing import Mapping

from ..errors import UnresolvableLocation
from ..geo.coordinates import Coordinate

_WHITESPACE = re.compile(r"\s+")

# Neighbourhoods and landmarks around the bundled San Francisco catalog
_SAN_FRANCISCO_PLACES: dict[str, tuple[float, float]] = {
    "san francisco": (37.7749, -122.4194),
    "san francisco, ca": (37.7749, -122.4194),
    "union square": (37.7880, -122.4075),
    "financial district": (37.7946, -122.3999),
    "chinatown": (37.7941, -122.4078),
    "north beach": (37.8061, -122.4103),
    "fisherman's wharf": (37.8080, -122.4177),
    "mission district": (37.7599, -122.4148),
    "the mission": (37.7599, -122.4148),
    "castro": (37.7609, -122.4350),
    "haight-ashbury": (37.7692, -122.4481),
    "hayes valley": (37.7766, -122.4240),
    "soma": (37.7785, -122.4056),
    "south of market": (37.7785, -122.4056),
    "nob hill": (37.7930, -122.4161),
    "marina": (37.8037, -122.4368),
    "japantown": (37.7854, -122.4294),
    "ferry building": (37.7955, -122.3937),
    "oracle park": (37.7786, -122.3893),
    "golden gate park": (37.7694, -122.4862),
}


def normalize_query(query: str) -> str:
    """Lower-case and collapse whitespace so lookups ignore formatting."""
    return _WHITESPACE.sub(" ", query.strip().lower())


def default_gazetteer() -> dict[str, Coordinate]:
    return {name: Coordinate(lat, lng) for name, (lat, lng) in _SAN_FRANCISCO_PLACES.items()}


class StaticGeocoder:
    """In-memory gazetteer; never touches the network."""

    def __init__(self, places: Mapping[str, Coordinate]):
        self._places = {normalize_query(name): coord for name, coord in places.items()}

    def resolve(self, query: str, timeout: float | None = None) -> Coordinate:
        coordinate = self._places.get(normalize_query(query))
        if coordinate is None:
            raise UnresolvableLocation(f"No known location for {query!r}")
        return coordinate
