"""
Distance ranking of catalog restaurants around a query point.

Everything here is a pure function of its arguments plus the geocoder's
answer: no logging, no caching, no retries.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..catalog.models import Restaurant
from ..errors import InvalidCoordinate, InvalidOptions, ResolutionUnavailable, UnresolvableLocation
from ..geo.coordinates import Coordinate
from ..geo.distance import distances_from
from ..geocoding.base import Geocoder

# Distances closer than this are treated as equal and keep catalog order
TIE_EPSILON_KM = 1e-9


@dataclass(frozen=True)
class SearchOptions:
    max_radius_km: float | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.max_radius_km is not None:
            if isinstance(self.max_radius_km, bool) or not isinstance(self.max_radius_km, (int, float)):
                raise InvalidOptions(f"max_radius_km must be a number, got {self.max_radius_km!r}")
            if not math.isfinite(self.max_radius_km) or self.max_radius_km < 0:
                raise InvalidOptions(f"max_radius_km must be a non-negative finite number, got {self.max_radius_km}")
        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
                raise InvalidOptions(f"timeout must be a number, got {self.timeout!r}")
            if not math.isfinite(self.timeout) or self.timeout <= 0:
                raise InvalidOptions(f"timeout must be a positive number of seconds, got {self.timeout}")


@dataclass(frozen=True)
class SearchLocation:
    coordinate: Coordinate
    query: str | None = None


@dataclass(frozen=True)
class RankedResult:
    restaurant: Restaurant
    distance_km: float


def resolve_location(
    location: Coordinate | str,
    geocoder: Geocoder | None = None,
    timeout: float | None = None,
) -> SearchLocation:
    """Turn a coordinate or free-text query into a ``SearchLocation``."""
    if isinstance(location, Coordinate):
        return SearchLocation(coordinate=location)

    if isinstance(location, str):
        if not location.strip():
            raise UnresolvableLocation("Empty location query")
        if geocoder is None:
            raise ResolutionUnavailable("No geocoder configured for free-text locations")
        coordinate = geocoder.resolve(location, timeout=timeout)
        return SearchLocation(coordinate=coordinate, query=location)

    raise InvalidCoordinate(f"Location must be a Coordinate or text, got {type(location).__name__}")


def _stable_order(distances: np.ndarray) -> list[int]:
    """Indices sorted by distance; near-equal distances fall back to index order."""
    order = np.argsort(distances, kind="stable").tolist()

    ranked: list[int] = []
    group: list[int] = []
    group_start = 0.0
    for idx in order:
        if group and distances[idx] - group_start > TIE_EPSILON_KM:
            ranked.extend(sorted(group))
            group = []
        if not group:
            group_start = distances[idx]
        group.append(idx)
    ranked.extend(sorted(group))
    return ranked


def search_nearby(
    location: Coordinate | str,
    catalog: Sequence[Restaurant],
    options: SearchOptions | None = None,
    geocoder: Geocoder | None = None,
) -> tuple[SearchLocation, list[RankedResult]]:
    """Rank ``catalog`` by great-circle distance from ``location``.

    Steps:
    - Resolve the location (free text goes through ``geocoder``).
    - Compute the Haversine distance to every restaurant.
    - Drop restaurants farther than ``options.max_radius_km``, if set.
    - Sort ascending by distance, stable with respect to catalog order.
    """
    options = options or SearchOptions()
    search_location = resolve_location(location, geocoder, timeout=options.timeout)

    if not catalog:
        return search_location, []

    distances = distances_from(
        search_location.coordinate,
        [r.coordinate.latitude for r in catalog],
        [r.coordinate.longitude for r in catalog],
    )

    candidates = np.arange(len(catalog))
    if options.max_radius_km is not None:
        candidates = candidates[distances <= options.max_radius_km]

    ranked = [int(candidates[i]) for i in _stable_order(distances[candidates])]
    results = [
        RankedResult(restaurant=catalog[i], distance_km=float(distances[i]))
        for i in ranked
    ]
    return search_location, results
