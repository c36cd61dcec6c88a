"""
Proximity search.

Responsibilities:
- Resolve a location query (coordinate or free text) to a ``Coordinate``.
- Measure the distance to every catalog restaurant.
- Apply the optional radius filter and return a stable, distance-sorted list.
"""
from .proximity import (
    TIE_EPSILON_KM,
    RankedResult,
    SearchLocation,
    SearchOptions,
    resolve_location,
    search_nearby,
)

__all__ = [
    "RankedResult",
    "SearchLocation",
    "SearchOptions",
    "TIE_EPSILON_KM",
    "resolve_location",
    "search_nearby",
]
