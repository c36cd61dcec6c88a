"""
Geographic primitives.

Responsibilities:
- Validate latitude/longitude pairs (``Coordinate``).
- Compute great-circle distances with the Haversine formula.
"""
from .coordinates import Coordinate
from .distance import EARTH_RADIUS_KM, distance, distances_from

__all__ = ["Coordinate", "EARTH_RADIUS_KM", "distance", "distances_from"]
