"""
Great-circle distance between coordinates.

All distances are kilometres on a sphere of mean radius ``EARTH_RADIUS_KM``.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .coordinates import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in km between ``a`` and ``b``."""
    lat_a = math.radians(a.latitude)
    lat_b = math.radians(b.latitude)
    dlat = lat_b - lat_a
    dlng = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat_a) * math.cos(lat_b) * math.sin(dlng / 2) ** 2
    # Rounding can push sqrt(h) a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def distances_from(
    origin: Coordinate,
    latitudes: Sequence[float] | np.ndarray,
    longitudes: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Vectorised ``distance`` from ``origin`` to many points at once."""
    lats = np.radians(np.asarray(latitudes, dtype=float))
    lat_o = math.radians(origin.latitude)

    dlat = lats - lat_o
    dlng = np.radians(np.asarray(longitudes, dtype=float) - origin.longitude)

    h = np.sin(dlat / 2) ** 2 + math.cos(lat_o) * np.cos(lats) * np.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.minimum(1.0, np.sqrt(h)))
