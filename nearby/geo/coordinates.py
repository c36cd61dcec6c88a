from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from ..errors import InvalidCoordinate


def _as_degrees(value: object, name: str, bound: float) -> float:
    # bool is a Real subclass; True/False are never meaningful degrees
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCoordinate(f"{name} must be a number, got {value!r}")
    degrees = float(value)
    if not math.isfinite(degrees):
        raise InvalidCoordinate(f"{name} must be finite, got {degrees!r}")
    if not -bound <= degrees <= bound:
        raise InvalidCoordinate(f"{name} {degrees} outside [-{bound:g}, {bound:g}]")
    return degrees


@dataclass(frozen=True)
class Coordinate:
    """Immutable, validated (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", _as_degrees(self.latitude, "latitude", 90.0))
        object.__setattr__(self, "longitude", _as_degrees(self.longitude, "longitude", 180.0))

    def antipode(self) -> Coordinate:
        """Return the point on the opposite side of the globe."""
        longitude = self.longitude + 180.0 if self.longitude <= 0 else self.longitude - 180.0
        return Coordinate(-self.latitude, longitude)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)
