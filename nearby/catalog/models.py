from __future__ import annotations

from dataclasses import dataclass

from ..geo.coordinates import Coordinate


@dataclass(frozen=True)
class Restaurant:
    """A catalog entry. Descriptive fields are passed through untouched."""

    id: str
    name: str
    coordinate: Coordinate
    address: str = ""
    cuisine: str = ""
    rating: float | None = None
    price_range: str = ""
    hours: str = ""
    phone: str = ""
    description: str = ""
