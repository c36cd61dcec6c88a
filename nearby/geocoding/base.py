from __future__ import annotations

from typing import Protocol

from ..geo.coordinates import Coordinate


class Geocoder(Protocol):
    """Resolve free text to a coordinate, or fail.

    Implementations raise ``UnresolvableLocation`` when the text has no
    mapping and ``ResolutionUnavailable`` when the service itself cannot
    answer (including when ``timeout`` seconds elapse).
    """

    def resolve(self, query: str, timeout: float | None = None) -> Coordinate:
        ...
