"""
TTL cache in front of a geocoder.

Only successful resolutions are stored; errors always reach the caller so an
outage is never remembered as "unknown address".
"""
from __future__ import annotations

import time
from typing import Any

from ..geo.coordinates import Coordinate
from .base import Geocoder
from .static import normalize_query

_DEFAULT_TTL = 300  # 5 minutes


class CachingGeocoder:
    def __init__(self, inner: Geocoder, ttl: float = _DEFAULT_TTL):
        self.inner = inner
        self.ttl = ttl
        self._cache: dict[str, dict[str, Any]] = {}
        self._hits = 0
        self._misses = 0

    def resolve(self, query: str, timeout: float | None = None) -> Coordinate:
        key = normalize_query(query)
        entry = self._cache.get(key)
        if entry and time.time() - entry["created_at"] < self.ttl:
            self._hits += 1
            return entry["value"]
        if entry:
            del self._cache[key]
        self._misses += 1

        coordinate = self.inner.resolve(query, timeout=timeout)
        self._cache[key] = {"value": coordinate, "created_at": time.time()}
        return coordinate

    def stats(self) -> dict:
        total = self._hits + self._misses
        return {
            "size": len(self._cache),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._cache.clear()
        self._hits = 0
        self._misses = 0
