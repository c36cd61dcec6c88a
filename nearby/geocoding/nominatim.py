"""
OpenStreetMap Nominatim geocoder.

Free-form ``q=`` search, first hit wins. Every transport problem (timeout,
connection failure, non-2xx status, unparseable body) is reported as
``ResolutionUnavailable`` so callers can tell "service down" apart from
"address unknown".
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from ..errors import InvalidCoordinate, ResolutionUnavailable, UnresolvableLocation
from ..geo.coordinates import Coordinate
from .config import DEFAULT_GEOCODING_CONFIG, GeocodingConfig

logger = logging.getLogger(__name__)


class NominatimGeocoder:
    def __init__(self, config: GeocodingConfig = DEFAULT_GEOCODING_CONFIG):
        self.config = config

    def _params(self, query: str) -> dict[str, Any]:
        params: dict[str, Any] = {"q": query, "format": "jsonv2", "limit": 1}
        if self.config.country_codes:
            params["countrycodes"] = self.config.country_codes
        return params

    def resolve(self, query: str, timeout: float | None = None) -> Coordinate:
        query = query.strip()
        if not query:
            raise UnresolvableLocation("Empty location query")

        effective_timeout = timeout if timeout is not None else self.config.timeout
        headers = {"User-Agent": self.config.user_agent}

        try:
            with httpx.Client(timeout=effective_timeout, headers=headers) as client:
                response = client.get(self.config.base_url, params=self._params(query))
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            logger.warning(f"Nominatim timeout after {effective_timeout}s for: {query}")
            raise ResolutionUnavailable(f"Geocoder timed out resolving {query!r}") from e
        except httpx.HTTPError as e:
            logger.error(f"Nominatim error for '{query}': {e}")
            raise ResolutionUnavailable(f"Geocoder unreachable: {e}") from e
        except ValueError as e:
            logger.error(f"Nominatim returned non-JSON body for '{query}'")
            raise ResolutionUnavailable("Geocoder returned an unreadable response") from e

        if not isinstance(data, list):
            logger.error(f"Nominatim returned unexpected payload for '{query}': {type(data).__name__}")
            raise ResolutionUnavailable("Geocoder returned an unexpected response")

        if not data:
            logger.info(f"Nominatim: no results for '{query}'")
            raise UnresolvableLocation(f"No known location for {query!r}")

        best = data[0]
        try:
            return Coordinate(float(best["lat"]), float(best["lon"]))
        except (KeyError, TypeError, ValueError, InvalidCoordinate) as e:
            logger.error(f"Nominatim returned malformed coordinates for '{query}': {best!r}")
            raise ResolutionUnavailable("Geocoder returned malformed coordinates") from e
