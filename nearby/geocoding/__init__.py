"""
Geocoding collaborators.

Responsibilities:
- Define the single-method ``Geocoder`` capability the search core consumes.
- Provide an offline gazetteer and an OpenStreetMap Nominatim client.
- Optionally cache successful resolutions in front of any provider.
"""
from __future__ import annotations

from .base import Geocoder
from .cache import CachingGeocoder
from .config import DEFAULT_GEOCODING_CONFIG, GeocodingConfig
from .nominatim import NominatimGeocoder
from .static import StaticGeocoder, default_gazetteer


def build_geocoder(config: GeocodingConfig = DEFAULT_GEOCODING_CONFIG) -> Geocoder:
    """Construct the geocoder named by ``config.provider``."""
    if config.provider == "nominatim":
        geocoder: Geocoder = NominatimGeocoder(config)
    elif config.provider == "static":
        geocoder = StaticGeocoder(default_gazetteer())
    else:
        raise ValueError(f"Unknown geocoding provider: {config.provider!r}")

    if config.cache_ttl > 0:
        geocoder = CachingGeocoder(geocoder, ttl=config.cache_ttl)
    return geocoder


__all__ = [
    "CachingGeocoder",
    "DEFAULT_GEOCODING_CONFIG",
    "Geocoder",
    "GeocodingConfig",
    "NominatimGeocoder",
    "StaticGeocoder",
    "build_geocoder",
    "default_gazetteer",
]
