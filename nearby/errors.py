"""
Error taxonomy for the nearby-restaurant search pipeline.

The core only raises these; the HTTP layer in ``app.py`` decides how each one
is reported to callers.
"""
from __future__ import annotations


class NearbyError(Exception):
    """Base class for every error raised by this package."""


class InvalidCoordinate(NearbyError, ValueError):
    """Latitude/longitude out of range, non-finite, or not numeric."""


class InvalidOptions(NearbyError, ValueError):
    """Search options that cannot be honoured, e.g. a negative radius."""


class LocationResolutionError(NearbyError):
    """Free-text location could not be turned into a coordinate."""


class UnresolvableLocation(LocationResolutionError):
    """The text has no known mapping to coordinates."""


class ResolutionUnavailable(LocationResolutionError):
    """The geocoder timed out, was unreachable, or answered garbage."""


class CatalogLoadError(NearbyError):
    """The restaurant catalog could not be read or failed validation."""
