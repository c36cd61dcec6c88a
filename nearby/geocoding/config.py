from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class GeocodingConfig:
    provider: str = os.getenv("NEARBY_GEOCODER", "static")
    base_url: str = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
    user_agent: str = os.getenv("NOMINATIM_USER_AGENT", "nearby-restaurants/1.0")
    country_codes: str | None = os.getenv("NOMINATIM_COUNTRY_CODES") or None
    timeout: float = 10.0
    cache_ttl: float = 300.0


DEFAULT_GEOCODING_CONFIG = GeocodingConfig()
