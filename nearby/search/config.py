from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class SearchConfig:
    default_max_radius_km: float | None = _optional_float("NEARBY_MAX_RADIUS_KM")
    geocode_timeout: float = 10.0


DEFAULT_SEARCH_CONFIG = SearchConfig()
