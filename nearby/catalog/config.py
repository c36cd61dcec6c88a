"""
Configuration for locating the restaurant catalog.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the catalog CSV lives. ``NEARBY_CATALOG_PATH`` overrides both fields.
    """

    data_dir: Path = _BUNDLED_DATA_DIR
    filename: str = "restaurants.csv"
    override_path: str | None = os.getenv("NEARBY_CATALOG_PATH") or None

    @property
    def catalog_path(self) -> Path:
        if self.override_path:
            return Path(self.override_path)
        return self.data_dir / self.filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
