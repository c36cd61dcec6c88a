from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..errors import CatalogLoadError, InvalidCoordinate
from ..geo.coordinates import Coordinate
from .config import DEFAULT_CATALOG_CONFIG
from .models import Restaurant

REQUIRED_COLUMNS = ["id", "name", "latitude", "longitude"]
DESCRIPTIVE_COLUMNS = ["address", "cuisine", "price_range", "hours", "phone", "description"]

_catalog: tuple[Restaurant, ...] | None = None


def _read_frame(path: Path) -> pd.DataFrame:
    try:
        # Keep ids and phone numbers as text; "" rather than NaN for blanks
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {path}") from e
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise CatalogLoadError(f"Catalog file {path} is not valid CSV: {e}") from e

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogLoadError(f"Catalog {path} is missing columns: {', '.join(missing)}")

    for col in DESCRIPTIVE_COLUMNS + ["rating"]:
        if col not in df.columns:
            df[col] = ""

    df["id"] = df["id"].str.strip()
    duplicated = df.loc[df["id"].duplicated(), "id"].unique().tolist()
    if duplicated:
        raise CatalogLoadError(f"Duplicate restaurant ids in catalog: {', '.join(duplicated)}")
    if (df["id"] == "").any():
        raise CatalogLoadError("Catalog contains a restaurant without an id")

    return df


def _parse_rating(raw: str, restaurant_id: str) -> float | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise CatalogLoadError(f"Restaurant {restaurant_id}: bad rating {raw!r}") from e


def _row_to_restaurant(row: pd.Series) -> Restaurant:
    restaurant_id = row["id"]
    try:
        coordinate = Coordinate(float(row["latitude"]), float(row["longitude"]))
    except (ValueError, InvalidCoordinate) as e:
        raise CatalogLoadError(f"Restaurant {restaurant_id}: {e}") from e

    return Restaurant(
        id=restaurant_id,
        name=row["name"],
        coordinate=coordinate,
        address=row["address"],
        cuisine=row["cuisine"],
        rating=_parse_rating(row["rating"], restaurant_id),
        price_range=row["price_range"],
        hours=row["hours"],
        phone=row["phone"],
        description=row["description"],
    )


def load_catalog(path: Path | str) -> tuple[Restaurant, ...]:
    """Read and validate a catalog CSV, preserving file order."""
    df = _read_frame(Path(path))
    return tuple(_row_to_restaurant(row) for _, row in df.iterrows())


def get_catalog() -> tuple[Restaurant, ...]:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(DEFAULT_CATALOG_CONFIG.catalog_path)
    return _catalog


def get_restaurant(restaurant_id: str) -> Restaurant | None:
    for restaurant in get_catalog():
        if restaurant.id == restaurant_id:
            return restaurant
    return None
