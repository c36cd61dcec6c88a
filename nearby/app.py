from __future__ import annotations

import logging
import time

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_search
from .catalog.data_store import get_catalog, get_restaurant
from .catalog.models import Restaurant
from .errors import (
    InvalidCoordinate,
    InvalidOptions,
    NearbyError,
    ResolutionUnavailable,
    UnresolvableLocation,
)
from .geo.coordinates import Coordinate
from .geocoding import build_geocoder
from .geocoding.base import Geocoder
from .search.config import DEFAULT_SEARCH_CONFIG
from .search.models import RestaurantOut, SearchRequest, SearchResponse
from .search.proximity import SearchOptions, search_nearby

logger = logging.getLogger(__name__)

app = FastAPI(title="Nearby Restaurants API", version="1.0.0")

_geocoder: Geocoder | None = None


def get_geocoder() -> Geocoder:
    global _geocoder
    if _geocoder is None:
        _geocoder = build_geocoder()
    return _geocoder


def get_restaurants() -> tuple[Restaurant, ...]:
    return get_catalog()


# ── Error mapping ────────────────────────────────────────────────────────

_STATUS_BY_ERROR: dict[type[NearbyError], int] = {
    InvalidCoordinate: 422,
    InvalidOptions: 422,
    UnresolvableLocation: 404,
    ResolutionUnavailable: 503,
}


@app.exception_handler(NearbyError)
def nearby_error_handler(request: Request, exc: NearbyError) -> JSONResponse:
    status = next(
        (code for err, code in _STATUS_BY_ERROR.items() if isinstance(exc, err)),
        500,
    )
    if status >= 500:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(status_code=status, content={"detail": str(exc)})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata(catalog: tuple[Restaurant, ...] = Depends(get_restaurants)) -> dict:
    cuisines = sorted({r.cuisine for r in catalog if r.cuisine})
    price_ranges = sorted({r.price_range for r in catalog if r.price_range}, key=len)
    return {
        "total_restaurants": len(catalog),
        "cuisines": cuisines,
        "price_ranges": price_ranges,
        "unit": "km",
    }


@app.get("/restaurants", response_model=list[RestaurantOut])
def list_restaurants(
    catalog: tuple[Restaurant, ...] = Depends(get_restaurants),
) -> list[RestaurantOut]:
    return [RestaurantOut.from_restaurant(r) for r in catalog]


@app.get("/restaurants/{restaurant_id}", response_model=RestaurantOut)
def restaurant_detail(restaurant_id: str) -> RestaurantOut:
    restaurant = get_restaurant(restaurant_id)
    if restaurant is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return RestaurantOut.from_restaurant(restaurant)


# ── Search ───────────────────────────────────────────────────────────────


def _run_search(
    body: SearchRequest,
    catalog: tuple[Restaurant, ...],
    geocoder: Geocoder,
) -> SearchResponse:
    start_time = time.time()
    max_radius = body.max_radius_km
    if max_radius is None:
        max_radius = DEFAULT_SEARCH_CONFIG.default_max_radius_km

    try:
        options = SearchOptions(
            max_radius_km=max_radius,
            timeout=DEFAULT_SEARCH_CONFIG.geocode_timeout,
        )
        if body.query is not None:
            location: Coordinate | str = body.query
        else:
            location = Coordinate(body.latitude, body.longitude)
        search_location, results = search_nearby(location, catalog, options, geocoder)
    except NearbyError as e:
        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        record_search(body.query, max_radius, 0, elapsed_ms, outcome=type(e).__name__)
        raise

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_search(body.query, max_radius, len(results), elapsed_ms)
    return SearchResponse.build(search_location, results)


@app.post("/search", response_model=SearchResponse)
def search(
    body: SearchRequest,
    catalog: tuple[Restaurant, ...] = Depends(get_restaurants),
    geocoder: Geocoder = Depends(get_geocoder),
) -> SearchResponse:
    return _run_search(body, catalog, geocoder)


@app.get("/search", response_model=SearchResponse)
def search_get(
    q: str | None = Query(default=None, description="Free-text address or place name"),
    lat: float | None = Query(default=None),
    lng: float | None = Query(default=None),
    max_radius_km: float | None = Query(default=None),
    catalog: tuple[Restaurant, ...] = Depends(get_restaurants),
    geocoder: Geocoder = Depends(get_geocoder),
) -> SearchResponse:
    try:
        body = SearchRequest(query=q, latitude=lat, longitude=lng, max_radius_km=max_radius_km)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=[err["msg"] for err in e.errors()])
    return _run_search(body, catalog, geocoder)


# ── Analytics ────────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
