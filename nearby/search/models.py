from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ..catalog.models import Restaurant
from .proximity import RankedResult, SearchLocation


class SearchRequest(BaseModel):
    query: str | None = Field(
        default=None, min_length=1, description="Free-text address or place name"
    )
    latitude: float | None = Field(default=None, description="Decimal degrees, -90..90")
    longitude: float | None = Field(default=None, description="Decimal degrees, -180..180")
    max_radius_km: float | None = Field(
        default=None, description="Drop restaurants farther than this; unbounded when omitted"
    )

    @model_validator(mode="after")
    def _one_location_form(self) -> SearchRequest:
        has_text = self.query is not None
        has_lat = self.latitude is not None
        has_lng = self.longitude is not None
        if has_lat != has_lng:
            raise ValueError("latitude and longitude must be supplied together")
        if has_text == has_lat:
            raise ValueError("supply either query or latitude/longitude, not both")
        return self


class RestaurantOut(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    address: str
    cuisine: str
    rating: float | None
    price_range: str
    hours: str
    phone: str
    description: str

    @classmethod
    def from_restaurant(cls, restaurant: Restaurant) -> RestaurantOut:
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            latitude=restaurant.coordinate.latitude,
            longitude=restaurant.coordinate.longitude,
            address=restaurant.address,
            cuisine=restaurant.cuisine,
            rating=restaurant.rating,
            price_range=restaurant.price_range,
            hours=restaurant.hours,
            phone=restaurant.phone,
            description=restaurant.description,
        )


class LocationOut(BaseModel):
    latitude: float
    longitude: float
    query: str | None = None


class RankedResultOut(BaseModel):
    restaurant: RestaurantOut
    distance_km: float


class SearchResponse(BaseModel):
    location: LocationOut
    unit: str = "km"
    total_results: int
    results: list[RankedResultOut]

    @classmethod
    def build(cls, location: SearchLocation, results: list[RankedResult]) -> SearchResponse:
        return cls(
            location=LocationOut(
                latitude=location.coordinate.latitude,
                longitude=location.coordinate.longitude,
                query=location.query,
            ),
            total_results=len(results),
            results=[
                RankedResultOut(
                    restaurant=RestaurantOut.from_restaurant(r.restaurant),
                    distance_km=round(r.distance_km, 3),
                )
                for r in results
            ],
        )
