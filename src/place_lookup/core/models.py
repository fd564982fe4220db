"""Pydantic data models, the shared business objects.

Raw response shapes from Yelp and Google Places, plus the flat records the
lookups hand back as template variables.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DataSource(str, Enum):
    """External place data providers."""

    YELP = "yelp"
    GOOGLE_PLACES = "google_places"


# ─── Yelp ────────────────────────────────────────────────────────────────────


class YelpSearch(BaseModel):
    """One business search, scoped either to a city or to a coordinate pair."""

    name: str
    city: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90, allow_inf_nan=False)
    longitude: Optional[float] = Field(None, ge=-180, le=180, allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_scope(self) -> "YelpSearch":
        has_coordinates = self.latitude is not None and self.longitude is not None
        if not self.city and not has_coordinates:
            raise ValueError("A Yelp search needs either a city or both latitude and longitude")
        return self

    @property
    def is_city_based(self) -> bool:
        return bool(self.city)


class YelpCategory(BaseModel):
    alias: str
    title: Optional[str] = None


class Coordinates(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Location(BaseModel):
    """Postal location of a Yelp business."""

    address1: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    display_address: list[str] = Field(default_factory=list)


class YelpBusiness(BaseModel):
    """A business as returned by the Yelp GraphQL `search` field."""

    model_config = ConfigDict(extra="ignore")

    name: str
    url: str = ""
    photos: list[str] = Field(default_factory=list)
    rating: Optional[float] = None
    review_count: int = 0
    coordinates: Coordinates = Field(default_factory=Coordinates)
    location: Location = Field(default_factory=Location)
    categories: list[YelpCategory] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # GraphQL returns explicit nulls for unset nested objects and lists
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ─── Google Places ───────────────────────────────────────────────────────────


class EditorialSummary(BaseModel):
    overview: Optional[str] = None
    language: Optional[str] = None


class GooglePlaceDetails(BaseModel):
    """`result` object of the Place Details endpoint.

    Only the fields we read are typed; anything else requested through
    `fields` is kept as an extra attribute.
    """

    model_config = ConfigDict(extra="allow")

    name: str = ""
    editorial_summary: Optional[EditorialSummary] = None
    formatted_address: str = ""
    rating: Optional[float] = None
    url: str = ""
    user_ratings_total: int = 0
    website: str = ""
    types: list[str] = Field(default_factory=list)

    @property
    def overview(self) -> str:
        if self.editorial_summary and self.editorial_summary.overview:
            return self.editorial_summary.overview
        return ""


# ─── Lookup results ──────────────────────────────────────────────────────────


class GooglePlace(BaseModel):
    """Template variables produced by a Google-only lookup."""

    name: str
    summary: str = ""
    address: str = ""
    website: str = ""
    categories: str = ""
    url: str = ""
    review_count: int = 0
    ratings: str = Field(description="Five-character star rating, e.g. ★★★★☆")


class Place(BaseModel):
    """Template variables merged from a Yelp business and its Google place."""

    name: str
    summary: str = ""
    address: str = ""
    location: Location
    website: str = ""
    categories: str = ""
    banner: str = ""
    yelp_url: str = ""
    yelp_review_count: int = 0
    yelp_ratings: str
    google_url: str = ""
    google_review_count: int = 0
    google_ratings: str
