"""Place lookups: query Yelp and Google Places and merge the results.

Each lookup returns a flat record ready to be used as note template
variables, or None when the caller abandoned the search (blank input).
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from .clients import google_places, yelp
from .errors import PlaceLookupError
from .models import GooglePlace, GooglePlaceDetails, Place, YelpBusiness, YelpSearch
from .ratings import star_rating
from .settings import Settings

logger = logging.getLogger(__name__)

# Continuation of a YAML list inside frontmatter, e.g. "categories:\n  - {{categories}}"
LIST_SEPARATOR = "\n  - "

GOOGLE_ONLY_DETAIL_FIELDS = [*google_places.DEFAULT_DETAIL_FIELDS, "address_components", "types"]


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def merge_place(business: YelpBusiness, details: GooglePlaceDetails) -> Place:
    """Combine a Yelp business and its Google place details into one record."""
    return Place(
        name=business.name,
        summary=details.overview,
        address=details.formatted_address,
        location=business.location,
        website=details.website or "",
        categories=LIST_SEPARATOR.join(c.alias for c in business.categories),
        banner=business.photos[0] if business.photos else "",
        yelp_url=business.url.split("?")[0],
        yelp_review_count=business.review_count,
        yelp_ratings=star_rating(business.rating),
        google_url=details.url,
        google_review_count=details.user_ratings_total,
        google_ratings=star_rating(details.rating),
    )


def google_place_from_details(name: str, details: GooglePlaceDetails) -> GooglePlace:
    """Build the Google-only record. The caller's search name is kept as the name."""
    return GooglePlace(
        name=name,
        summary=details.overview,
        address=details.formatted_address,
        website=details.website or "",
        categories=LIST_SEPARATOR.join(details.types),
        url=details.url,
        review_count=details.user_ratings_total,
        ratings=star_rating(details.rating),
    )


async def search_yelp(
    name: Optional[str],
    city: Optional[str],
    settings: Settings,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> Optional[list[YelpBusiness]]:
    """Search Yelp for a business in a city, or near a coordinate pair.

    Coordinates take precedence over the city when both are given.
    Returns None if the name is blank, or if there is neither a city nor
    a full coordinate pair.
    """
    settings.require_yelp_key()
    if _blank(name):
        return None
    if latitude is not None and longitude is not None:
        try:
            search = YelpSearch(name=name, latitude=latitude, longitude=longitude)
        except ValidationError as exc:
            raise PlaceLookupError(f"Invalid coordinates: {latitude}, {longitude}") from exc
    elif _blank(city):
        return None
    else:
        search = YelpSearch(name=name, city=city)
    return await yelp.search_businesses([search], settings)


async def search_google_places(name: Optional[str], city: Optional[str], settings: Settings) -> Optional[GooglePlace]:
    """Look up a business on Google Places only.

    Returns None if either input is blank.
    """
    settings.require_google_key()
    if _blank(name) or _blank(city):
        return None

    place_id = await google_places.find_place_id(f"{name} {city}", settings)
    details = await google_places.fetch_place_details(place_id, settings, GOOGLE_ONLY_DETAIL_FIELDS)
    return google_place_from_details(name, details)


async def search_place(name: Optional[str], city: Optional[str], settings: Settings) -> Optional[Place]:
    """Look up a business on Yelp, then enrich it from Google Places.

    The first Yelp match decides the business; its name and coordinates
    are used to find the same place on Google.

    Returns:
        The merged Place, or None if the search was abandoned or Yelp
        found nothing.
    """
    settings.require_google_key()

    businesses = await search_yelp(name, city, settings)
    if businesses is None:
        return None
    if not businesses:
        logger.warning("Failed to find Yelp business results for %r in %r", name, city)
        return None

    business = businesses[0]
    logger.debug("Yelp match for %r: %s", name, business)

    coordinates = business.coordinates
    place_id = await google_places.find_place_id(
        business.name,
        settings,
        latitude=coordinates.latitude,
        longitude=coordinates.longitude,
    )
    details = await google_places.fetch_place_details(place_id, settings)

    return merge_place(business, details)
