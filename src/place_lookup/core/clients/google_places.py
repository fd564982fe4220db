"""Google Places API client (Find Place and Place Details).

API docs: https://developers.google.com/maps/documentation/places/web-service
Requires an API key passed as the `key` query parameter.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..errors import PlaceLookupError
from ..models import GooglePlaceDetails
from ..settings import Settings

logger = logging.getLogger(__name__)

API_BASE = "https://maps.googleapis.com/maps/api/place"
FIND_PLACE_URL = f"{API_BASE}/findplacefromtext/json"
DETAILS_URL = f"{API_BASE}/details/json"

DEFAULT_DETAIL_FIELDS = [
    "name",
    "editorial_summary",
    "formatted_address",
    "photos",
    "rating",
    "url",
    "user_ratings_total",
    "website",
]

NO_RESULTS = "Found no Google place results"


def _raise_for_status(data: dict) -> None:
    """Translate a non-OK Places `status` into a PlaceLookupError."""
    status = data.get("status")
    if status == "OK":
        return
    if status == "ZERO_RESULTS":
        raise PlaceLookupError(NO_RESULTS)
    logger.warning("Google Places returned status %s", status)
    raise PlaceLookupError(data.get("error_message") or "unknown")


async def _get(url: str, params: dict, settings: Settings) -> dict:
    async with httpx.AsyncClient(timeout=settings.http_timeout()) as client:
        response = await client.get(
            settings.proxied(url),
            params=params,
            headers={"Accept": "application/json"},
        )
        response.raise_for_status()
        return response.json()


async def find_place_id(
    text: str,
    settings: Settings,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> str:
    """Find the best matching place for a free-text query.

    Args:
        text: Business name, optionally followed by a city.
        settings: Credentials; the Google API key is required.
        latitude: Optional latitude to bias results towards.
        longitude: Optional longitude to bias results towards.

    Returns:
        The `place_id` of the first candidate.
    """
    params: dict = {
        "input": text,
        "inputtype": "textquery",
        "key": settings.require_google_key(),
    }
    if latitude is not None and longitude is not None:
        params["locationbias"] = f"point:{latitude},{longitude}"

    data = await _get(FIND_PLACE_URL, params, settings)
    _raise_for_status(data)

    candidates = data.get("candidates") or []
    if not candidates:
        raise PlaceLookupError(NO_RESULTS)

    place_id = candidates[0]["place_id"]
    logger.debug("Google place for %r: %s", text, place_id)
    return place_id


async def fetch_place_details(
    place_id: str,
    settings: Settings,
    fields: Optional[list[str]] = None,
) -> GooglePlaceDetails:
    """Fetch the requested detail fields for a place."""
    params = {
        "fields": ",".join(fields or DEFAULT_DETAIL_FIELDS),
        "key": settings.require_google_key(),
        "place_id": place_id,
    }

    data = await _get(DETAILS_URL, params, settings)
    _raise_for_status(data)

    result = data.get("result")
    if not result:
        raise PlaceLookupError("Found no Google place details")

    logger.debug("Google place details for %s: %s", place_id, result)
    return GooglePlaceDetails.model_validate(result)
