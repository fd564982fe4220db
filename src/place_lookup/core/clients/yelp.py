"""Yelp Fusion GraphQL API client.

API docs: https://docs.developer.yelp.com/docs/graphql-intro
Requires a bearer API key. Several searches are batched into one query
through aliased `search` fields.
"""

from __future__ import annotations

import json
import logging
import re

import httpx

from ..errors import PlaceLookupError
from ..models import YelpBusiness, YelpSearch
from ..settings import Settings

logger = logging.getLogger(__name__)

API_URL = "https://api.yelp.com/v3/graphql"

_SPECIALS = re.compile(r"[^a-zA-Z0-9]")

BUSINESS_SELECTION = """
        business {
            name
            url
            photos
            rating
            review_count
            coordinates {
                longitude
                latitude
            }
            location {
                address1
                address2
                address3
                city
                state
                country
            }
            categories {
                alias
            }
        }"""


def strip_specials(text: str) -> str:
    """Drop everything but ASCII letters and digits."""
    return _SPECIALS.sub("", text)


def _string_literal(value: str) -> str:
    # GraphQL string escapes are a subset of JSON's
    return json.dumps(value, ensure_ascii=False)


def create_search_block(search: YelpSearch, index: int = 0) -> str:
    """Build one aliased `search` field for a GraphQL query."""
    alias = f"search{index}_{strip_specials(search.name)}"

    if search.is_city_based:
        scope = f"location: {_string_literal(search.city)}"
    else:
        scope = f"latitude: {search.latitude}, longitude: {search.longitude}"

    return (
        f"    {alias}: search(term: {_string_literal(search.name)}, limit: 1, {scope}) {{"
        f"{BUSINESS_SELECTION}\n"
        "    }"
    )


def generate_query(searches: list[YelpSearch]) -> str:
    """Combine search blocks into a single GraphQL query document."""
    blocks = "\n".join(create_search_block(search, i) for i, search in enumerate(searches))
    return f"query {{\n{blocks}\n}}"


def _error_message(errors) -> str:
    messages = [e.get("message", "") for e in errors or [] if isinstance(e, dict)]
    messages = [m for m in messages if m]
    return "\n".join(messages) if messages else "unknown"


async def search_businesses(
    searches: list[YelpSearch],
    settings: Settings,
) -> list[YelpBusiness]:
    """Run one or more Yelp searches and flatten the matching businesses.

    Args:
        searches: Business searches, each scoped to a city or coordinates.
        settings: Credentials; the Yelp API key is required.

    Returns:
        Businesses from every search, in the order the searches were given.
    """
    if not searches:
        raise PlaceLookupError("No search inputs provided")

    api_key = settings.require_yelp_key()
    query = generate_query(searches)
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Accept-Language": "en_US",
    }

    async with httpx.AsyncClient(timeout=settings.http_timeout()) as client:
        response = await client.post(settings.proxied(API_URL), json={"query": query}, headers=headers)

    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        logger.warning("Yelp search returned a non-JSON body with HTTP %s", response.status_code)
        raise PlaceLookupError(f"Yelp returned a non-JSON response (HTTP {response.status_code})")

    data = body.get("data") or {}
    errors = body.get("errors")
    has_results = any(result for result in data.values())

    if response.is_error or (errors and not has_results):
        logger.warning("Yelp search failed with HTTP %s: %s", response.status_code, errors)
        raise PlaceLookupError(_error_message(errors))
    if errors:
        logger.warning("Yelp search returned partial errors: %s", _error_message(errors))

    businesses: list[YelpBusiness] = []
    for alias, result in data.items():
        if not result:
            continue
        for raw in result.get("business") or []:
            businesses.append(YelpBusiness.model_validate(raw))
        logger.debug("Yelp %s: %d business(es)", alias, len(result.get("business") or []))

    return businesses
