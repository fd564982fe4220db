"""Place Lookup MCP Server.

FastMCP server with 3 tools that fill note templates with business details
from Yelp and Google Places.
Run: place-lookup-mcp
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .core import places
from .core.models import DataSource
from .core.settings import Settings

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging and report which providers have credentials."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    settings = Settings.from_env()
    if not settings.yelp_api_key:
        logger.warning("YELP_API_KEY is not set; search_place and search_yelp will fail")
    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY is not set; search_place and search_google_places will fail")
    yield


mcp = FastMCP(
    "Place Lookup",
    instructions="Look up a restaurant, shop, or any business by name and city. Returns address, summary, categories, links, review counts and star ratings from Yelp and Google Places, ready to drop into a note.",
    lifespan=lifespan,
)


def _abandoned(what: str, requirement: str = "a business name and a city are required") -> dict:
    return {"found": False, "summary": f"{what} cancelled: {requirement}."}


# ─── Tool 1: Combined Place Search ───────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def search_place(name: str, city: str) -> dict:
    """Business details merged from Yelp and Google Places.

    Finds the business on Yelp, then matches it on Google Places near the
    Yelp coordinates.

    Args:
        name: Business name, e.g. 'Tartine Bakery'.
        city: City to search in, e.g. 'San Francisco, CA'.
    """
    place = await places.search_place(name, city, Settings.from_env())
    if place is None:
        if not name.strip() or not city.strip():
            return _abandoned("Place search")
        return {"found": False, "summary": "Failed to find Yelp business results"}

    return {
        "found": True,
        "sources": [DataSource.YELP.value, DataSource.GOOGLE_PLACES.value],
        "place": place.model_dump(),
        "summary": f"{place.name}: Yelp {place.yelp_ratings} ({place.yelp_review_count} reviews) | Google {place.google_ratings} ({place.google_review_count} reviews)",
    }


# ─── Tool 2: Yelp Search ─────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def search_yelp(
    name: str,
    city: str = "",
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> dict:
    """Raw Yelp business matches for a name in a city or near a point.

    Args:
        name: Business name.
        city: City to search in. Ignored when latitude and longitude are given.
        latitude: Optional latitude to search around.
        longitude: Optional longitude to search around.
    """
    businesses = await places.search_yelp(name, city, Settings.from_env(), latitude=latitude, longitude=longitude)
    if businesses is None:
        return _abandoned("Yelp search", "a business name and either a city or latitude and longitude are required")

    return {
        "found": bool(businesses),
        "sources": [DataSource.YELP.value],
        "businesses": [b.model_dump() for b in businesses],
        "summary": ", ".join(b.name for b in businesses) if businesses else "Failed to find Yelp business results",
    }


# ─── Tool 3: Google Places Search ────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def search_google_places(name: str, city: str) -> dict:
    """Business details from Google Places only.

    Args:
        name: Business name.
        city: City to search in.
    """
    place = await places.search_google_places(name, city, Settings.from_env())
    if place is None:
        return _abandoned("Google Places search")

    return {
        "found": True,
        "sources": [DataSource.GOOGLE_PLACES.value],
        "place": place.model_dump(),
        "summary": f"{place.name}: {place.address} | Google {place.ratings} ({place.review_count} reviews)",
    }


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
