"""Test configuration and fixtures."""

from __future__ import annotations

import httpx
import pytest

from place_lookup.core.settings import Settings

_RealAsyncClient = httpx.AsyncClient


@pytest.fixture
def settings() -> Settings:
    return Settings(yelp_api_key="yelp-key", google_api_key="google-key")


@pytest.fixture
def mock_http(monkeypatch):
    """Route every httpx.AsyncClient through a MockTransport.

    Call with a handler `(request) -> httpx.Response`; returns the list
    that collects the requests sent.
    """

    def install(handler) -> list[httpx.Request]:
        sent: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording)
        monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: _RealAsyncClient(transport=transport, **kwargs))
        return sent

    return install


@pytest.fixture
def yelp_business() -> dict:
    return {
        "name": "Tartine Bakery",
        "url": "https://www.yelp.com/biz/tartine-bakery-san-francisco?adjust_creative=abc&utm_source=graphql",
        "photos": ["https://s3-media.fl.yelpcdn.com/bphoto/1.jpg", "https://s3-media.fl.yelpcdn.com/bphoto/2.jpg"],
        "rating": 4.1,
        "review_count": 8731,
        "coordinates": {"latitude": 37.76131, "longitude": -122.42431},
        "location": {
            "address1": "600 Guerrero St",
            "address2": "",
            "address3": None,
            "city": "San Francisco",
            "state": "CA",
            "country": "US",
        },
        "categories": [{"alias": "bakeries"}, {"alias": "cafes"}],
    }


@pytest.fixture
def google_details() -> dict:
    return {
        "name": "Tartine Bakery",
        "editorial_summary": {"language": "en", "overview": "Celebrated bakery with bread and pastries."},
        "formatted_address": "600 Guerrero St, San Francisco, CA 94110, USA",
        "photos": [{"photo_reference": "abc", "height": 100, "width": 100}],
        "rating": 4.5,
        "url": "https://maps.google.com/?cid=123",
        "user_ratings_total": 5120,
        "website": "https://tartinebakery.com/",
        "types": ["bakery", "cafe", "food"],
    }
