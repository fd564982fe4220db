"""Runtime settings for the Yelp and Google Places clients.

Keys are read from the environment, just like the server reads every other
secret. An optional CORS proxy is prepended to outgoing URLs when set.
"""

from __future__ import annotations

import math
import os
from typing import Optional

import httpx
from pydantic import BaseModel, Field

from .errors import PlaceLookupError

DEFAULT_TIMEOUT = 30.0


class Settings(BaseModel):
    """API credentials and transport options."""

    yelp_api_key: str = ""
    google_api_key: str = ""
    cors_proxy_url: Optional[str] = Field(None, description="Prefix prepended to every external URL")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            yelp_api_key=os.environ.get("YELP_API_KEY", ""),
            google_api_key=os.environ.get("GOOGLE_API_KEY", ""),
            cors_proxy_url=os.environ.get("CORS_PROXY_URL") or None,
            timeout=_timeout_from_env(),
        )

    def http_timeout(self) -> httpx.Timeout:
        """Overall request timeout; connecting never waits longer than 10s."""
        return httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0))

    def proxied(self, url: str) -> str:
        """Route a URL through the CORS proxy, if one is configured."""
        if not self.cors_proxy_url:
            return url
        return f"{self.cors_proxy_url.rstrip('/')}/{url}"

    def require_yelp_key(self) -> str:
        if not self.yelp_api_key:
            raise PlaceLookupError("Yelp API key was not found")
        return self.yelp_api_key

    def require_google_key(self) -> str:
        if not self.google_api_key:
            raise PlaceLookupError("Google API key was not found")
        return self.google_api_key


def _timeout_from_env() -> float:
    raw = os.environ.get("PLACE_LOOKUP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise PlaceLookupError(f"PLACE_LOOKUP_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise PlaceLookupError(f"PLACE_LOOKUP_TIMEOUT must be a positive number of seconds, got {raw!r}")
    return timeout
