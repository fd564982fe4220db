"""Tests for environment-driven settings."""

import pytest

from place_lookup.core.errors import PlaceLookupError
from place_lookup.core.settings import Settings


def test_from_env(monkeypatch):
    monkeypatch.setenv("YELP_API_KEY", "y")
    monkeypatch.setenv("GOOGLE_API_KEY", "g")
    monkeypatch.setenv("CORS_PROXY_URL", "https://proxy.example/")
    monkeypatch.setenv("PLACE_LOOKUP_TIMEOUT", "5")

    settings = Settings.from_env()

    assert settings.yelp_api_key == "y"
    assert settings.google_api_key == "g"
    assert settings.cors_proxy_url == "https://proxy.example/"
    assert settings.timeout == 5.0


def test_from_env_defaults(monkeypatch):
    for var in ("YELP_API_KEY", "GOOGLE_API_KEY", "CORS_PROXY_URL", "PLACE_LOOKUP_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings.from_env()

    assert settings.yelp_api_key == ""
    assert settings.cors_proxy_url is None
    assert settings.timeout == 30.0


def test_proxied():
    assert Settings().proxied("https://api.yelp.com/v3/graphql") == "https://api.yelp.com/v3/graphql"
    proxied = Settings(cors_proxy_url="https://proxy.example/").proxied("https://api.yelp.com/v3/graphql")
    assert proxied == "https://proxy.example/https://api.yelp.com/v3/graphql"


def test_missing_keys_raise():
    settings = Settings()
    with pytest.raises(PlaceLookupError, match="Yelp API key was not found"):
        settings.require_yelp_key()
    with pytest.raises(PlaceLookupError, match="Google API key was not found"):
        settings.require_google_key()


@pytest.mark.parametrize("raw", ["soon", "0", "-3", "nan", "inf"])
def test_from_env_rejects_bad_timeout(monkeypatch, raw):
    monkeypatch.setenv("PLACE_LOOKUP_TIMEOUT", raw)

    with pytest.raises(PlaceLookupError, match="PLACE_LOOKUP_TIMEOUT"):
        Settings.from_env()


def test_http_timeout_caps_connect():
    short = Settings(timeout=5).http_timeout()
    assert short.connect == 5
    assert short.read == 5

    long = Settings(timeout=60).http_timeout()
    assert long.connect == 10.0
    assert long.read == 60
