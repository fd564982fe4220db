"""Exceptions raised by the place lookup core."""


class PlaceLookupError(RuntimeError):
    """A lookup could not be completed (missing key, API error, no results)."""
