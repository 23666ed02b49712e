"""Upstream provider protocols.

Each provider wraps one third-party HTTP API and reports the outcome as a
ProviderResult instead of raising, so callers decide explicitly what a
failure means for caching.
"""

from typing import Protocol, runtime_checkable

from weather_lookup.entities import ProviderResult


@runtime_checkable
class GeolocationProvider(Protocol):
    """Resolves an IP address to geolocation data (``postal``, ``city``, ``error``)."""

    def lookup(self, ip: str) -> ProviderResult:
        """Look up an IP address.

        Args:
            ip: A trimmed IP address

        Returns:
            ProviderResult whose payload is the decoded JSON object
        """
        ...


@runtime_checkable
class GeocodingProvider(Protocol):
    """Resolves a postal code to place entries (``results[code]``)."""

    def search(self, code: str) -> ProviderResult:
        """Search for a postal code.

        Args:
            code: A trimmed numeric postal code

        Returns:
            ProviderResult whose payload is the decoded JSON object
        """
        ...


@runtime_checkable
class ForecastProvider(Protocol):
    """Fetches current conditions plus a multi-day hourly forecast."""

    def forecast(self, query: str) -> ProviderResult:
        """Request a forecast.

        Args:
            query: Location query term (city name or postal code)

        Returns:
            ProviderResult whose payload is the decoded JSON object
        """
        ...
