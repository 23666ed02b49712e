"""Zipcodebase geocoding client.

Searches postal codes with ``GET /search?codes=<code>&apikey=<key>``.
The response maps each requested code to a list of place entries under
``results``.
"""

import httpx

from weather_lookup.config import settings
from weather_lookup.entities import ProviderResult

from .http_client import JsonHttpClient


class ZipcodebaseClient(JsonHttpClient):
    """Zipcodebase implementation of the GeocodingProvider protocol."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the Zipcodebase client.

        Args:
            api_key: Zipcodebase API key
            base_url: API base URL
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx.Client
        """
        super().__init__(base_url=base_url, timeout=timeout, client=client)
        self._api_key = api_key

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> "ZipcodebaseClient":
        """Factory method to create ZipcodebaseClient with defaults.

        Args:
            api_key: API key. If None, uses settings.
            base_url: API base URL. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.
            client: Optional preconfigured httpx.Client.

        Returns:
            Configured ZipcodebaseClient
        """
        return cls(
            api_key=api_key if api_key is not None else settings.zipcodebase_api_key,
            base_url=base_url or settings.zipcodebase_base_url,
            timeout=timeout or settings.http_timeout,
            client=client,
        )

    def search(self, code: str) -> ProviderResult:
        return self.get_json("/search", params={"codes": code, "apikey": self._api_key})
