"""ipapi.co geolocation client.

Resolves an IP address with ``GET /{ip}/json/``. The response carries
``postal`` and ``city`` fields, or ``error``/``reason`` for addresses the
service cannot locate (reserved ranges, malformed input).
"""

import httpx

from weather_lookup.config import settings
from weather_lookup.entities import ProviderResult

from .http_client import JsonHttpClient


class IpApiClient(JsonHttpClient):
    """ipapi.co implementation of the GeolocationProvider protocol.

    Example:
        ```python
        provider = IpApiClient.create()
        result = provider.lookup("8.8.8.8")
        if result.ok:
            print(result.payload.get("city"))
        ```
    """

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> "IpApiClient":
        """Factory method to create IpApiClient with defaults.

        Args:
            base_url: API base URL. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.
            client: Optional preconfigured httpx.Client.

        Returns:
            Configured IpApiClient
        """
        return cls(
            base_url=base_url or settings.ipapi_base_url,
            timeout=timeout or settings.http_timeout,
            client=client,
        )

    def lookup(self, ip: str) -> ProviderResult:
        return self.get_json(f"/{ip}/json/")
