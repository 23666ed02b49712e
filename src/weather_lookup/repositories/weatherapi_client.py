"""WeatherAPI.com forecast client.

Requests ``GET /forecast.json?key=<key>&q=<query>&days=<n>&aqi=no``,
which returns ``location``, ``current`` and ``forecast.forecastday[]``
with hourly breakdowns. Errors come back as ``{"error": {"message": ...}}``,
usually with a 4xx status.
"""

import httpx

from weather_lookup.config import settings
from weather_lookup.entities import ProviderResult

from .http_client import JsonHttpClient

FORECAST_PATH = "/forecast.json"


class WeatherApiClient(JsonHttpClient):
    """WeatherAPI.com implementation of the ForecastProvider protocol."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        days: int = 2,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the WeatherAPI client.

        Args:
            api_key: WeatherAPI.com API key
            base_url: API base URL
            days: Number of forecast days to request (1 = today only)
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx.Client
        """
        super().__init__(base_url=base_url, timeout=timeout, client=client)
        self._api_key = api_key
        self._days = days

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        days: int | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> "WeatherApiClient":
        """Factory method to create WeatherApiClient with defaults.

        Args:
            api_key: API key. If None, uses settings.
            base_url: API base URL. If None, uses settings.
            days: Forecast days. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.
            client: Optional preconfigured httpx.Client.

        Returns:
            Configured WeatherApiClient
        """
        return cls(
            api_key=api_key if api_key is not None else settings.weatherapi_key,
            base_url=base_url or settings.weatherapi_base_url,
            days=days or settings.forecast_days,
            timeout=timeout or settings.http_timeout,
            client=client,
        )

    def forecast(self, query: str) -> ProviderResult:
        return self.get_json(
            FORECAST_PATH,
            params={"key": self._api_key, "q": query, "days": self._days, "aqi": "no"},
        )
