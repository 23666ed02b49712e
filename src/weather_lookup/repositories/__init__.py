"""Repository layer for data access.

This layer contains implementations of the protocols defined in
the protocols package. Repositories handle data persistence and
external service integration.

Available implementations:
    - RedisCacheStore: Redis key/value store with per-key expiry
    - InMemoryCacheStore: In-process store for local runs and tests
    - IpApiClient: ipapi.co geolocation
    - ZipcodebaseClient: Zipcodebase postal code geocoding
    - WeatherApiClient: WeatherAPI.com forecasts

Usage:
    ```python
    from weather_lookup.repositories import RedisCacheStore, WeatherApiClient

    store = RedisCacheStore.create()
    provider = WeatherApiClient.create()
    ```
"""

from .http_client import JsonHttpClient
from .ipapi_client import IpApiClient
from .memory_repository import InMemoryCacheStore
from .redis_repository import RedisCacheStore
from .weatherapi_client import WeatherApiClient
from .zipcodebase_client import ZipcodebaseClient

__all__ = [
    "InMemoryCacheStore",
    "IpApiClient",
    "JsonHttpClient",
    "RedisCacheStore",
    "WeatherApiClient",
    "ZipcodebaseClient",
]
