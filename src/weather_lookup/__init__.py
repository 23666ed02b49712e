"""Weather Lookup - weather by place name, IP address or postal code.

This package provides a layered architecture for the resolution-and-caching
pipeline:

Layers:
    - protocols: Interface contracts (CacheStore, providers)
    - repositories: Cache stores and upstream HTTP clients
    - services: Classification, resolvers, forecast fetcher, pipeline
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from weather_lookup.repositories import InMemoryCacheStore, IpApiClient, WeatherApiClient, ZipcodebaseClient
    from weather_lookup.services import ForecastFetcher, IpResolver, WeatherPipeline, ZipResolver

    store = InMemoryCacheStore()
    pipeline = WeatherPipeline.create(
        cache=store,
        ip_resolver=IpResolver.create(cache=store, provider=IpApiClient.create()),
        zip_resolver=ZipResolver.create(cache=store, provider=ZipcodebaseClient.create()),
        forecast_fetcher=ForecastFetcher.create(provider=WeatherApiClient.create()),
    )
    result = pipeline.get_weather("London")
    ```

For HTTP API:
    ```python
    from weather_lookup.api.app import app
    ```
"""

from weather_lookup.config import get_redis_client, settings
from weather_lookup.entities import ForecastResult, PipelineResult
from weather_lookup.handlers import WeatherHandler
from weather_lookup.protocols import CacheStore, ForecastProvider, GeocodingProvider, GeolocationProvider
from weather_lookup.repositories import (
    InMemoryCacheStore,
    IpApiClient,
    RedisCacheStore,
    WeatherApiClient,
    ZipcodebaseClient,
)
from weather_lookup.services import UnknownLocationError, WeatherPipeline

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "ForecastProvider",
    "GeocodingProvider",
    "GeolocationProvider",
    # Services (business logic)
    "WeatherPipeline",
    "UnknownLocationError",
    # Handlers (HTTP)
    "WeatherHandler",
    # Repositories (data access)
    "RedisCacheStore",
    "InMemoryCacheStore",
    "IpApiClient",
    "ZipcodebaseClient",
    "WeatherApiClient",
    # Entities (domain models)
    "ForecastResult",
    "PipelineResult",
]
