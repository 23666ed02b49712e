"""Service layer for business logic.

This layer contains the resolution-and-caching pipeline. Services depend
on protocols (interfaces), not concrete implementations, making them
testable and flexible.

Architecture:
    Handler -> WeatherPipeline -> IpResolver / ZipResolver / ForecastFetcher -> Repository
    (HTTP)  -> (Orchestration) -> (Cache-or-fetch stages)                   -> (Data Access)

Usage:
    ```python
    from weather_lookup.services import WeatherPipeline

    pipeline = WeatherPipeline.create(
        cache=store,
        ip_resolver=ip_resolver,
        zip_resolver=zip_resolver,
        forecast_fetcher=fetcher,
    )
    result = pipeline.get_weather("10001")
    ```
"""

from .forecast_fetcher import ForecastFetcher, sample_hours
from .ip_resolver import IpResolver
from .location_classifier import classify_location, looks_like_ip, looks_like_zip
from .weather_pipeline import UnknownLocationError, WeatherPipeline, weather_cache_key
from .zip_resolver import ZipResolver

__all__ = [
    "ForecastFetcher",
    "IpResolver",
    "UnknownLocationError",
    "WeatherPipeline",
    "ZipResolver",
    "classify_location",
    "looks_like_ip",
    "looks_like_zip",
    "sample_hours",
    "weather_cache_key",
]
