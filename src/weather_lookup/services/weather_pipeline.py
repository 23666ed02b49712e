"""Weather lookup pipeline.

This service orchestrates classification, location resolution and the
forecast cache-or-fetch stage.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from weather_lookup.config import settings
from weather_lookup.entities import (
    ForecastResult,
    IpAddress,
    LocationClassification,
    PipelineResult,
    PlainText,
    ZipCode,
)
from weather_lookup.protocols import CacheStore

from .forecast_fetcher import ForecastFetcher
from .ip_resolver import IpResolver
from .location_classifier import classify_location
from .zip_resolver import ZipResolver

logger = logging.getLogger(__name__)


class UnknownLocationError(ValueError):
    """Raised when the raw input cannot be turned into a location."""

    def __init__(self, raw_input: str | None) -> None:
        self.raw_input = raw_input
        super().__init__(f"Unknown location: {raw_input or ''}")


def weather_cache_key(location: str) -> str:
    """Build the forecast cache key, e.g. ``" New  York "`` -> ``weather:new_york``."""
    return "weather:" + "_".join(location.lower().split())


class WeatherPipeline:
    """Resolves raw input to a location and returns its (possibly cached) forecast.

    The pipeline depends on PROTOCOLS for storage and on the resolver and
    fetcher services for upstream access:
    - CacheStore: Redis, in-memory, etc.
    - IpResolver / ZipResolver: location resolution with their own caching
    - ForecastFetcher: forecast retrieval and reshaping

    Cached forecasts carry their fetch time, and the pipeline rejects
    entries older than its TTL even if the store still returns them.
    ``fetched_at`` is wall-clock time so that processes sharing one Redis
    can compare it. An entry is only rewritten after it was read as stale,
    so a rewrite never moves its ``fetched_at`` backwards. An entry dated
    in the future (the clock was stepped back) reads as fresh and is
    served as is until the clock catches up.

    Example:
        ```python
        pipeline = WeatherPipeline.create(
            cache=store,
            ip_resolver=IpResolver.create(cache=store, provider=IpApiClient.create()),
            zip_resolver=ZipResolver.create(cache=store, provider=ZipcodebaseClient.create()),
            forecast_fetcher=ForecastFetcher.create(provider=WeatherApiClient.create()),
        )
        result = pipeline.get_weather("London")
        ```
    """

    def __init__(
        self,
        cache: CacheStore,
        ip_resolver: IpResolver,
        zip_resolver: ZipResolver,
        forecast_fetcher: ForecastFetcher,
        ttl: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the pipeline.

        Args:
            cache: Shared cache store for forecasts (required).
            ip_resolver: IP address resolver (required).
            zip_resolver: Postal code resolver (required).
            forecast_fetcher: Forecast fetcher (required).
            ttl: Forecast freshness window in seconds. Defaults to settings.
            clock: Returns the current time in seconds. Defaults to time.time.
        """
        self._cache = cache
        self._ip_resolver = ip_resolver
        self._zip_resolver = zip_resolver
        self._fetcher = forecast_fetcher
        self._ttl = ttl or settings.weather_cache_ttl
        self._clock = clock

    @classmethod
    def create(
        cls,
        cache: CacheStore,
        ip_resolver: IpResolver,
        zip_resolver: ZipResolver,
        forecast_fetcher: ForecastFetcher,
        ttl: int | None = None,
    ) -> "WeatherPipeline":
        return cls(
            cache=cache,
            ip_resolver=ip_resolver,
            zip_resolver=zip_resolver,
            forecast_fetcher=forecast_fetcher,
            ttl=ttl,
        )

    def get_weather(self, raw_input: str | None) -> PipelineResult:
        """Look up the weather for a place name, IP address or postal code.

        Business logic:
        1. Trim the input and fail fast if it is empty
        2. Classify it and resolve it to a location string
        3. Serve a fresh cached forecast, or fetch and cache a new one

        Args:
            raw_input: Place name, IP address or postal code

        Returns:
            PipelineResult with the forecast (None if unresolved or
            unavailable) and whether it came from the cache

        Raises:
            UnknownLocationError: If the input is empty after trimming
        """
        raw = (raw_input or "").strip()
        if not raw:
            raise UnknownLocationError(raw_input)

        location = self.resolve(classify_location(raw))
        if location is None:
            logger.info("Could not resolve '%s' to a location", raw)
            return PipelineResult(data=None, from_cache=False)

        key = weather_cache_key(location)
        cached = self._read_fresh(key)
        if cached is not None:
            logger.debug("Weather cache hit for %s", key)
            return PipelineResult(data=cached, from_cache=True)

        logger.debug("Weather cache miss for %s", key)
        data = self._fetcher.fetch(location)
        if data is not None:
            self._cache.write(key, {"data": data.to_dict(), "fetched_at": self._clock()}, self._ttl)
        return PipelineResult(data=data, from_cache=False)

    def resolve(self, classification: LocationClassification) -> str | None:
        """Turn a classified input into a forecast query term."""
        if isinstance(classification, IpAddress):
            return self._ip_resolver.resolve(classification.value)
        if isinstance(classification, ZipCode):
            return self._zip_resolver.resolve(classification.value)
        if isinstance(classification, PlainText):
            return classification.value
        raise TypeError(f"Unsupported location classification: {classification!r}")

    def _read_fresh(self, key: str) -> ForecastResult | None:
        entry: Any = self._cache.read(key)
        if not isinstance(entry, dict) or entry.get("data") is None:
            return None

        fetched_at = entry.get("fetched_at")
        if not isinstance(fetched_at, (int, float)) or self._clock() - fetched_at >= self._ttl:
            return None

        try:
            return ForecastResult.from_dict(entry["data"])
        except (KeyError, TypeError) as e:
            logger.warning("Discarding malformed weather cache entry %s: %s", key, e)
            return None

    @property
    def ttl(self) -> int:
        return self._ttl
