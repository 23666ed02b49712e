"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from weather_lookup.config import settings, setup_logging
from weather_lookup.handlers import WeatherHandler
from weather_lookup.protocols import CacheStore
from weather_lookup.repositories import (
    InMemoryCacheStore,
    IpApiClient,
    RedisCacheStore,
    WeatherApiClient,
    ZipcodebaseClient,
)
from weather_lookup.services import ForecastFetcher, IpResolver, WeatherPipeline, ZipResolver

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> WeatherHandler:
    """Dependency injection for WeatherHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The WeatherHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "weather_handler", None)
    if handler is None:
        raise RuntimeError("WeatherHandler not initialized. Check lifespan setup.")
    return handler


def build_cache_store() -> CacheStore:
    """Create the cache store selected by CACHE_BACKEND."""
    if settings.uses_memory_cache:
        return InMemoryCacheStore()
    return RedisCacheStore.create()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Cache store and provider clients (data access)
    2. Resolvers, fetcher and pipeline - stored in app.state.pipeline
    3. Handler (HTTP endpoints) - stored in app.state.weather_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes provider HTTP clients and removes services from app.state
    """
    setup_logging()

    cache = build_cache_store()
    ip_client = IpApiClient.create()
    zip_client = ZipcodebaseClient.create()
    weather_client = WeatherApiClient.create()

    pipeline = WeatherPipeline.create(
        cache=cache,
        ip_resolver=IpResolver.create(cache=cache, provider=ip_client),
        zip_resolver=ZipResolver.create(cache=cache, provider=zip_client),
        forecast_fetcher=ForecastFetcher.create(provider=weather_client),
    )

    app.state.cache = cache
    app.state.pipeline = pipeline
    app.state.weather_handler = WeatherHandler(pipeline=pipeline, cache=cache)

    logger.info("Weather pipeline initialized (cache backend: %s)", settings.cache_backend)
    logger.info("Cache healthy: %s", cache.health_check())

    yield

    for client in (ip_client, zip_client, weather_client):
        client.close()

    del app.state.weather_handler
    del app.state.pipeline
    del app.state.cache
    logger.info("Weather pipeline shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[WeatherHandler, Depends(get_handler)]
