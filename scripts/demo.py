#!/usr/bin/env python3
"""
Demo script for the weather lookup pipeline.

Looks up each location twice against an in-memory cache to show the
cache-or-fetch behaviour. Requires WEATHERAPI_KEY (and ZIPCODEBASE_API_KEY
for postal codes) in the environment or a .env file.

Usage:
    python scripts/demo.py London 10001 8.8.8.8
"""

import sys
import time

from weather_lookup.repositories import InMemoryCacheStore, IpApiClient, WeatherApiClient, ZipcodebaseClient
from weather_lookup.services import (
    ForecastFetcher,
    IpResolver,
    UnknownLocationError,
    WeatherPipeline,
    ZipResolver,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def build_pipeline() -> WeatherPipeline:
    store = InMemoryCacheStore()
    return WeatherPipeline.create(
        cache=store,
        ip_resolver=IpResolver.create(cache=store, provider=IpApiClient.create()),
        zip_resolver=ZipResolver.create(cache=store, provider=ZipcodebaseClient.create()),
        forecast_fetcher=ForecastFetcher.create(provider=WeatherApiClient.create()),
    )


def demo_lookup(pipeline: WeatherPipeline, location: str) -> None:
    print_section(f"Weather for {location!r}")

    for attempt in (1, 2):
        start_time = time.time()
        try:
            result = pipeline.get_weather(location)
        except UnknownLocationError as e:
            print(f"  ✗ {e}")
            return
        elapsed_ms = (time.time() - start_time) * 1000

        source = "CACHE HIT" if result.from_cache else "fetched"
        print(f"\n  Attempt {attempt}: {source} ({elapsed_ms:.1f} ms)")

        forecast = result.data
        if forecast is None:
            print("  ✗ No weather data available")
            continue

        print(f"  {forecast.city}, {forecast.country}: {forecast.temperature_c}°C, {forecast.condition}")
        print(f"  Today: {forecast.low_c}°C - {forecast.high_c}°C")
        for sample in forecast.hourly:
            print(f"    {sample.time}  {sample.temperature_c}°C  {sample.condition}")


def main() -> None:
    locations = sys.argv[1:] or ["London"]
    pipeline = build_pipeline()
    for location in locations:
        demo_lookup(pipeline, location)


if __name__ == "__main__":
    main()
