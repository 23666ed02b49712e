"""HTTP handlers for weather lookups.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

import logging

from fastapi import HTTPException, status

from weather_lookup.dto import (
    ForecastDayItem,
    ForecastItem,
    HealthCheckResponse,
    HourlyForecastItem,
    WeatherResponse,
)
from weather_lookup.entities import ForecastResult
from weather_lookup.protocols import CacheStore
from weather_lookup.services import UnknownLocationError, WeatherPipeline

logger = logging.getLogger(__name__)


class WeatherHandler:
    """HTTP handlers for weather lookups.

    This handler delegates business logic to WeatherPipeline
    and handles HTTP-specific concerns like:
    - Falling back to the client IP when no location is given
    - Converting entities to DTOs
    - Mapping failures to status codes

    Example:
        ```python
        handler = WeatherHandler(pipeline=pipeline, cache=store)

        @app.get("/weather", response_model=WeatherResponse)
        async def weather(location: str | None = None):
            return handler.get_weather(location, client_ip=None)
        ```
    """

    def __init__(self, pipeline: WeatherPipeline, cache: CacheStore) -> None:
        """Initialize the weather handler.

        Args:
            pipeline: The weather pipeline for business logic (required).
            cache: The cache store, for health reporting (required).
        """
        self._pipeline = pipeline
        self._cache = cache

    def get_weather(self, location: str | None, client_ip: str | None) -> WeatherResponse:
        """Handle GET /weather requests.

        Args:
            location: The ``location`` query parameter, if any
            client_ip: The requesting client's address, used when location is blank

        Returns:
            WeatherResponse with the forecast and cache status

        Raises:
            HTTPException: 404 if the input cannot be resolved, 500 on unexpected errors
        """
        raw_input = location if location and location.strip() else (client_ip or "")

        try:
            result = self._pipeline.get_weather(raw_input)
        except UnknownLocationError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Could not resolve '{location or ''}'",
            ) from e
        except Exception as e:
            logger.exception("Weather lookup failed for '%s'", raw_input)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Weather error: {e}",
            ) from e

        return WeatherResponse(
            query=raw_input.strip(),
            weather=self._to_item(result.data) if result.data else None,
            from_cache=result.from_cache,
        )

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._cache.health_check()
        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )

    @staticmethod
    def _to_item(forecast: ForecastResult) -> ForecastItem:
        day = forecast.forecast_day
        return ForecastItem(
            city=forecast.city,
            country=forecast.country,
            temperature_c=forecast.temperature_c,
            condition=forecast.condition,
            icon=forecast.icon,
            high_c=forecast.high_c,
            low_c=forecast.low_c,
            forecast_day=ForecastDayItem(
                date=day.date,
                condition=day.condition,
                icon=day.icon,
                high_c=day.high_c,
                low_c=day.low_c,
            ),
            hourly=[
                HourlyForecastItem(
                    time=sample.time,
                    condition=sample.condition,
                    icon=sample.icon,
                    temperature_c=sample.temperature_c,
                )
                for sample in forecast.hourly
            ],
        )
