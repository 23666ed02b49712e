"""Forecast retrieval and reshaping.

Turns the provider's dense hourly forecast into a sparse set of
checkpoints: hours inside a fixed forward window from the location's
local time, at least ``interval`` apart.
"""

import logging
import re
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Any

from weather_lookup.config import settings
from weather_lookup.entities import ForecastDay, ForecastResult, HourlySample
from weather_lookup.protocols import ForecastProvider

logger = logging.getLogger(__name__)

POSTAL_QUERY_PATTERN = re.compile(r"\d{4,6}", re.ASCII)
PROVIDER_TIME_FORMAT = "%Y-%m-%d %H:%M"


def parse_local_time(value: str) -> datetime:
    """Parse a provider timestamp such as ``2025-05-08 10:00``."""
    return datetime.strptime(value.strip(), PROVIDER_TIME_FORMAT)


def sample_hours(
    hours: Iterable[dict[str, Any]],
    localtime: datetime,
    window: timedelta,
    interval: timedelta,
) -> list[HourlySample]:
    """Reduce hourly forecast entries to checkpoints at least ``interval`` apart.

    Only entries with ``localtime <= t <= localtime + window`` are considered.
    Walking them in chronological order, an entry is emitted when it is at or
    past the cursor, and the cursor then moves forward by ``interval``.

    Args:
        hours: Provider hour entries with ``time``, ``temp_c`` and ``condition``
        localtime: The location's current local time
        window: Forward range to keep
        interval: Minimum cursor step between samples

    Returns:
        Samples in chronological order
    """
    upcoming = []
    for hour in hours:
        timestamp = parse_local_time(hour["time"])
        if localtime <= timestamp <= localtime + window:
            upcoming.append((timestamp, hour))
    upcoming.sort(key=lambda item: item[0])

    samples = []
    next_time = localtime
    for timestamp, hour in upcoming:
        if timestamp < next_time:
            continue

        condition = hour.get("condition") or {}
        samples.append(
            HourlySample(
                time=timestamp.strftime("%H:%M"),
                condition=condition.get("text"),
                icon=condition.get("icon"),
                temperature_c=hour.get("temp_c"),
            )
        )
        next_time += interval

    return samples


class ForecastFetcher:
    """Fetches a forecast and reshapes it into a ForecastResult.

    Example:
        ```python
        fetcher = ForecastFetcher.create(provider=WeatherApiClient.create())
        forecast = fetcher.fetch("London")
        if forecast:
            print(forecast.temperature_c, [h.time for h in forecast.hourly])
        ```
    """

    def __init__(
        self,
        provider: ForecastProvider,
        window_hours: int | None = None,
        interval_hours: int | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            provider: Forecast provider (required).
            window_hours: Forward range of the hourly sequence. Defaults to settings.
            interval_hours: Spacing between hourly samples. Defaults to settings.
        """
        self._provider = provider
        self._window = timedelta(hours=window_hours or settings.forecast_window_hours)
        self._interval = timedelta(hours=interval_hours or settings.forecast_interval_hours)

    @classmethod
    def create(
        cls,
        provider: ForecastProvider,
        window_hours: int | None = None,
        interval_hours: int | None = None,
    ) -> "ForecastFetcher":
        return cls(provider=provider, window_hours=window_hours, interval_hours=interval_hours)

    @staticmethod
    def format_query(location: str) -> str:
        """Send bare 4-6 digit postal codes as digits, anything else unchanged."""
        stripped = location.strip()
        if POSTAL_QUERY_PATTERN.fullmatch(stripped):
            return stripped
        return location

    def fetch(self, location: str) -> ForecastResult | None:
        """Fetch the forecast for a resolved location.

        Args:
            location: City name, formatted place or postal code

        Returns:
            ForecastResult, or None if the provider call failed or the
            payload could not be interpreted
        """
        try:
            result = self._provider.forecast(self.format_query(location))
            if not result.ok:
                logger.error("Forecast fetch failed for '%s': %s", location, result.detail)
                return None

            payload = result.payload or {}
            error = payload.get("error")
            if error:
                message = error.get("message") if isinstance(error, dict) else error
                logger.error("Forecast fetch failed for '%s': %s", location, message)
                return None

            return self._build_result(payload)
        except Exception as e:
            logger.error("Forecast fetch failed for '%s': %s", location, e)
            return None

    def _build_result(self, payload: dict[str, Any]) -> ForecastResult:
        location = payload["location"]
        current = payload.get("current") or {}
        current_condition = current.get("condition") or {}
        forecast_days = payload["forecast"]["forecastday"]
        today = forecast_days[0]
        day = today.get("day") or {}

        localtime = parse_local_time(location["localtime"])
        hours = [hour for forecast_day in forecast_days for hour in forecast_day.get("hour") or []]

        return ForecastResult(
            city=location.get("name"),
            country=location.get("country"),
            temperature_c=current.get("temp_c"),
            condition=current_condition.get("text"),
            icon=current_condition.get("icon"),
            high_c=day.get("maxtemp_c"),
            low_c=day.get("mintemp_c"),
            forecast_day=self._build_forecast_day(today),
            hourly=tuple(sample_hours(hours, localtime, self._window, self._interval)),
        )

    @staticmethod
    def _build_forecast_day(today: dict[str, Any]) -> ForecastDay:
        day = today.get("day") or {}
        condition = day.get("condition") or {}
        return ForecastDay(
            date=today.get("date"),
            condition=condition.get("text"),
            icon=condition.get("icon"),
            high_c=day.get("maxtemp_c"),
            low_c=day.get("mintemp_c"),
        )
