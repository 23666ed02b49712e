"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class HourlyForecastItem(BaseModel):
    """Single sampled hour of the forecast."""

    time: str = Field(..., description="Local time of the sample (HH:MM)")
    condition: str | None = Field(None, description="Condition text")
    icon: str | None = Field(None, description="Condition icon URL")
    temperature_c: float | None = Field(None, description="Temperature in Celsius")


class ForecastDayItem(BaseModel):
    """Today's forecast summary."""

    date: str | None = Field(None, description="Forecast date (YYYY-MM-DD)")
    condition: str | None = Field(None, description="Condition text")
    icon: str | None = Field(None, description="Condition icon URL")
    high_c: float | None = Field(None, description="Maximum temperature in Celsius")
    low_c: float | None = Field(None, description="Minimum temperature in Celsius")


class ForecastItem(BaseModel):
    """Current conditions, today's summary and the sampled hourly forecast."""

    city: str | None = Field(None, description="Location name reported by the provider")
    country: str | None = Field(None, description="Country reported by the provider")
    temperature_c: float | None = Field(None, description="Current temperature in Celsius")
    condition: str | None = Field(None, description="Current condition text")
    icon: str | None = Field(None, description="Current condition icon URL")
    high_c: float | None = Field(None, description="Today's maximum temperature")
    low_c: float | None = Field(None, description="Today's minimum temperature")
    forecast_day: ForecastDayItem
    hourly: list[HourlyForecastItem] = Field(
        default_factory=list,
        description="Samples at least two hours apart over the next twelve hours",
    )


class WeatherResponse(BaseModel):
    """Response DTO for a weather lookup."""

    query: str = Field(..., description="The raw input the lookup was made for")
    weather: ForecastItem | None = Field(
        None,
        description="The forecast, or null if the location could not be resolved or no data was available",
    )
    from_cache: bool = Field(..., description="Whether the forecast was served from cache")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
