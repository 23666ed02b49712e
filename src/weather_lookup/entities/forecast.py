"""Forecast domain entities."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class HourlySample:
    """A single checkpoint of the sampled hourly forecast.

    Attributes:
        time: Local time of the sample, formatted HH:MM
        condition: Condition text (e.g. "Sunny")
        icon: Icon reference from the provider
        temperature_c: Temperature in Celsius
    """

    time: str
    condition: str | None
    icon: str | None
    temperature_c: float | None


@dataclass(frozen=True)
class ForecastDay:
    """Summary of today's forecast."""

    date: str | None
    condition: str | None
    icon: str | None
    high_c: float | None
    low_c: float | None


@dataclass(frozen=True)
class ForecastResult:
    """Reshaped forecast for a resolved location.

    Attributes:
        city: Location name reported by the provider
        country: Country reported by the provider
        temperature_c: Current temperature in Celsius
        condition: Current condition text
        icon: Current condition icon reference
        high_c: Today's maximum temperature
        low_c: Today's minimum temperature
        forecast_day: Today's summary
        hourly: Sampled hourly checkpoints in chronological order
    """

    city: str | None
    country: str | None
    temperature_c: float | None
    condition: str | None
    icon: str | None
    high_c: float | None
    low_c: float | None
    forecast_day: ForecastDay
    hourly: tuple[HourlySample, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary for caching."""
        data = asdict(self)
        data["hourly"] = [asdict(sample) for sample in self.hourly]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ForecastResult":
        """Rebuild a ForecastResult from its cached dictionary form."""
        return cls(
            city=data.get("city"),
            country=data.get("country"),
            temperature_c=data.get("temperature_c"),
            condition=data.get("condition"),
            icon=data.get("icon"),
            high_c=data.get("high_c"),
            low_c=data.get("low_c"),
            forecast_day=ForecastDay(**data["forecast_day"]),
            hourly=tuple(HourlySample(**sample) for sample in data.get("hourly", [])),
        )
