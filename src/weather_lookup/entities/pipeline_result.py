"""Pipeline result domain entity."""

from dataclasses import dataclass

from .forecast import ForecastResult


@dataclass(frozen=True)
class PipelineResult:
    """Externally visible outcome of a weather lookup.

    Attributes:
        data: The forecast, or None when the location could not be
            resolved or the provider returned nothing usable
        from_cache: Whether the forecast was served from the weather cache
    """

    data: ForecastResult | None
    from_cache: bool
