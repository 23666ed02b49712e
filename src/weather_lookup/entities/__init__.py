"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No Pydantic validation
- No external dependencies
- Pure domain logic only
"""

from .forecast import ForecastDay, ForecastResult, HourlySample
from .location import IpAddress, LocationClassification, PlainText, ZipCode
from .pipeline_result import PipelineResult
from .provider_result import ProviderError, ProviderResult

__all__ = [
    "ForecastDay",
    "ForecastResult",
    "HourlySample",
    "IpAddress",
    "LocationClassification",
    "PipelineResult",
    "PlainText",
    "ProviderError",
    "ProviderResult",
    "ZipCode",
]
