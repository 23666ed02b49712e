"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, ipapi → another geolocation API)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from weather_lookup.protocols import CacheStore, ForecastProvider

    store: CacheStore = RedisCacheStore.create()
    provider: ForecastProvider = WeatherApiClient.create()
    ```
"""

from .cache_store import CacheStore
from .providers import ForecastProvider, GeocodingProvider, GeolocationProvider

__all__ = [
    "CacheStore",
    "ForecastProvider",
    "GeocodingProvider",
    "GeolocationProvider",
]
