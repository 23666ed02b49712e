"""Postal code to "city, region, country" resolution."""

import logging
import re

from weather_lookup.config import settings
from weather_lookup.entities import ProviderError, ProviderResult
from weather_lookup.protocols import CacheStore, GeocodingProvider

logger = logging.getLogger(__name__)

LETTER_PATTERN = re.compile(r"[A-Za-z]")


class ZipResolver:
    """Cache-or-fetch resolution of a postal code to a formatted place name.

    Codes containing letters are passed through unchanged without touching
    the cache or the provider. Only complete lookups are cached; failures
    and incomplete entries return None and are retried next time.
    """

    def __init__(
        self,
        cache: CacheStore,
        provider: GeocodingProvider,
        ttl: int | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            cache: Shared cache store (required).
            provider: Geocoding provider (required).
            ttl: Time-to-live for cached lookups in seconds. Defaults to settings.
        """
        self._cache = cache
        self._provider = provider
        self._ttl = ttl or settings.zip_cache_ttl

    @classmethod
    def create(
        cls,
        cache: CacheStore,
        provider: GeocodingProvider,
        ttl: int | None = None,
    ) -> "ZipResolver":
        return cls(cache=cache, provider=provider, ttl=ttl)

    @staticmethod
    def cache_key(code: str) -> str:
        return f"zip:{code}"

    def resolve(self, code: str | None) -> str | None:
        """Resolve a postal code.

        Args:
            code: The postal code, possibly padded with whitespace

        Returns:
            "City, Region, Country", the trimmed input for non-numeric codes,
            or None if the lookup failed
        """
        code_str = (code or "").strip()
        if LETTER_PATTERN.search(code_str):
            return code_str

        key = self.cache_key(code_str)
        cached = self._cache.read(key)
        if cached is not None:
            logger.debug("ZIP cache hit for %s", code_str)
            return cached

        try:
            result = self._lookup(code_str)
        except Exception as e:
            logger.error("ZIP lookup failed for '%s': %s", code_str, e)
            return None

        if not result.ok:
            log = logger.warning if result.error is ProviderError.INCOMPLETE_DATA else logger.error
            log("ZIP lookup failed for '%s': %s", code_str, result.detail)
            return None

        location = result.payload["location"]
        self._cache.write(key, location, self._ttl)
        return location

    def _lookup(self, code: str) -> ProviderResult:
        result = self._provider.search(code)
        if not result.ok:
            return result

        results = result.payload.get("results")
        # zipcodebase sends an empty list instead of an object when nothing matched
        entries = (results.get(code) if isinstance(results, dict) else None) or []
        if not entries:
            return ProviderResult.failure(ProviderError.NO_RESULTS, f"No results for '{code}'")

        entry = entries[0]
        city = entry.get("city")
        region = entry.get("province") or entry.get("state")
        country = entry.get("country") or entry.get("country_code")
        if not (city and region and country):
            return ProviderResult.failure(ProviderError.INCOMPLETE_DATA, f"Incomplete data: {entry!r}")

        return ProviderResult.success({"location": f"{city}, {region}, {country}"})

    @property
    def ttl(self) -> int:
        return self._ttl
