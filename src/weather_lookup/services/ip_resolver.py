"""IP address to location resolution with negative caching."""

import logging

from weather_lookup.config import settings
from weather_lookup.protocols import CacheStore, GeolocationProvider

logger = logging.getLogger(__name__)


class IpResolver:
    """Cache-or-fetch resolution of an IP address to a location string.

    A lookup that succeeds but yields no location is cached as None, so
    known-bad addresses are not looked up again until the entry expires.
    A lookup that fails (transport, HTTP status, malformed body) is not
    cached and will be retried on the next call.
    """

    def __init__(
        self,
        cache: CacheStore,
        provider: GeolocationProvider,
        ttl: int | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            cache: Shared cache store (required).
            provider: Geolocation provider (required).
            ttl: Time-to-live for cached lookups in seconds. Defaults to settings.
        """
        self._cache = cache
        self._provider = provider
        self._ttl = ttl or settings.ip_cache_ttl

    @classmethod
    def create(
        cls,
        cache: CacheStore,
        provider: GeolocationProvider,
        ttl: int | None = None,
    ) -> "IpResolver":
        return cls(cache=cache, provider=provider, ttl=ttl)

    @staticmethod
    def cache_key(ip: str) -> str:
        return f"ip:{ip}"

    def resolve(self, ip: str | None) -> str | None:
        """Resolve an IP address to a postal code or city name.

        Args:
            ip: The IP address, possibly padded with whitespace

        Returns:
            The postal code (preferred) or city, or None if unresolved
        """
        ip_str = (ip or "").strip()
        if not ip_str:
            return None

        key = self.cache_key(ip_str)
        if self._cache.exists(key):
            cached = self._cache.read(key)
            # None is also what read returns for an entry that expired after exists
            if cached is not None or self._cache.exists(key):
                logger.debug("IP cache hit for %s", ip_str)
                return cached

        try:
            result = self._provider.lookup(ip_str)
            if not result.ok:
                logger.error("IP lookup failed for '%s': %s", ip_str, result.detail)
                return None

            location = self._extract_location(result.payload or {})
            self._cache.write(key, location, self._ttl)
        except Exception as e:
            logger.error("IP lookup failed for '%s': %s", ip_str, e)
            return None

        return location

    @staticmethod
    def _extract_location(data: dict) -> str | None:
        if data.get("error"):
            return None

        location = data.get("postal") or data.get("city")
        return str(location) if location else None

    @property
    def ttl(self) -> int:
        return self._ttl
