"""Cache storage protocol.

Defines the interface for the shared key/value store used by every
cache-or-fetch stage of the pipeline. Keys are namespaced by stage
(``ip:``, ``zip:``, ``weather:``); values are JSON-compatible.

Implementations can include:
- Redis (default)
- An in-process dictionary (local runs and tests)
- Memcached or any other store with per-key expiry
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from weather_lookup.protocols import CacheStore

        store: CacheStore = RedisCacheStore.create()
        store: CacheStore = InMemoryCacheStore()
        ```
    """

    def exists(self, key: str) -> bool:
        """Check whether a non-expired entry exists for the key.

        An entry whose stored value is ``None`` still exists.

        Args:
            key: The namespaced cache key

        Returns:
            True if the key is present, False otherwise
        """
        ...

    def read(self, key: str) -> Any | None:
        """Read the value stored under a key.

        Args:
            key: The namespaced cache key

        Returns:
            The stored value, or None if absent or expired
        """
        ...

    def write(self, key: str, value: Any, ttl: int) -> None:
        """Store a value, replacing any previous entry.

        Args:
            key: The namespaced cache key
            value: A JSON-compatible value (None allowed)
            ttl: Time-to-live in seconds
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
