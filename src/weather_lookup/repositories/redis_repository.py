"""Redis implementation of CacheStore.

Values are stored as JSON strings with a per-key expiry (``SET ... EX``).
It's the default implementation and satisfies the CacheStore protocol.
"""

import json
import logging
from typing import Any

import redis

from weather_lookup.config import get_redis_client

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    A cached ``None`` is stored as the JSON literal ``null`` so that
    ``exists`` still reports it, which negative caching relies on.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_client: Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls, redis_client: redis.Redis | None = None) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with defaults.

        Args:
            redis_client: Redis client. If None, one is built from settings.

        Returns:
            Configured RedisCacheStore
        """
        return cls(redis_client=redis_client)

    def exists(self, key: str) -> bool:
        """Check whether the key is present in Redis."""
        result: int = self._client.exists(key)  # type: ignore[assignment]
        return result > 0

    def read(self, key: str) -> Any | None:
        """Read and decode the JSON value stored under the key.

        Returns:
            The decoded value, or None if absent or undecodable
        """
        raw = self._client.get(key)
        if raw is None:
            return None

        if isinstance(raw, bytes):
            raw = raw.decode()

        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable cache value for %s", key)
            return None

    def write(self, key: str, value: Any, ttl: int) -> None:
        """Store the JSON-encoded value with an expiry in seconds."""
        self._client.set(key, json.dumps(value), ex=ttl)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.error("Redis health check failed: %s", e)
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
