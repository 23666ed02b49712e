import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "redis")  # "redis" or "memory"
    ip_cache_ttl: int = int(os.getenv("IP_CACHE_TTL", "86400"))  # 1 day
    zip_cache_ttl: int = int(os.getenv("ZIP_CACHE_TTL", "86400"))  # 1 day
    weather_cache_ttl: int = int(os.getenv("WEATHER_CACHE_TTL", "1800"))  # 30 minutes

    # Providers
    ipapi_base_url: str = os.getenv("IPAPI_BASE_URL", "https://ipapi.co")
    zipcodebase_base_url: str = os.getenv("ZIPCODEBASE_BASE_URL", "https://app.zipcodebase.com/api/v1")
    zipcodebase_api_key: str = os.getenv("ZIPCODEBASE_API_KEY", "")
    weatherapi_base_url: str = os.getenv("WEATHERAPI_BASE_URL", "http://api.weatherapi.com/v1")
    weatherapi_key: str = os.getenv("WEATHERAPI_KEY", "")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))

    # Forecast window
    forecast_days: int = int(os.getenv("FORECAST_DAYS", "2"))
    forecast_window_hours: int = int(os.getenv("FORECAST_WINDOW_HOURS", "12"))
    forecast_interval_hours: int = int(os.getenv("FORECAST_INTERVAL_HOURS", "2"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def uses_memory_cache(self) -> bool:
        """Check if the in-process cache store is configured.

        Returns:
            True if CACHE_BACKEND is "memory", False otherwise
        """
        return self.cache_backend.lower() == "memory"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend.lower() not in ("redis", "memory"):
            raise ValueError(f"CACHE_BACKEND must be 'redis' or 'memory', got {self.cache_backend!r}")

        for name in ("ip_cache_ttl", "zip_cache_ttl", "weather_cache_ttl"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name.upper()} must be a positive number of seconds")

        if self.forecast_days < 1:
            raise ValueError("FORECAST_DAYS must be at least 1")

        if not 0 < self.forecast_interval_hours <= self.forecast_window_hours:
            raise ValueError(
                "FORECAST_INTERVAL_HOURS must be positive and no larger than FORECAST_WINDOW_HOURS, "
                f"got {self.forecast_interval_hours} / {self.forecast_window_hours}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
