"""Library configuration (settings and environment).

Connection defaults for caches built with RedisCache.from_settings().
Uses pydantic-settings with .env support.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rediscache.core.constants import DEFAULT_SCAN_COUNT


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    All settings have defaults; cache_default_scan_count is checked in
    validate_scan_count.
    """

    debug: bool = False

    # Redis connection
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_max_connections: int = 10
    redis_socket_connect_timeout: float = 5.0
    redis_socket_timeout: float | None = None

    # Cache
    cache_default_scan_count: int = DEFAULT_SCAN_COUNT

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_scan_count(self) -> "Settings":
        """Reject a non-positive SCAN COUNT hint."""
        if self.cache_default_scan_count <= 0:
            raise ValueError(
                f"cache_default_scan_count must be positive, got: {self.cache_default_scan_count!r}"
            )
        return self

    def redis_options(self) -> dict:
        """Keyword arguments for redis.asyncio.Redis built from these settings."""
        return {
            "host": self.redis_host,
            "port": self.redis_port,
            "db": self.redis_db,
            "password": self.redis_password.get_secret_value() if self.redis_password else None,
            "max_connections": self.redis_max_connections,
            "socket_connect_timeout": self.redis_socket_connect_timeout,
            "socket_timeout": self.redis_socket_timeout,
            "socket_keepalive": True,
        }


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
