import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database (authoritative store)
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")
    database_echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "redis")  # "redis" or "memory"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in ("redis", "memory"):
            raise ValueError(
                f"CACHE_BACKEND must be one of ['redis', 'memory'], got {self.cache_backend}"
            )

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL is not a valid logging level: {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def get_engine(database_url: str | None = None) -> Engine:
    """Create a SQLAlchemy engine for the user store.

    SQLite connections are shared across the API worker threads, so the
    same-thread check is disabled. An in-memory SQLite database only exists
    for a single connection and therefore gets a StaticPool.
    """
    url = database_url or settings.database_url

    if not url.startswith("sqlite"):
        return create_engine(url, echo=settings.database_echo, pool_pre_ping=True)

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if make_url(url).database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=settings.database_echo, **kwargs)
