"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Store, cache, service and handler built once in the lifespan
    - Dependency functions retrieve them from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from user_service.config import configure_logging, settings
from user_service.handlers import UserHandler
from user_service.protocols import UserCache
from user_service.repositories import InMemoryUserCache, RedisUserCache, SqlUserRepository
from user_service.services import UserService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> UserHandler:
    """Dependency injection for UserHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The UserHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "user_handler", None)
    if handler is None:
        raise RuntimeError("UserHandler not initialized. Check lifespan setup.")
    return handler


def build_cache() -> UserCache:
    """Create the cache backend selected by CACHE_BACKEND."""
    if settings.cache_backend == "memory":
        return InMemoryUserCache()
    return RedisUserCache.create()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Store and cache (data access) - created explicitly
    2. Service (business logic) - stored in app.state.user_service
    3. Handler (HTTP endpoints) - stored in app.state.user_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the store and cache, removes all services from app.state
    """
    configure_logging()

    store = SqlUserRepository.create()
    cache = build_cache()

    user_service = UserService(store=store, cache=cache)
    user_handler = UserHandler(user_service=user_service)

    app.state.store = store
    app.state.cache = cache
    app.state.user_service = user_service
    app.state.user_handler = user_handler

    store_healthy, cache_healthy = user_service.is_healthy()
    logger.info(
        "User service initialized (cache=%s, store healthy=%s, cache healthy=%s)",
        settings.cache_backend,
        store_healthy,
        cache_healthy,
    )

    yield

    del app.state.user_handler
    del app.state.user_service
    del app.state.cache
    del app.state.store

    cache.close()
    store.close()
    logger.info("User service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[UserHandler, Depends(get_handler)]
