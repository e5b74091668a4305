"""User Service - user CRUD with a read-through, invalidate-on-write cache.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (UserStore, UserCache)
    - repositories: Data access implementations (SQL store, Redis cache)
    - services: Business logic (cache-consistency policy)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from user_service.repositories import RedisUserCache, SqlUserRepository
    from user_service.services import UserService

    users = UserService(
        store=SqlUserRepository.create(),
        cache=RedisUserCache.create(),
    )
    ```

For HTTP API:
    ```python
    from user_service.api.app import app
    ```
"""

from user_service.config import get_engine, get_redis_client, settings
from user_service.dto import CreateUserRequest, UpdateUserRequest, UserResponse
from user_service.entities import UserEntity
from user_service.exceptions import UserNotFoundError
from user_service.handlers import UserHandler
from user_service.protocols import UserCache, UserStore
from user_service.repositories import InMemoryUserCache, RedisUserCache, SqlUserRepository
from user_service.services import UserService

__all__ = [
    # Configuration
    "settings",
    "get_engine",
    "get_redis_client",
    # Errors
    "UserNotFoundError",
    # Protocols (interfaces)
    "UserCache",
    "UserStore",
    # Services (business logic)
    "UserService",
    # Handlers (HTTP)
    "UserHandler",
    # Repositories (data access)
    "SqlUserRepository",
    "RedisUserCache",
    "InMemoryUserCache",
    # Entities (domain models)
    "UserEntity",
    # DTOs (API contracts)
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
]
