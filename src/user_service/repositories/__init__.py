"""Repository layer for data access.

This layer hides the external collaborators (SQL database, Redis) behind
protocol-based interfaces. This enables:
- Easy swapping of implementations (SQLite → PostgreSQL, Redis → in-memory)
- Unit testing with mock implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from user_service.protocols import UserCache, UserStore

from .memory_user_cache import InMemoryUserCache
from .redis_user_cache import CACHE_NAME, RedisUserCache
from .sql_user_repository import SqlUserRepository, users_table

__all__ = [
    "CACHE_NAME",
    "UserCache",
    "UserStore",
    "InMemoryUserCache",
    "RedisUserCache",
    "SqlUserRepository",
    "users_table",
]
