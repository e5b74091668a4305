"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (SQLite → PostgreSQL, Redis → in-memory)
- Unit testing with mock implementations
- Clear separation of concerns

Usage:
    ```python
    from user_service.protocols import UserCache, UserStore

    store: UserStore = SqlUserRepository.create()
    cache: UserCache = RedisUserCache.create()
    cache: UserCache = InMemoryUserCache()  # also works
    ```
"""

from .user_cache import UserCache
from .user_store import UserStore

__all__ = [
    "UserCache",
    "UserStore",
]
