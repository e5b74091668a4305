"""User service for core business logic.

This service orchestrates user persistence by coordinating the store
(authoritative data) and the cache (derived copy of store data).

Cache policy:
    - get: read-through. A miss is served from the store and the result is
      cached. This is the only path that populates the cache.
    - update / delete: invalidate-on-write. The store is written first and
      the cache entry is evicted afterwards; the new value is not cached.
    - create: the new record is not cached.

A get that misses, reads the old row and caches it after a concurrent
update has already evicted the key leaves a stale entry until the next
write on that id. Nothing here locks across the store and cache calls.
"""

import logging
from dataclasses import replace

from user_service.entities import UserEntity
from user_service.exceptions import UserNotFoundError
from user_service.protocols import UserCache, UserStore

logger = logging.getLogger(__name__)


class UserService:
    """Cached access layer over the user store.

    This service depends on PROTOCOLS, not concrete implementations:
    - UserStore: SQL database, or anything with save/find_by_id/delete_by_id
    - UserCache: Redis, in-memory, or anything with get/put/evict

    The store and cache are borrowed, not owned: they may be shared with
    other collaborators and are closed by whoever created them.

    Example:
        ```python
        from user_service.entities import UserEntity
        from user_service.repositories import RedisUserCache, SqlUserRepository
        from user_service.services import UserService

        users = UserService(
            store=SqlUserRepository.create(),
            cache=RedisUserCache.create(),
        )
        alice = users.create(UserEntity(name="Alice"))
        users.get(alice.id)
        ```
    """

    def __init__(self, store: UserStore, cache: UserCache) -> None:
        """Initialize the user service.

        Args:
            store: Authoritative user store (required).
            cache: User cache in front of the store (required).
        """
        self._store = store
        self._cache = cache

    def create(self, user: UserEntity) -> UserEntity:
        """Persist a new user.

        Any id on the input is dropped; the store assigns one.

        Args:
            user: The user to create

        Returns:
            The stored user with its assigned id
        """
        created = self._store.save(replace(user, id=None))
        logger.info("Created user %s", created.id)
        return created

    def get(self, user_id: int) -> UserEntity:
        """Get a user by id, reading through the cache.

        Business logic:
        1. Return the cached record on a hit (store is not touched)
        2. On a miss, read the store
        3. Cache the stored record under ``user_id`` and return it

        Args:
            user_id: The user identifier

        Returns:
            The user record

        Raises:
            UserNotFoundError: If the store has no record for ``user_id``
        """
        cached = self._cache.get(user_id)
        if cached is not None:
            logger.debug("Cache hit for user %s", user_id)
            return cached

        logger.debug("Cache miss for user %s", user_id)
        user = self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        self._cache.put(user_id, user)
        return user

    def update(self, user: UserEntity) -> UserEntity:
        """Replace an existing user, then invalidate its cache entry.

        The store write must finish before the eviction is issued. If the
        store raises, nothing is evicted.

        Args:
            user: Full replacement record, ``user.id`` must exist

        Returns:
            The persisted record

        Raises:
            ValueError: If ``user.id`` is None
            UserNotFoundError: If the store has no record for ``user.id``
        """
        # save() without an id inserts, which update must never do
        if user.id is None:
            raise ValueError("update requires the id of an existing user")

        updated = self._store.save(user)
        self._cache.evict(updated.id)
        logger.debug("Evicted user %s after update", updated.id)
        return updated

    def delete(self, user_id: int) -> None:
        """Delete a user, then invalidate its cache entry.

        Deleting an id that does not exist is not an error.

        Args:
            user_id: The user identifier
        """
        self._store.delete_by_id(user_id)
        self._cache.evict(user_id)
        logger.debug("Evicted user %s after delete", user_id)

    def is_healthy(self) -> tuple[bool, bool]:
        """Check store and cache reachability.

        Returns:
            Tuple (store_healthy, cache_healthy)
        """
        return self._store.health_check(), self._cache.health_check()

    @property
    def store(self) -> UserStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def cache(self) -> UserCache:
        """Get the underlying cache (for testing)."""
        return self._cache
