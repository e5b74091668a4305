"""Redis implementation of UserCache.

Entries are plain Redis strings holding the JSON-encoded record, stored at
``<namespace>::<id>`` with no expiry. Entries only disappear through
explicit eviction.
"""

import json
import logging

import redis

from user_service.config import get_redis_client
from user_service.entities import UserEntity

logger = logging.getLogger(__name__)

# Logical partition for user entries, distinct from any other cached entity
CACHE_NAME = "user"


class RedisUserCache:
    """Redis-backed user cache.

    This class satisfies the UserCache protocol through structural
    typing - no explicit inheritance needed.

    Redis errors are not caught here; they propagate to the caller.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        namespace: str = CACHE_NAME,
    ) -> None:
        """Initialize the Redis user cache.

        Args:
            redis_client: Redis client instance. If None, creates default.
            namespace: Key prefix separating user entries from other data.
        """
        self._client = redis_client or get_redis_client()
        self._namespace = namespace

    @classmethod
    def create(cls, namespace: str = CACHE_NAME) -> "RedisUserCache":
        """Factory method to create RedisUserCache with defaults.

        Args:
            namespace: Key prefix. Defaults to "user".

        Returns:
            Configured RedisUserCache
        """
        return cls(namespace=namespace)

    def key_for(self, user_id: int) -> str:
        """Build the Redis key for a user id."""
        return f"{self._namespace}::{user_id}"

    def get(self, user_id: int) -> UserEntity | None:
        """Return the cached record for ``user_id``, or None on a miss."""
        raw = self._client.get(self.key_for(user_id))
        if raw is None:
            return None

        data = json.loads(raw)
        return UserEntity(id=data["id"], name=data["name"])

    def put(self, user_id: int, user: UserEntity) -> None:
        """Cache ``user`` under ``user_id``."""
        payload = json.dumps({"id": user.id, "name": user.name})
        self._client.set(self.key_for(user_id), payload)

    def evict(self, user_id: int) -> None:
        """Remove the entry for ``user_id`` if present."""
        self._client.delete(self.key_for(user_id))

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            logger.warning("User cache health check failed", exc_info=True)
            return False

    def close(self) -> None:
        """Close the Redis connection pool."""
        self._client.close()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
