"""User cache protocol.

Defines the interface for the derived, non-authoritative lookup layer in
front of the user store. Entries are keyed by user id inside the fixed
"user" namespace.

Implementations can include:
- Redis (default)
- Process-local dictionary (tests, single-process deployments)
"""

from typing import Protocol, runtime_checkable

from user_service.entities import UserEntity


@runtime_checkable
class UserCache(Protocol):
    """Protocol for user cache backends."""

    def get(self, user_id: int) -> UserEntity | None:
        """Return the cached record for ``user_id``, or None on a miss."""
        ...

    def put(self, user_id: int, user: UserEntity) -> None:
        """Cache ``user`` under ``user_id``, replacing any previous entry."""
        ...

    def evict(self, user_id: int) -> None:
        """Remove the entry for ``user_id`` if present."""
        ...

    def health_check(self) -> bool:
        """Check if the cache backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def close(self) -> None:
        """Release backend connections."""
        ...
