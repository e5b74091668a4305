"""User store protocol.

Defines the interface for the authoritative persistence backend of user
records. The store owns identity: it assigns ids on insert.

Implementations can include:
- SQL database through SQLAlchemy Core (default)
- Any other durable key-value backend keyed by integer id
"""

from typing import Protocol, runtime_checkable

from user_service.entities import UserEntity


@runtime_checkable
class UserStore(Protocol):
    """Protocol for durable user persistence.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def save(self, user: UserEntity) -> UserEntity:
        """Insert or fully replace a user record.

        Args:
            user: Record to persist. When ``user.id`` is None a new row is
                inserted and an id is assigned, otherwise the existing row
                is replaced.

        Returns:
            The persisted record, including its id

        Raises:
            UserNotFoundError: If ``user.id`` is set but no such row exists
        """
        ...

    def find_by_id(self, user_id: int) -> UserEntity | None:
        """Look up a user by id.

        Args:
            user_id: The user identifier

        Returns:
            The stored record, or None if absent
        """
        ...

    def delete_by_id(self, user_id: int) -> None:
        """Delete a user by id. Deleting a missing id is a no-op.

        Args:
            user_id: The user identifier
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def close(self) -> None:
        """Release backend connections."""
        ...
