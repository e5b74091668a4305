"""User domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEntity:
    """Domain entity for a user record.

    This is an internal representation used by services and repositories.
    For API contracts, use the DTO classes from the dto package.

    Attributes:
        name: Display name of the user
        id: Store-assigned identifier, None until the record is persisted
    """

    name: str
    id: int | None = None
