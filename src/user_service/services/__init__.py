"""Service layer for business logic.

This layer contains the cache-consistency policy around user persistence.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Store / Cache
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from user_service.services import UserService

    users = UserService(store=store, cache=cache)
    ```
"""

from .user_service import UserService

__all__ = [
    "UserService",
]
