"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Store / Cache
    (HTTP)  -> (Business) -> (Data Access)
"""

from .user_handler import UserHandler

__all__ = [
    "UserHandler",
]
