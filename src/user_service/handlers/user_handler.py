"""HTTP handlers for user operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error mapping.
"""

import logging

from fastapi import HTTPException, status

from user_service.dto import CreateUserRequest, HealthCheckResponse, UpdateUserRequest, UserResponse
from user_service.entities import UserEntity
from user_service.exceptions import UserNotFoundError
from user_service.services import UserService

logger = logging.getLogger(__name__)


def _to_response(user: UserEntity) -> UserResponse:
    return UserResponse(id=user.id, name=user.name)


class UserHandler:
    """HTTP handlers for user operations.

    This handler delegates business logic to UserService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping a missing user to 404
    - Mapping store and cache failures to 500

    The handler methods are synchronous; FastAPI runs them in its worker
    thread pool so store and cache I/O does not block the event loop.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize the user handler.

        Args:
            user_service: The user service for business logic (required).
        """
        self._users = user_service

    def create_user(self, request: CreateUserRequest) -> UserResponse:
        """Handle POST / requests.

        Args:
            request: The create user request DTO

        Returns:
            UserResponse with the assigned id

        Raises:
            HTTPException: If the store fails
        """
        try:
            user = self._users.create(UserEntity(name=request.name))
            return _to_response(user)

        except Exception as e:
            logger.exception("Failed to create user")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create user",
            ) from e

    def get_user(self, user_id: int) -> UserResponse:
        """Handle GET /?id= requests.

        Args:
            user_id: The requested user id

        Returns:
            UserResponse for the stored user

        Raises:
            HTTPException: 404 if the user does not exist, 500 on backend failure
        """
        try:
            return _to_response(self._users.get(user_id))

        except UserNotFoundError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            ) from e
        except Exception as e:
            logger.exception("Failed to get user %s", user_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to get user",
            ) from e

    def update_user(self, request: UpdateUserRequest) -> UserResponse:
        """Handle PUT / requests.

        Args:
            request: The full replacement record

        Returns:
            UserResponse for the persisted record

        Raises:
            HTTPException: 404 if the user does not exist, 500 on backend failure
        """
        try:
            user = self._users.update(UserEntity(id=request.id, name=request.name))
            return _to_response(user)

        except UserNotFoundError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            ) from e
        except Exception as e:
            logger.exception("Failed to update user %s", request.id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update user",
            ) from e

    def delete_user(self, user_id: int) -> None:
        """Handle DELETE /?id= requests.

        Args:
            user_id: The user id to delete

        Raises:
            HTTPException: If the store or cache fails
        """
        try:
            self._users.delete(user_id)

        except Exception as e:
            logger.exception("Failed to delete user %s", user_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete user",
            ) from e

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with per-backend status
        """
        store_healthy, cache_healthy = self._users.is_healthy()

        return HealthCheckResponse(
            status="healthy" if store_healthy and cache_healthy else "unhealthy",
            store_healthy=store_healthy,
            cache_healthy=cache_healthy,
        )
