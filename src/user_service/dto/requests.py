"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request DTO for creating a user.

    The store assigns the id, so an id sent by the client is ignored.
    """

    name: str = Field(..., description="Display name of the user", min_length=1, max_length=255)


class UpdateUserRequest(BaseModel):
    """Request DTO for replacing a user record."""

    id: int = Field(..., description="Identifier of the user to replace")
    name: str = Field(..., description="New display name", min_length=1, max_length=255)
