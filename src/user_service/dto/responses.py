"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """Response DTO for a single user record."""

    id: int = Field(..., description="Store-assigned user identifier")
    name: str = Field(..., description="Display name of the user")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the user store is reachable")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
