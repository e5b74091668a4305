from typing import Annotated

from fastapi import FastAPI, Query, Response, status

from user_service.api.dependencies import HandlerDep, lifespan
from user_service.config import settings
from user_service.dto import CreateUserRequest, HealthCheckResponse, UpdateUserRequest, UserResponse

app = FastAPI(
    title="User Service API",
    description="User CRUD with a read-through, invalidate-on-write Redis cache",
    version="0.1.0",
    lifespan=lifespan,
)


@app.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(request: CreateUserRequest, handler: HandlerDep) -> UserResponse:
    """Create a user. The id is assigned by the store."""
    return handler.create_user(request)


@app.get("/", response_model=UserResponse)
def get_user(
    handler: HandlerDep,
    user_id: Annotated[int, Query(alias="id", description="User identifier")],
) -> UserResponse:
    """Get a user by id, served from the cache when possible."""
    return handler.get_user(user_id)


@app.put("/", response_model=UserResponse)
def update_user(request: UpdateUserRequest, handler: HandlerDep) -> UserResponse:
    """Replace a user record and invalidate its cache entry."""
    return handler.update_user(request)


@app.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    handler: HandlerDep,
    user_id: Annotated[int, Query(alias="id", description="User identifier")],
) -> Response:
    """Delete a user and invalidate its cache entry."""
    handler.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/health", response_model=HealthCheckResponse)
def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
    """Health check endpoint."""
    result = handler.health_check()
    if result.status != "healthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "user_service.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
