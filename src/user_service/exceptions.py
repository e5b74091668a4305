"""Domain errors raised by the store and service layers."""


class UserNotFoundError(LookupError):
    """Raised when no user record exists for the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id
