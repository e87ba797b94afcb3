"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class DuplicateUserError(ValidationError):
    """Raised when a username or email is already registered."""

    def __init__(self, username: str | None = None, email: str | None = None):
        super().__init__(
            "Username or email already taken",
            code="DUPLICATE_USER",
            details={"username": username, "email": email},
        )
