"""
Hosts module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class HostNotFoundError(NotFoundError):
    """Raised when a host is not found."""

    def __init__(self, host_id: str):
        super().__init__(
            "Host not found",
            code="HOST_NOT_FOUND",
            details={"host_id": host_id},
        )


class DuplicateHostError(ValidationError):
    """Raised when a host username or email is already registered."""

    def __init__(self, username: str | None = None, email: str | None = None):
        super().__init__(
            "Username or email already taken",
            code="DUPLICATE_HOST",
            details={"username": username, "email": email},
        )
