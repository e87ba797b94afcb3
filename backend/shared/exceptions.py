"""
Base exception classes for the Stayhub backend.

Each module should define its own exceptions that inherit from these bases.
The API layer turns any StayhubError into a JSON ``{"message": ...}`` body
using the class-level ``status_code``.
"""

from typing import Optional, Any


class StayhubError(Exception):
    """
    Base exception for all Stayhub errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging and API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(StayhubError):
    """Resource not found."""

    status_code = 404


class ReferenceNotFoundError(NotFoundError):
    """A referenced entity (user, host, property) does not exist."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity} not found",
            code="REFERENCE_NOT_FOUND",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity


class ValidationError(StayhubError):
    """Input validation failed."""

    status_code = 400


class DuplicateKeyError(ValidationError):
    """A write collided with a unique column the service check did not catch."""

    def __init__(self, column: str, value: str):
        super().__init__(
            f"{column} already exists" if column else "Duplicate value",
            code="DUPLICATE_KEY",
            details={"column": column, "value": value},
        )
        self.column = column


class AuthenticationError(StayhubError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(StayhubError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class ForbiddenError(AuthorizationError):
    """Authenticated caller is not entitled to touch the resource."""

    def __init__(self, message: str, user_id: str, resource_id: str):
        super().__init__(
            message,
            code="FORBIDDEN",
            details={"user_id": user_id, "resource_id": resource_id},
        )


class StoreError(StayhubError):
    """
    Unexpected failure from the data store.

    The public message is always generic; the cause is kept for logging.
    """

    status_code = 500

    def __init__(self, operation: str, table: str):
        super().__init__(
            "Server error",
            code="STORE_ERROR",
            details={"operation": operation, "table": table},
        )
