"""
Authentication module exceptions.

These exceptions are raised by the auth module and turned into 401
responses by the API error handlers.
"""

from shared.exceptions import AuthenticationError


class InvalidCredentialsError(AuthenticationError):
    """Raised when a username/password pair does not match a stored user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is invalid, malformed or expired."""

    def __init__(self, reason: str = "", message: str = "Invalid or expired token"):
        super().__init__(
            message,
            code="INVALID_TOKEN",
            details={"reason": reason} if reason else None,
        )


class ExpiredTokenError(InvalidTokenError):
    """Raised when a bearer token has reached its expiry."""

    def __init__(self):
        super().__init__(reason="expired")
        self.code = "TOKEN_EXPIRED"


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "No token provided, authorization denied"):
        super().__init__(message, code="MISSING_TOKEN")
