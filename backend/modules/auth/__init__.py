"""
Authentication module.

Handles credential verification, bearer token issuance and validation.

Public API:
- IAuthService: Interface for auth operations
- TokenClaims, LoginRequest, LoginResponse: Auth models
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenClaims, LoginRequest, LoginResponse
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenClaims",
    "LoginRequest",
    "LoginResponse",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
]
