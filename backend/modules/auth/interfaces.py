"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from .models import LoginResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    Covers credential verification, token issuance and token validation.
    """

    async def authenticate(self, username: str, password: str) -> AuthenticatedUser:
        """
        Verify a username/password pair.

        Returns:
            The matching user's identity

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        ...

    def issue_token(self, user_id: str, username: str) -> str:
        """
        Issue a signed bearer token for a user.

        Returns:
            Serialized token that expires 7 hours from now
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        Raises:
            MissingTokenError: If the token is empty
            InvalidTokenError: If the token is malformed, badly signed or expired
        """
        ...

    async def login(self, username: str, password: str) -> LoginResponse:
        """
        Authenticate and issue a token in one step.

        Raises:
            InvalidCredentialsError: If the credentials don't match
        """
        ...
