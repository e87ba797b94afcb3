"""
Authentication service implementation.

Verifies stored credentials and issues/validates HS256 bearer tokens.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from modules.users.interfaces import ICredentialStore
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import LoginResponse, TokenClaims
from .passwords import verify_password
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LIFETIME = timedelta(hours=7)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The signing secret, algorithm, token lifetime and clock are passed in
    at construction; the container wires them from Settings once per process.
    """

    def __init__(
        self,
        credentials: ICredentialStore,
        secret: str,
        algorithm: str = "HS256",
        token_lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret:
            raise RuntimeError("JWT secret is not configured. Set the JWT_SECRET environment variable.")

        self._credentials = credentials
        self._secret = secret
        self._algorithm = algorithm
        self._token_lifetime = token_lifetime
        self._clock = clock

    async def authenticate(self, username: str, password: str) -> AuthenticatedUser:
        """
        Verify a username/password pair against the stored Argon2 hash.

        Unknown users and wrong passwords fail the same way.
        """
        stored = self._credentials.get_credentials(username)
        if stored is None or not verify_password(password, stored.password_hash):
            logger.info("Rejected login for username=%s", username)
            raise InvalidCredentialsError()

        return AuthenticatedUser(id=stored.id, username=stored.username)

    def issue_token(self, user_id: str, username: str) -> str:
        """Sign a token carrying ``userId`` and ``username``."""
        issued_at = int(self._clock().timestamp())
        payload = {
            "userId": user_id,
            "username": username,
            "iat": issued_at,
            "exp": issued_at + int(self._token_lifetime.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        PyJWT checks the signature and structure; expiry is checked here
        against the service clock so a token is rejected at exactly
        ``iat + lifetime``.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", "iat"],
                },
            )
            claims = TokenClaims.model_validate(payload)
        except jwt.InvalidTokenError as e:
            logger.info("Rejected bearer token: %s", e)
            raise InvalidTokenError(str(e))
        except PydanticValidationError:
            logger.info("Rejected bearer token: missing identity claims")
            raise InvalidTokenError("missing identity claims")

        if self._clock().timestamp() >= claims.exp:
            raise ExpiredTokenError()

        return AuthenticatedUser(id=claims.user_id, username=claims.username)

    async def login(self, username: str, password: str) -> LoginResponse:
        user = await self.authenticate(username, password)
        token = self.issue_token(user.id, user.username)
        logger.info("Issued token for user %s", user.id)
        return LoginResponse(token=token)
