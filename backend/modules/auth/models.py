"""
Authentication module data models.
"""

from pydantic import BaseModel, Field

from shared.models import CamelModel


class TokenClaims(CamelModel):
    """
    Decoded bearer token payload.

    ``exp`` is always ``iat`` plus the configured lifetime (7 hours).
    """

    user_id: str = Field(..., description="Subject user ID")
    username: str = Field(..., description="Subject username")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class LoginRequest(BaseModel):
    """Username/password login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Successful login."""

    token: str = Field(..., description="Signed bearer token")
