"""
Users module data models.

The stored ``password`` column holds an Argon2 hash and is only ever read
into UserCredentials; none of the response models carry it.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from shared.models import CamelModel


class User(CamelModel):
    """A guest account, as returned by the API."""

    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique email address")
    name: Optional[str] = Field(None, description="Full name")
    phone_number: Optional[str] = Field(None, description="Phone number")
    profile_picture: Optional[str] = Field(None, description="Profile picture URL")


class UserListItem(CamelModel):
    """Summary item for the user list."""

    id: str
    username: str
    email: str


class UserCredentials(BaseModel):
    """Stored login data for a user. Internal to the auth flow."""

    id: str
    username: str
    password_hash: str


class CreateUserRequest(CamelModel):
    """Request to register a new user."""

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None


class UpdateUserRequest(CamelModel):
    """
    Partial update of a user account.

    Only fields present in the request body are applied.
    """

    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = None
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None
