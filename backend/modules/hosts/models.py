"""
Hosts module data models.
"""

from typing import Optional
from pydantic import EmailStr, Field

from shared.models import CamelModel


class Host(CamelModel):
    """A property host."""

    id: str = Field(..., description="Host ID")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique email address")
    name: Optional[str] = Field(None, description="Full name")
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None
    about_me: Optional[str] = None


class CreateHostRequest(CamelModel):
    """Request to register a new host."""

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    name: str = Field(..., min_length=1)
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None
    about_me: Optional[str] = None


class UpdateHostRequest(CamelModel):
    """Partial update of a host. Only fields present are applied."""

    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None
    about_me: Optional[str] = None
