"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for API and storage models.

    Attributes are snake_case in Python and camelCase on the wire and in the
    store (``pricePerNight``, ``hostId``). Either form is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated from a validated bearer token and handed to route handlers
    via dependency injection. Lives for one request and is never persisted.
    """

    id: str = Field(..., description="User ID (token userId claim)")
    username: str = Field(..., description="Username (token username claim)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class MessageResponse(BaseModel):
    """Plain message body, used for deletions and errors."""

    message: str
