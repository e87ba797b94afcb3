"""
Reviews module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class Review(CamelModel):
    """A user's rating and comment on a property."""

    id: str
    rating: int
    comment: str
    user_id: str
    property_id: str
    created_at: Optional[datetime] = None


class CreateReviewRequest(CamelModel):
    """Request to review a property. ``userId`` and ``propertyId`` must exist."""

    rating: int
    comment: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    property_id: str = Field(..., min_length=1)


class UpdateReviewRequest(CamelModel):
    """
    Partial update of a review.

    Only fields present are applied, so ``rating: 0`` is a real change.
    """

    rating: Optional[int] = None
    comment: Optional[str] = None
    user_id: Optional[str] = Field(None, min_length=1)
    property_id: Optional[str] = Field(None, min_length=1)
