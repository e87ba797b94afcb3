"""
Bookings module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class Booking(CamelModel):
    """A user's stay at a property."""

    id: str
    start_date: datetime
    end_date: datetime
    user_id: str
    property_id: str
    created_at: Optional[datetime] = None


class CreateBookingRequest(CamelModel):
    """Request to book a property. ``userId`` and ``propertyId`` must exist."""

    start_date: datetime
    end_date: datetime
    user_id: str = Field(..., min_length=1)
    property_id: str = Field(..., min_length=1)


class UpdateBookingRequest(CamelModel):
    """Partial update of a booking. Only fields present are applied."""

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    user_id: Optional[str] = Field(None, min_length=1)
    property_id: Optional[str] = Field(None, min_length=1)
