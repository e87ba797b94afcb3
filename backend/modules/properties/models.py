"""
Properties module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class Property(CamelModel):
    """A rental listing owned by a host."""

    id: str
    title: str
    description: str
    location: str
    price_per_night: float
    bedroom_count: int
    bathroom_count: int
    max_guest_count: int
    rating: float
    host_id: str
    created_at: Optional[datetime] = None


class CreatePropertyRequest(CamelModel):
    """Request to list a new property. ``hostId`` must name an existing host."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    price_per_night: float
    bedroom_count: int
    bathroom_count: int
    max_guest_count: int
    rating: float
    host_id: str = Field(..., min_length=1)


class UpdatePropertyRequest(CamelModel):
    """Partial update of a property. Only fields present are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    price_per_night: Optional[float] = None
    bedroom_count: Optional[int] = None
    bathroom_count: Optional[int] = None
    max_guest_count: Optional[int] = None
    rating: Optional[float] = None
    host_id: Optional[str] = Field(None, min_length=1)


class PropertyFilters(CamelModel):
    """Query filters for listing properties."""

    location: Optional[str] = None
    price_per_night: Optional[float] = None
    amenities: list[str] = Field(default_factory=list)
