"""
Amenities module data models.
"""

from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class Amenity(CamelModel):
    """A feature a property can offer (Wifi, Pool, ...)."""

    id: str
    name: str
    description: Optional[str] = None


class CreateAmenityRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class UpdateAmenityRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
