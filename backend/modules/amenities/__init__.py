"""
Amenities module.
"""

from .interfaces import IAmenityService
from .models import Amenity, CreateAmenityRequest, UpdateAmenityRequest
from .exceptions import AmenityNotFoundError, DuplicateAmenityError

__all__ = [
    "IAmenityService",
    "Amenity",
    "CreateAmenityRequest",
    "UpdateAmenityRequest",
    "AmenityNotFoundError",
    "DuplicateAmenityError",
]
