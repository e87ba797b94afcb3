"""
Amenities module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Amenity, CreateAmenityRequest, UpdateAmenityRequest


@runtime_checkable
class IAmenityService(Protocol):
    """Interface for amenity operations."""

    async def list_amenities(self) -> list[Amenity]:
        ...

    async def get_amenity(self, amenity_id: str) -> Amenity:
        ...

    async def create_amenity(self, request: CreateAmenityRequest) -> Amenity:
        ...

    async def update_amenity(self, amenity_id: str, request: UpdateAmenityRequest) -> Amenity:
        ...

    async def delete_amenity(self, amenity_id: str) -> Amenity:
        ...
