"""
Properties module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Property, PropertyFilters, CreatePropertyRequest, UpdatePropertyRequest


@runtime_checkable
class IPropertyService(Protocol):
    """Interface for property operations."""

    async def list_properties(self, filters: PropertyFilters) -> list[Property]:
        ...

    async def get_property(self, property_id: str) -> Property:
        """
        Raises:
            PropertyNotFoundError: If the property doesn't exist
        """
        ...

    async def create_property(self, request: CreatePropertyRequest) -> Property:
        """
        Raises:
            ReferenceNotFoundError: If ``hostId`` doesn't name a host
        """
        ...

    async def update_property(self, property_id: str, request: UpdatePropertyRequest) -> Property:
        """
        Raises:
            ValidationError: If no fields are supplied
            PropertyNotFoundError: If the property doesn't exist
            ReferenceNotFoundError: If a new ``hostId`` doesn't name a host
        """
        ...

    async def delete_property(self, property_id: str) -> Property:
        """
        Raises:
            PropertyNotFoundError: If the property doesn't exist
        """
        ...
