"""
Property API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_property_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IPropertyService
from .models import Property, PropertyFilters, CreatePropertyRequest, UpdatePropertyRequest

router = APIRouter()


@router.get("", response_model=list[Property])
async def list_properties(
    location: Optional[str] = Query(default=None, description="Location contains (case-insensitive)"),
    price_per_night: Optional[float] = Query(default=None, alias="pricePerNight"),
    amenities: Optional[str] = Query(default=None, description="Comma-separated amenity names"),
    service: IPropertyService = Depends(get_property_service),
) -> list[Property]:
    """
    List properties.

    ``amenities=Wifi,Pool`` keeps properties offering any of the listed amenities.
    """
    filters = PropertyFilters(
        location=location,
        price_per_night=price_per_night,
        amenities=[a.strip() for a in amenities.split(",") if a.strip()] if amenities else [],
    )
    return await service.list_properties(filters)


@router.get("/{property_id}", response_model=Property)
async def get_property(
    property_id: str,
    service: IPropertyService = Depends(get_property_service),
) -> Property:
    return await service.get_property(property_id)


@router.post("", response_model=Property, status_code=201)
async def create_property(
    request: CreatePropertyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPropertyService = Depends(get_property_service),
) -> Property:
    """Create a property. Returns 404 "Host not found" for an unknown hostId."""
    return await service.create_property(request)


@router.put("/{property_id}", response_model=Property)
async def update_property(
    property_id: str,
    request: UpdatePropertyRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPropertyService = Depends(get_property_service),
) -> Property:
    return await service.update_property(property_id, request)


@router.delete("/{property_id}", response_model=MessageResponse)
async def delete_property(
    property_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPropertyService = Depends(get_property_service),
) -> MessageResponse:
    deleted = await service.delete_property(property_id)
    return MessageResponse(message=f"Property {deleted.title} deleted successfully")
