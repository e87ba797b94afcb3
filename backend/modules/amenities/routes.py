"""
Amenity API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_amenity_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IAmenityService
from .models import Amenity, CreateAmenityRequest, UpdateAmenityRequest

router = APIRouter()


@router.get("", response_model=list[Amenity])
async def list_amenities(
    service: IAmenityService = Depends(get_amenity_service),
) -> list[Amenity]:
    return await service.list_amenities()


@router.get("/{amenity_id}", response_model=Amenity)
async def get_amenity(
    amenity_id: str,
    service: IAmenityService = Depends(get_amenity_service),
) -> Amenity:
    return await service.get_amenity(amenity_id)


@router.post("", response_model=Amenity, status_code=201)
async def create_amenity(
    request: CreateAmenityRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAmenityService = Depends(get_amenity_service),
) -> Amenity:
    return await service.create_amenity(request)


@router.put("/{amenity_id}", response_model=Amenity)
async def update_amenity(
    amenity_id: str,
    request: UpdateAmenityRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAmenityService = Depends(get_amenity_service),
) -> Amenity:
    return await service.update_amenity(amenity_id, request)


@router.delete("/{amenity_id}", response_model=MessageResponse)
async def delete_amenity(
    amenity_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAmenityService = Depends(get_amenity_service),
) -> MessageResponse:
    deleted = await service.delete_amenity(amenity_id)
    return MessageResponse(message=f"Amenity {deleted.name} deleted successfully")
