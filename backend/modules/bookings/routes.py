"""
Booking API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_booking_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IBookingService
from .models import Booking, CreateBookingRequest, UpdateBookingRequest

router = APIRouter()


@router.get("", response_model=list[Booking])
async def list_bookings(
    user_id: Optional[str] = Query(default=None, alias="userId", description="Only this user's bookings"),
    service: IBookingService = Depends(get_booking_service),
) -> list[Booking]:
    return await service.list_bookings(user_id=user_id)


@router.get("/{booking_id}", response_model=Booking)
async def get_booking(
    booking_id: str,
    service: IBookingService = Depends(get_booking_service),
) -> Booking:
    return await service.get_booking(booking_id)


@router.post("", response_model=Booking, status_code=201)
async def create_booking(
    request: CreateBookingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> Booking:
    """
    Book a property.

    Returns 404 "User not found" or "Property not found" when a reference
    is missing; nothing is written in that case.
    """
    return await service.create_booking(request)


@router.put("/{booking_id}", response_model=Booking)
async def update_booking(
    booking_id: str,
    request: UpdateBookingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> Booking:
    return await service.update_booking(booking_id, request)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking(
    booking_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> MessageResponse:
    deleted = await service.delete_booking(booking_id)
    return MessageResponse(message=f"Booking with ID {deleted.id} deleted successfully")
