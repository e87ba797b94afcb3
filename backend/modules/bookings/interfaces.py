"""
Bookings module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Booking, CreateBookingRequest, UpdateBookingRequest


@runtime_checkable
class IBookingService(Protocol):
    """
    Interface for booking operations.

    Bookings reference a user and a property; both are checked to exist
    before a booking is created or repointed.
    """

    async def list_bookings(self, user_id: Optional[str] = None) -> list[Booking]:
        ...

    async def get_booking(self, booking_id: str) -> Booking:
        """
        Raises:
            BookingNotFoundError: If the booking doesn't exist
        """
        ...

    async def create_booking(self, request: CreateBookingRequest) -> Booking:
        """
        Raises:
            ReferenceNotFoundError: If the user or property doesn't exist
        """
        ...

    async def update_booking(self, booking_id: str, request: UpdateBookingRequest) -> Booking:
        """
        Raises:
            ValidationError: If no fields are supplied
            BookingNotFoundError: If the booking doesn't exist
            ReferenceNotFoundError: If a new user or property doesn't exist
        """
        ...

    async def delete_booking(self, booking_id: str) -> Booking:
        """
        Raises:
            BookingNotFoundError: If the booking doesn't exist
        """
        ...
