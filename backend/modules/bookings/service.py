"""
Bookings service implementation.
"""

import logging
from typing import Optional

from shared.guard import IExistenceLookup, ResourceGuard

from .interfaces import IBookingService
from .models import Booking, CreateBookingRequest, UpdateBookingRequest
from .repository import BookingRepository
from .exceptions import BookingNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("startDate", "endDate", "userId", "propertyId")


class BookingService(IBookingService):
    """Booking CRUD with user and property existence checks."""

    def __init__(
        self,
        repository: BookingRepository,
        users: IExistenceLookup,
        properties: IExistenceLookup,
    ):
        self._repo = repository
        self._guard = ResourceGuard(users=users, properties=properties)

    async def list_bookings(self, user_id: Optional[str] = None) -> list[Booking]:
        return self._repo.list_bookings(user_id=user_id)

    async def get_booking(self, booking_id: str) -> Booking:
        booking = self._repo.get_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    async def create_booking(self, request: CreateBookingRequest) -> Booking:
        data = request.model_dump(mode="json", by_alias=True)
        self._guard.ensure_references(data)

        booking = self._repo.create(data)
        logger.info(
            "Created booking %s user=%s property=%s",
            booking.id, booking.user_id, booking.property_id,
        )
        return booking

    async def update_booking(self, booking_id: str, request: UpdateBookingRequest) -> Booking:
        changes = request.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )
        self._guard.require_changes(changes, UPDATABLE_FIELDS)

        if not self._repo.exists(booking_id):
            raise BookingNotFoundError(booking_id)

        self._guard.ensure_references(changes)

        updated = self._repo.update(booking_id, changes)
        if updated is None:
            raise BookingNotFoundError(booking_id)

        logger.info("Updated booking %s fields=%s", booking_id, sorted(changes))
        return updated

    async def delete_booking(self, booking_id: str) -> Booking:
        deleted = self._repo.delete(booking_id)
        if deleted is None:
            raise BookingNotFoundError(booking_id)

        logger.info("Deleted booking %s", booking_id)
        return deleted
