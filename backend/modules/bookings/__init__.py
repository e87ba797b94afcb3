"""
Bookings module.
"""

from .interfaces import IBookingService
from .models import Booking, CreateBookingRequest, UpdateBookingRequest
from .exceptions import BookingNotFoundError

__all__ = [
    "IBookingService",
    "Booking",
    "CreateBookingRequest",
    "UpdateBookingRequest",
    "BookingNotFoundError",
]
