"""
Booking repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Booking


class BookingRepository(BaseRepository[Booking]):
    """Repository for the ``bookings`` table."""

    table = "bookings"

    def list_bookings(self, user_id: Optional[str] = None) -> list[Booking]:
        """List bookings, optionally only those of one user."""
        query = self._select()
        if user_id:
            query = query.eq("userId", user_id)
        return self._fetch_all(query)

    def _map_row(self, row: dict[str, Any]) -> Booking:
        return Booking.model_validate(
            {
                **row,
                "id": str(row["id"]),
                "userId": str(row["userId"]),
                "propertyId": str(row["propertyId"]),
            }
        )
