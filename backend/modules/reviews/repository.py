"""
Review repository for database access.
"""

from typing import Any

from shared.repository import BaseRepository
from .models import Review


class ReviewRepository(BaseRepository[Review]):
    """Repository for the ``reviews`` table."""

    table = "reviews"

    def list_reviews(self) -> list[Review]:
        return self._fetch_all(self._select())

    def _map_row(self, row: dict[str, Any]) -> Review:
        return Review.model_validate(
            {
                **row,
                "id": str(row["id"]),
                "userId": str(row["userId"]),
                "propertyId": str(row["propertyId"]),
            }
        )
