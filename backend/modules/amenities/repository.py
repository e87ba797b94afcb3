"""
Amenity repository for database access.
"""

from typing import Any

from shared.repository import BaseRepository
from .models import Amenity


class AmenityRepository(BaseRepository[Amenity]):
    """Repository for the ``amenities`` table."""

    table = "amenities"

    def list_amenities(self) -> list[Amenity]:
        return self._fetch_all(self._select().order("name"))

    def _map_row(self, row: dict[str, Any]) -> Amenity:
        return Amenity.model_validate({**row, "id": str(row["id"])})
