"""
Property repository for database access.

Amenities are linked through the ``property_amenities`` join table, which
PostgREST exposes as an embedded ``amenities`` resource.
"""

from typing import Any

from shared.repository import BaseRepository
from .models import Property, PropertyFilters


class PropertyRepository(BaseRepository[Property]):
    """Repository for the ``properties`` table."""

    table = "properties"

    def list_properties(self, filters: PropertyFilters) -> list[Property]:
        """
        List properties matching the filters.

        Args:
            filters: ``location`` is a case-insensitive contains match,
                ``price_per_night`` an exact match, and ``amenities`` keeps
                properties offering at least one of the named amenities.
        """
        if filters.amenities:
            # Inner join so only properties with a matching amenity are returned
            query = self._db.table(self.table).select("*, amenities!inner(name)")
            query = query.in_("amenities.name", filters.amenities)
        else:
            query = self._select()

        if filters.location:
            query = query.ilike("location", f"%{filters.location}%")
        if filters.price_per_night is not None:
            query = query.eq("pricePerNight", filters.price_per_night)

        return self._fetch_all(query)

    def _map_row(self, row: dict[str, Any]) -> Property:
        return Property.model_validate(
            {**row, "id": str(row["id"]), "hostId": str(row["hostId"])}
        )
