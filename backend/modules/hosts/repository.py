"""
Host repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Host


class HostRepository(BaseRepository[Host]):
    """Repository for the ``hosts`` table."""

    table = "hosts"

    def list_hosts(self, name: Optional[str] = None) -> list[Host]:
        """List hosts, optionally filtered by name (case-insensitive contains)."""
        query = self._select()
        if name:
            query = query.ilike("name", f"%{name}%")
        return self._fetch_all(query)

    def is_taken(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        exclude_id: Optional[str] = None,
    ) -> bool:
        """Check whether a username or email already belongs to another host."""
        if username is not None and self.exists_by("username", username, exclude_id):
            return True
        if email is not None and self.exists_by("email", email, exclude_id):
            return True
        return False

    def _map_row(self, row: dict[str, Any]) -> Host:
        return Host.model_validate({**row, "id": str(row["id"])})
