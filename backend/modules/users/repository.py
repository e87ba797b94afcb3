"""
User repository for database access.

Encapsulates all Supabase queries for the ``users`` table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import User, UserCredentials, UserListItem


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    The password column is excluded from every select except
    get_credentials.
    """

    table = "users"
    columns = "id, username, email, name, phoneNumber, profilePicture"

    def list_users(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> list[UserListItem]:
        """
        List users, optionally filtered by username or email.

        Both filters are case-insensitive substring matches.
        """
        query = self._db.table(self.table).select("id, username, email")
        if username:
            query = query.ilike("username", f"%{username}%")
        if email:
            query = query.ilike("email", f"%{email}%")

        result = self._execute(query, "select")
        return [UserListItem.model_validate(row) for row in result.data]

    def get_credentials(self, username: str) -> Optional[UserCredentials]:
        """Get the stored password hash for a username."""
        query = (
            self._db.table(self.table)
            .select("id, username, password")
            .eq("username", username)
            .limit(1)
        )
        result = self._execute(query, "select")
        if not result.data:
            return None

        row = result.data[0]
        return UserCredentials(
            id=str(row["id"]),
            username=row["username"],
            password_hash=row["password"],
        )

    def is_taken(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        exclude_id: Optional[str] = None,
    ) -> bool:
        """Check whether a username or email already belongs to another user."""
        if username is not None and self.exists_by("username", username, exclude_id):
            return True
        if email is not None and self.exists_by("email", email, exclude_id):
            return True
        return False

    def _map_row(self, row: dict[str, Any]) -> User:
        return User.model_validate({**row, "id": str(row["id"])})
