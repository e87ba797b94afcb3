"""
Base repository class for database access.

Provides the data store adapter shared by all entity repositories: Supabase
client access, lookup by id or unique column, create, update and delete with
"not found" signalled through ``None`` rather than exceptions.
"""

import logging
import re
from typing import Any, Generic, Optional, TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DuplicateKeyError, ReferenceNotFoundError, StayhubError, StoreError
from .guard import REFERENCE_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE codes surfaced by PostgREST
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"

# Constraint details look like: Key ("userId")=(42) is not present in table "users".
_KEY_DETAIL = re.compile(r"Key \((?P<column>[^)]*)\)=\((?P<value>[^)]*)\)")

_REFERENCE_ENTITIES = dict(REFERENCE_FIELDS)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses set ``table`` (and optionally ``columns``) and implement
    ``_map_row`` to turn a database row into their Pydantic model.

    Example:
        class AmenityRepository(BaseRepository[Amenity]):
            table = "amenities"

            def _map_row(self, row: dict[str, Any]) -> Amenity:
                return Amenity.model_validate(row)

    Note: repositories do NOT perform existence or ownership checks on
    behalf of callers. Services run those through the ResourceGuard.
    """

    table: str = ""
    columns: str = "*"

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    # -------------------------------------------------------------------------
    # Public CRUD contract
    # -------------------------------------------------------------------------

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Get a row by ID, or None if it does not exist."""
        row = self._fetch_one("id", entity_id)
        return self._map_row(row) if row else None

    def exists(self, entity_id: str) -> bool:
        """Check whether a row with this ID exists."""
        query = self._db.table(self.table).select("id").eq("id", entity_id).limit(1)
        return bool(self._execute(query, "select").data)

    def exists_by(self, column: str, value: Any, exclude_id: Optional[str] = None) -> bool:
        """Check whether a row has ``value`` in a unique column."""
        query = self._db.table(self.table).select("id").eq(column, value)
        if exclude_id is not None:
            query = query.neq("id", exclude_id)
        return bool(self._execute(query.limit(1), "select").data)

    def create(self, data: dict[str, Any]) -> T:
        """Insert a row and return the stored entity."""
        query = self._db.table(self.table).insert(data)
        result = self._execute(query, "insert")
        return self._map_row(result.data[0])

    def update(self, entity_id: str, data: dict[str, Any]) -> Optional[T]:
        """
        Update a row by ID.

        Returns:
            The updated entity, or None if no row matched.
        """
        query = self._db.table(self.table).update(data).eq("id", entity_id)
        result = self._execute(query, "update")
        if not result.data:
            return None
        return self._map_row(result.data[0])

    def delete(self, entity_id: str) -> Optional[T]:
        """
        Delete a row by ID.

        Returns:
            The deleted entity, or None if no row matched.
        """
        query = self._db.table(self.table).delete().eq("id", entity_id)
        result = self._execute(query, "delete")
        if not result.data:
            return None
        return self._map_row(result.data[0])

    # -------------------------------------------------------------------------
    # Helpers for subclasses
    # -------------------------------------------------------------------------

    def _select(self):
        """Start a select query on this repository's table."""
        return self._db.table(self.table).select(self.columns)

    def _fetch_one(self, column: str, value: Any) -> Optional[dict[str, Any]]:
        """Fetch a single row where ``column`` equals ``value``."""
        query = self._select().eq(column, value).limit(1)
        result = self._execute(query, "select")
        return result.data[0] if result.data else None

    def _fetch_all(self, query) -> list[T]:
        """Run a select query and map every row."""
        result = self._execute(query, "select")
        return [self._map_row(row) for row in result.data]

    def _execute(self, query, operation: str):
        """
        Execute a query, translating client failures into StoreError.

        Constraint violations on insert and update are client errors: a
        referenced row deleted after the service checked it, or a unique
        value taken by a concurrent write.

        Raises:
            ReferenceNotFoundError: Foreign key violation on insert/update
            DuplicateKeyError: Unique violation on insert/update
            StoreError: Any other PostgREST or HTTP failure
        """
        try:
            return query.execute()
        except APIError as e:
            if operation in ("insert", "update"):
                constraint_error = self._constraint_error(e)
                if constraint_error is not None:
                    logger.info(
                        "Store rejected %s on %s: %s", operation, self.table, constraint_error.code
                    )
                    raise constraint_error from e
            logger.exception("Store %s on %s failed", operation, self.table)
            raise StoreError(operation, self.table) from e
        except httpx.HTTPError as e:
            logger.exception("Store %s on %s failed", operation, self.table)
            raise StoreError(operation, self.table) from e

    @staticmethod
    def _constraint_error(error: APIError) -> Optional[StayhubError]:
        """Map a foreign key or unique violation to its API error, else None."""
        if error.code not in (FOREIGN_KEY_VIOLATION, UNIQUE_VIOLATION):
            return None

        match = _KEY_DETAIL.search(error.details or "")
        column = match.group("column").strip('"') if match else ""
        value = match.group("value") if match else ""

        if error.code == FOREIGN_KEY_VIOLATION:
            return ReferenceNotFoundError(_REFERENCE_ENTITIES.get(column, "Referenced resource"), value)
        return DuplicateKeyError(column, value)

    def _map_row(self, row: dict[str, Any]) -> T:
        raise NotImplementedError
