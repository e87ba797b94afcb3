"""
Amenities service implementation.
"""

import logging

from shared.exceptions import DuplicateKeyError
from shared.guard import ResourceGuard

from .interfaces import IAmenityService
from .models import Amenity, CreateAmenityRequest, UpdateAmenityRequest
from .repository import AmenityRepository
from .exceptions import AmenityNotFoundError, DuplicateAmenityError

logger = logging.getLogger(__name__)


class AmenityService(IAmenityService):
    """Amenity CRUD. Names are unique."""

    def __init__(self, repository: AmenityRepository):
        self._repo = repository
        self._guard = ResourceGuard()

    async def list_amenities(self) -> list[Amenity]:
        return self._repo.list_amenities()

    async def get_amenity(self, amenity_id: str) -> Amenity:
        amenity = self._repo.get_by_id(amenity_id)
        if amenity is None:
            raise AmenityNotFoundError(amenity_id)
        return amenity

    async def create_amenity(self, request: CreateAmenityRequest) -> Amenity:
        if self._repo.exists_by("name", request.name):
            raise DuplicateAmenityError(request.name)

        try:
            amenity = self._repo.create(request.model_dump(mode="json", by_alias=True))
        except DuplicateKeyError as e:
            raise DuplicateAmenityError(request.name) from e
        logger.info("Created amenity %s (%s)", amenity.id, amenity.name)
        return amenity

    async def update_amenity(self, amenity_id: str, request: UpdateAmenityRequest) -> Amenity:
        changes = request.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )
        self._guard.require_changes(changes, ("name", "description"))

        if not self._repo.exists(amenity_id):
            raise AmenityNotFoundError(amenity_id)

        if "name" in changes and self._repo.exists_by("name", changes["name"], exclude_id=amenity_id):
            raise DuplicateAmenityError(changes["name"])

        try:
            updated = self._repo.update(amenity_id, changes)
        except DuplicateKeyError as e:
            raise DuplicateAmenityError(changes.get("name", "")) from e
        if updated is None:
            raise AmenityNotFoundError(amenity_id)

        logger.info("Updated amenity %s fields=%s", amenity_id, sorted(changes))
        return updated

    async def delete_amenity(self, amenity_id: str) -> Amenity:
        deleted = self._repo.delete(amenity_id)
        if deleted is None:
            raise AmenityNotFoundError(amenity_id)

        logger.info("Deleted amenity %s", amenity_id)
        return deleted
