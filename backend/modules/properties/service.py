"""
Properties service implementation.
"""

import logging

from shared.guard import IExistenceLookup, ResourceGuard

from .interfaces import IPropertyService
from .models import Property, PropertyFilters, CreatePropertyRequest, UpdatePropertyRequest
from .repository import PropertyRepository
from .exceptions import PropertyNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title",
    "description",
    "location",
    "pricePerNight",
    "bedroomCount",
    "bathroomCount",
    "maxGuestCount",
    "rating",
    "hostId",
)


class PropertyService(IPropertyService):
    """
    Property CRUD.

    The host named by ``hostId`` is checked before every create and before
    any update that changes it.
    """

    def __init__(self, repository: PropertyRepository, hosts: IExistenceLookup):
        self._repo = repository
        self._guard = ResourceGuard(hosts=hosts)

    async def list_properties(self, filters: PropertyFilters) -> list[Property]:
        return self._repo.list_properties(filters)

    async def get_property(self, property_id: str) -> Property:
        prop = self._repo.get_by_id(property_id)
        if prop is None:
            raise PropertyNotFoundError(property_id)
        return prop

    async def create_property(self, request: CreatePropertyRequest) -> Property:
        data = request.model_dump(mode="json", by_alias=True)
        self._guard.ensure_references(data)

        prop = self._repo.create(data)
        logger.info("Created property %s for host %s", prop.id, prop.host_id)
        return prop

    async def update_property(self, property_id: str, request: UpdatePropertyRequest) -> Property:
        changes = request.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )
        self._guard.require_changes(changes, UPDATABLE_FIELDS)

        if not self._repo.exists(property_id):
            raise PropertyNotFoundError(property_id)

        self._guard.ensure_references(changes)

        updated = self._repo.update(property_id, changes)
        if updated is None:
            raise PropertyNotFoundError(property_id)

        logger.info("Updated property %s fields=%s", property_id, sorted(changes))
        return updated

    async def delete_property(self, property_id: str) -> Property:
        deleted = self._repo.delete(property_id)
        if deleted is None:
            raise PropertyNotFoundError(property_id)

        logger.info("Deleted property %s", property_id)
        return deleted
