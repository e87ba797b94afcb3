"""
Hosts service implementation.
"""

import logging
from typing import Optional

from shared.exceptions import DuplicateKeyError
from shared.guard import ResourceGuard

from .interfaces import IHostService
from .models import Host, CreateHostRequest, UpdateHostRequest
from .repository import HostRepository
from .exceptions import HostNotFoundError, DuplicateHostError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("username", "email", "name", "phoneNumber", "profilePicture", "aboutMe")


class HostService(IHostService):
    """Host CRUD with uniqueness checks on username and email."""

    def __init__(self, repository: HostRepository):
        self._repo = repository
        self._guard = ResourceGuard()

    async def list_hosts(self, name: Optional[str] = None) -> list[Host]:
        return self._repo.list_hosts(name=name)

    async def get_host(self, host_id: str) -> Host:
        host = self._repo.get_by_id(host_id)
        if host is None:
            raise HostNotFoundError(host_id)
        return host

    async def create_host(self, request: CreateHostRequest) -> Host:
        if self._repo.is_taken(username=request.username, email=request.email):
            raise DuplicateHostError(request.username, request.email)

        try:
            host = self._repo.create(request.model_dump(mode="json", by_alias=True))
        except DuplicateKeyError as e:
            raise DuplicateHostError(request.username, request.email) from e
        logger.info("Created host %s (%s)", host.id, host.username)
        return host

    async def update_host(self, host_id: str, request: UpdateHostRequest) -> Host:
        changes = request.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )
        self._guard.require_changes(changes, UPDATABLE_FIELDS)

        if not self._repo.exists(host_id):
            raise HostNotFoundError(host_id)

        if self._repo.is_taken(
            username=changes.get("username"),
            email=changes.get("email"),
            exclude_id=host_id,
        ):
            raise DuplicateHostError(changes.get("username"), changes.get("email"))

        try:
            updated = self._repo.update(host_id, changes)
        except DuplicateKeyError as e:
            raise DuplicateHostError(changes.get("username"), changes.get("email")) from e
        if updated is None:
            raise HostNotFoundError(host_id)

        logger.info("Updated host %s fields=%s", host_id, sorted(changes))
        return updated

    async def delete_host(self, host_id: str) -> Host:
        deleted = self._repo.delete(host_id)
        if deleted is None:
            raise HostNotFoundError(host_id)

        logger.info("Deleted host %s", host_id)
        return deleted
