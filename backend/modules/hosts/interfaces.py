"""
Hosts module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Host, CreateHostRequest, UpdateHostRequest


@runtime_checkable
class IHostService(Protocol):
    """Interface for host operations."""

    async def list_hosts(self, name: Optional[str] = None) -> list[Host]:
        ...

    async def get_host(self, host_id: str) -> Host:
        """
        Raises:
            HostNotFoundError: If the host doesn't exist
        """
        ...

    async def create_host(self, request: CreateHostRequest) -> Host:
        """
        Raises:
            DuplicateHostError: If the username or email is taken
        """
        ...

    async def update_host(self, host_id: str, request: UpdateHostRequest) -> Host:
        """
        Raises:
            ValidationError: If no fields are supplied
            HostNotFoundError: If the host doesn't exist
            DuplicateHostError: If the new username or email is taken
        """
        ...

    async def delete_host(self, host_id: str) -> Host:
        """
        Raises:
            HostNotFoundError: If the host doesn't exist
        """
        ...
