"""
Host API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_host_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IHostService
from .models import Host, CreateHostRequest, UpdateHostRequest

router = APIRouter()


@router.get("", response_model=list[Host])
async def list_hosts(
    name: Optional[str] = Query(default=None, description="Name contains (case-insensitive)"),
    service: IHostService = Depends(get_host_service),
) -> list[Host]:
    return await service.list_hosts(name=name)


@router.get("/{host_id}", response_model=Host)
async def get_host(
    host_id: str,
    service: IHostService = Depends(get_host_service),
) -> Host:
    return await service.get_host(host_id)


@router.post("", response_model=Host, status_code=201)
async def create_host(
    request: CreateHostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IHostService = Depends(get_host_service),
) -> Host:
    return await service.create_host(request)


@router.put("/{host_id}", response_model=Host)
async def update_host(
    host_id: str,
    request: UpdateHostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IHostService = Depends(get_host_service),
) -> Host:
    return await service.update_host(host_id, request)


@router.delete("/{host_id}", response_model=MessageResponse)
async def delete_host(
    host_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IHostService = Depends(get_host_service),
) -> MessageResponse:
    deleted = await service.delete_host(host_id)
    return MessageResponse(message=f"Host {deleted.username} deleted successfully")
