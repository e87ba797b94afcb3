"""
User API endpoints.

Listing and lookup are public. Creating requires a bearer token;
updating and deleting are limited to the caller's own account.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IUserService
from .models import User, UserListItem, CreateUserRequest, UpdateUserRequest

router = APIRouter()


@router.get("", response_model=list[UserListItem])
async def list_users(
    username: Optional[str] = Query(default=None, description="Username contains (case-insensitive)"),
    email: Optional[str] = Query(default=None, description="Email contains (case-insensitive)"),
    service: IUserService = Depends(get_user_service),
) -> list[UserListItem]:
    """List users, optionally filtered by username or email."""
    return await service.list_users(username=username, email=email)


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: str,
    service: IUserService = Depends(get_user_service),
) -> User:
    return await service.get_user(user_id)


@router.post("", response_model=User, status_code=201)
async def create_user(
    request: CreateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Register a new user.

    The password is stored as an Argon2 hash and never returned.
    """
    return await service.create_user(request)


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Update the caller's own account.

    Only fields present in the body are changed.
    """
    return await service.update_user(user_id, request, user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete the caller's own account."""
    deleted = await service.delete_user(user_id, user)
    return MessageResponse(message=f"User {deleted.username} deleted successfully")
