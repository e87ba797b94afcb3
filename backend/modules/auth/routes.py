"""
Login endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import LoginRequest, LoginResponse

router = APIRouter()


@router.post("", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Exchange a username and password for a bearer token.

    The token is valid for 7 hours. Unknown usernames and wrong passwords
    both return 401 "Invalid credentials".
    """
    return await service.login(request.username, request.password)
