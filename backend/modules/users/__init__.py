"""
Users module.

Handles guest accounts: registration, lookup, self-service update/delete.

Public API:
- IUserService: Interface for user operations
- ICredentialStore: Read access to stored password hashes (used by auth)
- User, UserListItem, CreateUserRequest, UpdateUserRequest: Models
"""

from .interfaces import IUserService, ICredentialStore
from .models import (
    User,
    UserListItem,
    UserCredentials,
    CreateUserRequest,
    UpdateUserRequest,
)
from .exceptions import UserNotFoundError, DuplicateUserError

__all__ = [
    # Interfaces
    "IUserService",
    "ICredentialStore",
    # Models
    "User",
    "UserListItem",
    "UserCredentials",
    "CreateUserRequest",
    "UpdateUserRequest",
    # Exceptions
    "UserNotFoundError",
    "DuplicateUserError",
]
