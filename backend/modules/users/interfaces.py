"""
Users module interface.

The API layer and the auth module depend on these protocols, not on the
concrete service and repository.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import (
    User,
    UserCredentials,
    UserListItem,
    CreateUserRequest,
    UpdateUserRequest,
)


@runtime_checkable
class ICredentialStore(Protocol):
    """Read access to stored login data."""

    def get_credentials(self, username: str) -> Optional[UserCredentials]:
        """Return the stored credentials for a username, or None."""
        ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user account operations.
    """

    async def list_users(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> list[UserListItem]:
        """List users, optionally filtered by username/email substring."""
        ...

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def create_user(self, request: CreateUserRequest) -> User:
        """
        Register a new user.

        Raises:
            DuplicateUserError: If the username or email is taken
        """
        ...

    async def update_user(
        self,
        user_id: str,
        request: UpdateUserRequest,
        caller: AuthenticatedUser,
    ) -> User:
        """
        Update the caller's own account.

        Raises:
            ValidationError: If no fields are supplied
            ForbiddenError: If ``user_id`` is not the caller
            UserNotFoundError: If the user doesn't exist
            DuplicateUserError: If the new username or email is taken
        """
        ...

    async def delete_user(self, user_id: str, caller: AuthenticatedUser) -> User:
        """
        Delete the caller's own account.

        Returns:
            The deleted user

        Raises:
            ForbiddenError: If ``user_id`` is not the caller
            UserNotFoundError: If the user doesn't exist
        """
        ...
