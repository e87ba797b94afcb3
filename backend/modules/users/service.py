"""
Users service implementation.
"""

import logging
from typing import Optional

from modules.auth.passwords import hash_password
from shared.exceptions import DuplicateKeyError
from shared.guard import ResourceGuard
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import User, UserListItem, CreateUserRequest, UpdateUserRequest
from .repository import UserRepository
from .exceptions import UserNotFoundError, DuplicateUserError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("username", "email", "password", "name", "phoneNumber", "profilePicture")


class UserService(IUserService):
    """
    User account service.

    Accounts are self-scoped: only the owner may update or delete one.
    """

    def __init__(self, repository: UserRepository):
        self._repo = repository
        self._guard = ResourceGuard()

    async def list_users(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> list[UserListItem]:
        return self._repo.list_users(username=username, email=email)

    async def get_user(self, user_id: str) -> User:
        user = self._repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def create_user(self, request: CreateUserRequest) -> User:
        if self._repo.is_taken(username=request.username, email=request.email):
            raise DuplicateUserError(request.username, request.email)

        data = request.model_dump(mode="json", by_alias=True)
        data["password"] = hash_password(request.password)

        try:
            user = self._repo.create(data)
        except DuplicateKeyError as e:
            raise DuplicateUserError(request.username, request.email) from e
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    async def update_user(
        self,
        user_id: str,
        request: UpdateUserRequest,
        caller: AuthenticatedUser,
    ) -> User:
        changes = request.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )
        self._guard.require_changes(changes, UPDATABLE_FIELDS)
        self._guard.ensure_owner(caller, user_id, "update")

        if not self._repo.exists(user_id):
            raise UserNotFoundError(user_id)

        if self._repo.is_taken(
            username=changes.get("username"),
            email=changes.get("email"),
            exclude_id=user_id,
        ):
            raise DuplicateUserError(changes.get("username"), changes.get("email"))

        if "password" in changes:
            changes["password"] = hash_password(changes["password"])

        try:
            updated = self._repo.update(user_id, changes)
        except DuplicateKeyError as e:
            raise DuplicateUserError(changes.get("username"), changes.get("email")) from e
        if updated is None:
            # Deleted between the existence check and the update
            raise UserNotFoundError(user_id)

        logger.info("Updated user %s fields=%s", user_id, sorted(changes))
        return updated

    async def delete_user(self, user_id: str, caller: AuthenticatedUser) -> User:
        self._guard.ensure_owner(caller, user_id, "delete")

        deleted = self._repo.delete(user_id)
        if deleted is None:
            raise UserNotFoundError(user_id)

        logger.info("Deleted user %s", user_id)
        return deleted
