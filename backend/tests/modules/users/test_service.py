import pytest
from unittest.mock import MagicMock

from modules.auth.passwords import verify_password
from modules.users.models import User, CreateUserRequest, UpdateUserRequest
from modules.users.repository import UserRepository
from modules.users.service import UserService
from modules.users.exceptions import UserNotFoundError, DuplicateUserError
from shared.exceptions import DuplicateKeyError, ForbiddenError, ValidationError
from shared.models import AuthenticatedUser


def make_user(**overrides) -> User:
    data = {"id": "7", "username": "jdoe", "email": "jdoe@example.com", "name": "John Doe"}
    data.update(overrides)
    return User(**data)


@pytest.fixture
def repo():
    return MagicMock(spec=UserRepository)


@pytest.fixture
def service(repo):
    return UserService(repo)


@pytest.fixture
def caller():
    return AuthenticatedUser(id="7", username="jdoe")


class TestGetUser:
    @pytest.mark.asyncio
    async def test_found(self, service, repo):
        repo.get_by_id.return_value = make_user()
        user = await service.get_user("7")
        assert user.username == "jdoe"

    @pytest.mark.asyncio
    async def test_not_found(self, service, repo):
        repo.get_by_id.return_value = None
        with pytest.raises(UserNotFoundError, match="User not found"):
            await service.get_user("404")


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_password_is_hashed(self, service, repo):
        repo.is_taken.return_value = False
        repo.create.return_value = make_user()

        await service.create_user(CreateUserRequest(
            username="jdoe", email="jdoe@example.com", password="secret", name="John Doe",
        ))

        stored = repo.create.call_args.args[0]
        assert stored["password"] != "secret"
        assert verify_password("secret", stored["password"])
        assert stored["phoneNumber"] is None

    @pytest.mark.asyncio
    async def test_duplicate_rejected(self, service, repo):
        repo.is_taken.return_value = True

        with pytest.raises(DuplicateUserError) as exc_info:
            await service.create_user(CreateUserRequest(
                username="jdoe", email="jdoe@example.com", password="secret", name="John Doe",
            ))

        assert exc_info.value.status_code == 400
        repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_unique_violation_on_insert(self, service, repo):
        repo.is_taken.return_value = False
        repo.create.side_effect = DuplicateKeyError("email", "jdoe@example.com")

        with pytest.raises(DuplicateUserError) as exc_info:
            await service.create_user(CreateUserRequest(
                username="jdoe", email="jdoe@example.com", password="secret", name="John Doe",
            ))

        assert exc_info.value.message == "Username or email already taken"


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_updates_only_present_fields(self, service, repo, caller):
        repo.exists.return_value = True
        repo.is_taken.return_value = False
        repo.update.return_value = make_user(name="Johnny")

        user = await service.update_user("7", UpdateUserRequest(name="Johnny"), caller)

        assert user.name == "Johnny"
        repo.update.assert_called_once_with("7", {"name": "Johnny"})

    @pytest.mark.asyncio
    async def test_empty_string_is_a_change(self, service, repo, caller):
        repo.exists.return_value = True
        repo.is_taken.return_value = False
        repo.update.return_value = make_user(phoneNumber="")

        await service.update_user("7", UpdateUserRequest(phone_number=""), caller)

        repo.update.assert_called_once_with("7", {"phoneNumber": ""})

    @pytest.mark.asyncio
    async def test_new_password_is_hashed(self, service, repo, caller):
        repo.exists.return_value = True
        repo.is_taken.return_value = False
        repo.update.return_value = make_user()

        await service.update_user("7", UpdateUserRequest(password="n3w"), caller)

        changes = repo.update.call_args.args[1]
        assert verify_password("n3w", changes["password"])

    @pytest.mark.asyncio
    async def test_no_fields(self, service, repo, caller):
        with pytest.raises(ValidationError, match="At least one field"):
            await service.update_user("7", UpdateUserRequest(), caller)
        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_other_account_forbidden(self, service, repo, caller):
        with pytest.raises(ForbiddenError, match="You can only update your own account"):
            await service.update_user("42", UpdateUserRequest(name="x"), caller)
        repo.exists.assert_not_called()
        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_user(self, service, repo, caller):
        repo.exists.return_value = False
        with pytest.raises(UserNotFoundError):
            await service.update_user("7", UpdateUserRequest(name="x"), caller)

    @pytest.mark.asyncio
    async def test_taken_username(self, service, repo, caller):
        repo.exists.return_value = True
        repo.is_taken.return_value = True

        with pytest.raises(DuplicateUserError):
            await service.update_user("7", UpdateUserRequest(username="taken"), caller)

        repo.is_taken.assert_called_once_with(username="taken", email=None, exclude_id="7")
        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_deleted_concurrently(self, service, repo, caller):
        repo.exists.return_value = True
        repo.is_taken.return_value = False
        repo.update.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.update_user("7", UpdateUserRequest(name="x"), caller)


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete_own_account(self, service, repo, caller):
        repo.delete.return_value = make_user()
        deleted = await service.delete_user("7", caller)
        assert deleted.username == "jdoe"

    @pytest.mark.asyncio
    async def test_delete_other_account(self, service, repo, caller):
        with pytest.raises(ForbiddenError, match="You can only delete your own account"):
            await service.delete_user("42", caller)
        repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_missing(self, service, repo, caller):
        repo.delete.return_value = None
        with pytest.raises(UserNotFoundError):
            await service.delete_user("7", caller)
