"""Tests for modules/users/repository.py."""

import pytest
from unittest.mock import MagicMock

from modules.users.repository import UserRepository


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return UserRepository(mock_db)


class TestListUsers:
    def test_unfiltered(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "7", "username": "jdoe", "email": "jdoe@example.com"}
        ]

        users = repo.list_users()

        assert [u.username for u in users] == ["jdoe"]
        mock_db.table.assert_called_with("users")
        mock_db.table.return_value.select.assert_called_with("id, username, email")

    def test_filters_use_ilike(self, repo, mock_db):
        select = mock_db.table.return_value.select.return_value
        select.ilike.return_value.ilike.return_value.execute.return_value.data = []

        repo.list_users(username="jd", email="example")

        select.ilike.assert_called_once_with("username", "%jd%")
        select.ilike.return_value.ilike.assert_called_once_with("email", "%example%")


class TestGetCredentials:
    def test_returns_hash(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value.execute.return_value.data = [
            {"id": 7, "username": "jdoe", "password": "$argon2id$..."}
        ]

        creds = repo.get_credentials("jdoe")

        assert creds.id == "7"
        assert creds.password_hash == "$argon2id$..."
        mock_db.table.return_value.select.assert_called_with("id, username, password")

    def test_unknown_username(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value.execute.return_value.data = []
        assert repo.get_credentials("ghost") is None


class TestGetById:
    def test_password_never_selected(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value.execute.return_value.data = [
            {"id": 7, "username": "jdoe", "email": "jdoe@example.com", "phoneNumber": "555"}
        ]

        user = repo.get_by_id("7")

        assert user.id == "7"
        assert user.phone_number == "555"
        columns = mock_db.table.return_value.select.call_args.args[0]
        assert "password" not in columns


class TestIsTaken:
    def test_username_taken(self, repo):
        repo.exists_by = MagicMock(return_value=True)
        assert repo.is_taken(username="jdoe", email="x@example.com") is True
        repo.exists_by.assert_called_once_with("username", "jdoe", None)

    def test_email_taken(self, repo):
        repo.exists_by = MagicMock(side_effect=[False, True])
        assert repo.is_taken(username="jdoe", email="x@example.com", exclude_id="7") is True
        repo.exists_by.assert_called_with("email", "x@example.com", "7")

    def test_nothing_to_check(self, repo):
        repo.exists_by = MagicMock()
        assert repo.is_taken() is False
        repo.exists_by.assert_not_called()
