"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    StayhubError,
    NotFoundError,
    ReferenceNotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ForbiddenError,
    StoreError,
)


class TestStayhubError:
    def test_message_and_str(self):
        error = StayhubError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code_is_class_name(self):
        assert StayhubError("Test error").code == "StayhubError"

    def test_custom_code_and_details(self):
        error = StayhubError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_default_details(self):
        assert StayhubError("Test error").details == {}

    def test_to_dict(self):
        error = StayhubError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }

    def test_default_status_code(self):
        assert StayhubError.status_code == 500


class TestStatusCodes:
    @pytest.mark.parametrize("cls,status", [
        (NotFoundError, 404),
        (ValidationError, 400),
        (AuthenticationError, 401),
        (AuthorizationError, 403),
    ])
    def test_status_code(self, cls, status):
        error = cls("boom")
        assert error.status_code == status
        assert isinstance(error, StayhubError)


class TestReferenceNotFoundError:
    def test_message_names_entity(self):
        error = ReferenceNotFoundError("User", "u-1")
        assert error.message == "User not found"
        assert error.status_code == 404
        assert error.code == "REFERENCE_NOT_FOUND"
        assert error.details == {"entity": "User", "id": "u-1"}
        assert error.entity == "User"


class TestForbiddenError:
    def test_forbidden_error(self):
        error = ForbiddenError("You can only update your own account", user_id="7", resource_id="42")
        assert isinstance(error, AuthorizationError)
        assert error.status_code == 403
        assert error.code == "FORBIDDEN"
        assert error.details == {"user_id": "7", "resource_id": "42"}


class TestStoreError:
    def test_message_is_generic(self):
        error = StoreError("insert", "users")
        assert error.message == "Server error"
        assert error.status_code == 500
        assert error.code == "STORE_ERROR"
        assert error.details == {"operation": "insert", "table": "users"}
