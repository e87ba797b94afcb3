"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Repositories are MagicMocks spec'd on the real classes; services are real.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    reset_container,
    get_auth_service,
    get_user_service,
    get_host_service,
    get_property_service,
    get_amenity_service,
    get_booking_service,
    get_review_service,
)
from modules.auth.service import AuthService
from modules.users.repository import UserRepository
from modules.users.service import UserService
from modules.hosts.repository import HostRepository
from modules.hosts.service import HostService
from modules.properties.repository import PropertyRepository
from modules.properties.service import PropertyService
from modules.amenities.repository import AmenityRepository
from modules.amenities.service import AmenityService
from modules.bookings.repository import BookingRepository
from modules.bookings.service import BookingService
from modules.reviews.repository import ReviewRepository
from modules.reviews.service import ReviewService


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "user-7",
    username: str = "jdoe",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test bearer token.

    Args:
        user_id: userId claim
        username: username claim
        expired: If True, creates a token that expired an hour ago
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    issued = now - timedelta(hours=8) if expired else now
    payload = {
        "userId": user_id,
        "username": username,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(hours=7)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def user_repo() -> MagicMock:
    return MagicMock(spec=UserRepository)


@pytest.fixture
def host_repo() -> MagicMock:
    return MagicMock(spec=HostRepository)


@pytest.fixture
def property_repo() -> MagicMock:
    return MagicMock(spec=PropertyRepository)


@pytest.fixture
def amenity_repo() -> MagicMock:
    return MagicMock(spec=AmenityRepository)


@pytest.fixture
def booking_repo() -> MagicMock:
    return MagicMock(spec=BookingRepository)


@pytest.fixture
def review_repo() -> MagicMock:
    return MagicMock(spec=ReviewRepository)


@pytest.fixture
def auth_service(user_repo) -> AuthService:
    return AuthService(credentials=user_repo, secret=TEST_JWT_SECRET)


@pytest.fixture
def app(
    auth_service,
    user_repo,
    host_repo,
    property_repo,
    amenity_repo,
    booking_repo,
    review_repo,
):
    """Create a fresh app wired to mock repositories."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_user_service] = lambda: UserService(user_repo)
    app.dependency_overrides[get_host_service] = lambda: HostService(host_repo)
    app.dependency_overrides[get_property_service] = lambda: PropertyService(
        property_repo, hosts=host_repo
    )
    app.dependency_overrides[get_amenity_service] = lambda: AmenityService(amenity_repo)
    app.dependency_overrides[get_booking_service] = lambda: BookingService(
        booking_repo, users=user_repo, properties=property_repo
    )
    app.dependency_overrides[get_review_service] = lambda: ReviewService(
        review_repo, users=user_repo, properties=property_repo
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "user-7"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def make_token():
    """Expose create_test_token to test modules."""
    return create_test_token


@pytest.fixture
def jwt_secret() -> str:
    return TEST_JWT_SECRET
