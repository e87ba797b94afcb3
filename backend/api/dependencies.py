"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Repositories share one Supabase client; services get their
repositories and configuration through their constructors.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.hosts.interfaces import IHostService
    from modules.hosts.repository import HostRepository
    from modules.properties.interfaces import IPropertyService
    from modules.properties.repository import PropertyRepository
    from modules.amenities.interfaces import IAmenityService
    from modules.bookings.interfaces import IBookingService
    from modules.reviews.interfaces import IReviewService


class ServiceContainer:
    """
    Container for all service instances.

    Services and repositories are created lazily on first access and
    cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._user_repository: "UserRepository | None" = None
        self._host_repository: "HostRepository | None" = None
        self._property_repository: "PropertyRepository | None" = None
        self._services: dict[str, object] = {}

    # -------------------------------------------------------------------------
    # Store
    # -------------------------------------------------------------------------

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def host_repository(self) -> "HostRepository":
        if self._host_repository is None:
            from modules.hosts.repository import HostRepository
            self._host_repository = HostRepository(self.db)
        return self._host_repository

    @property
    def property_repository(self) -> "PropertyRepository":
        if self._property_repository is None:
            from modules.properties.repository import PropertyRepository
            self._property_repository = PropertyRepository(self.db)
        return self._property_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if "auth" not in self._services:
            from modules.auth.service import AuthService
            from shared.config import get_settings

            settings = get_settings()
            self._services["auth"] = AuthService(
                credentials=self.user_repository,
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                token_lifetime=timedelta(hours=settings.jwt_expire_hours),
            )
        return self._services["auth"]

    @property
    def users(self) -> "IUserService":
        if "users" not in self._services:
            from modules.users.service import UserService
            self._services["users"] = UserService(self.user_repository)
        return self._services["users"]

    @property
    def hosts(self) -> "IHostService":
        if "hosts" not in self._services:
            from modules.hosts.service import HostService
            self._services["hosts"] = HostService(self.host_repository)
        return self._services["hosts"]

    @property
    def properties(self) -> "IPropertyService":
        if "properties" not in self._services:
            from modules.properties.service import PropertyService
            self._services["properties"] = PropertyService(
                self.property_repository,
                hosts=self.host_repository,
            )
        return self._services["properties"]

    @property
    def amenities(self) -> "IAmenityService":
        if "amenities" not in self._services:
            from modules.amenities.repository import AmenityRepository
            from modules.amenities.service import AmenityService
            self._services["amenities"] = AmenityService(AmenityRepository(self.db))
        return self._services["amenities"]

    @property
    def bookings(self) -> "IBookingService":
        if "bookings" not in self._services:
            from modules.bookings.repository import BookingRepository
            from modules.bookings.service import BookingService
            self._services["bookings"] = BookingService(
                BookingRepository(self.db),
                users=self.user_repository,
                properties=self.property_repository,
            )
        return self._services["bookings"]

    @property
    def reviews(self) -> "IReviewService":
        if "reviews" not in self._services:
            from modules.reviews.repository import ReviewRepository
            from modules.reviews.service import ReviewService
            self._services["reviews"] = ReviewService(
                ReviewRepository(self.db),
                users=self.user_repository,
                properties=self.property_repository,
            )
        return self._services["reviews"]

    def reset(self) -> None:
        """
        Reset all cached services and repositories.

        This is primarily for testing.
        """
        self._db = None
        self._user_repository = None
        self._host_repository = None
        self._property_repository = None
        self._services.clear()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_host_service() -> "IHostService":
    """FastAPI dependency for host service."""
    return get_container().hosts


def get_property_service() -> "IPropertyService":
    """FastAPI dependency for property service."""
    return get_container().properties


def get_amenity_service() -> "IAmenityService":
    """FastAPI dependency for amenity service."""
    return get_container().amenities


def get_booking_service() -> "IBookingService":
    """FastAPI dependency for booking service."""
    return get_container().bookings


def get_review_service() -> "IReviewService":
    """FastAPI dependency for review service."""
    return get_container().reviews
