"""
Shared infrastructure for Stayhub backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base data store adapter
- guard: Existence and ownership checks before mutations

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    StayhubError,
    NotFoundError,
    ReferenceNotFoundError,
    ValidationError,
    DuplicateKeyError,
    AuthenticationError,
    AuthorizationError,
    ForbiddenError,
    StoreError,
)
from .guard import ResourceGuard
from .logging import configure_logging
from .models import AuthenticatedUser, CamelModel, MessageResponse

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "StayhubError",
    "NotFoundError",
    "ReferenceNotFoundError",
    "ValidationError",
    "DuplicateKeyError",
    "AuthenticationError",
    "AuthorizationError",
    "ForbiddenError",
    "StoreError",
    "ResourceGuard",
    "configure_logging",
    "AuthenticatedUser",
    "CamelModel",
    "MessageResponse",
]
