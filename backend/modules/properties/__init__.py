"""
Properties module.

Handles rental listings and their host references.
"""

from .interfaces import IPropertyService
from .models import (
    Property,
    PropertyFilters,
    CreatePropertyRequest,
    UpdatePropertyRequest,
)
from .exceptions import PropertyNotFoundError

__all__ = [
    "IPropertyService",
    "Property",
    "PropertyFilters",
    "CreatePropertyRequest",
    "UpdatePropertyRequest",
    "PropertyNotFoundError",
]
