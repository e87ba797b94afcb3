"""
Hosts module.

Handles the people who list properties.
"""

from .interfaces import IHostService
from .models import Host, CreateHostRequest, UpdateHostRequest
from .exceptions import HostNotFoundError, DuplicateHostError

__all__ = [
    "IHostService",
    "Host",
    "CreateHostRequest",
    "UpdateHostRequest",
    "HostNotFoundError",
    "DuplicateHostError",
]
