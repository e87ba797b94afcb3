"""
Resource guard.

Every mutating service runs its checks through here before touching the
store, in a fixed order:

1. the payload carries at least one effective field (partial updates);
2. every foreign key present in the payload resolves to an existing row;
3. self-scoped resources are only mutated by their owner.

Checks are sequential and not transactional. A row deleted between the
check and the mutation surfaces as the repository returning None, which
services map back to a not-found error.
"""

from typing import Any, Iterable, Optional, Protocol

from .exceptions import ForbiddenError, ReferenceNotFoundError, ValidationError
from .models import AuthenticatedUser


class IExistenceLookup(Protocol):
    """Anything that can tell whether a row with an ID exists."""

    def exists(self, entity_id: str) -> bool:
        ...


# Payload field -> entity name used in error messages, in check order
REFERENCE_FIELDS: tuple[tuple[str, str], ...] = (
    ("userId", "User"),
    ("propertyId", "Property"),
    ("hostId", "Host"),
)


class ResourceGuard:
    """
    Existence and ownership checks run before a mutation.

    Each service builds a guard with the lookups for the references it
    accepts; a payload naming a reference without a lookup is a wiring bug.
    """

    def __init__(
        self,
        users: Optional[IExistenceLookup] = None,
        properties: Optional[IExistenceLookup] = None,
        hosts: Optional[IExistenceLookup] = None,
    ) -> None:
        self._lookups: dict[str, Optional[IExistenceLookup]] = {
            "userId": users,
            "propertyId": properties,
            "hostId": hosts,
        }

    @staticmethod
    def require_changes(changes: dict[str, Any], fields: Iterable[str]) -> dict[str, Any]:
        """
        Reject a partial update with no effective fields.

        Raises:
            ValidationError: If ``changes`` is empty
        """
        if not changes:
            raise ValidationError(
                f"At least one field ({', '.join(fields)}) is required",
                code="NO_FIELDS",
            )
        return changes

    def ensure_references(self, payload: dict[str, Any]) -> None:
        """
        Verify that each foreign key in the payload points at an existing row.

        Lookups run one at a time in REFERENCE_FIELDS order.

        Raises:
            ReferenceNotFoundError: Naming the first missing entity
        """
        for field, entity in REFERENCE_FIELDS:
            if field not in payload:
                continue
            lookup = self._lookups[field]
            if lookup is None:
                raise RuntimeError(f"No existence lookup configured for {field}")
            if not lookup.exists(payload[field]):
                raise ReferenceNotFoundError(entity, payload[field])

    @staticmethod
    def ensure_owner(user: AuthenticatedUser, resource_id: str, action: str) -> None:
        """
        Only let a caller mutate their own account.

        Raises:
            ForbiddenError: If the caller is not the resource owner
        """
        if user.id != resource_id:
            raise ForbiddenError(
                f"You can only {action} your own account",
                user_id=user.id,
                resource_id=resource_id,
            )
