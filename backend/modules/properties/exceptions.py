"""
Properties module exceptions.
"""

from shared.exceptions import NotFoundError


class PropertyNotFoundError(NotFoundError):
    """Raised when a property is not found."""

    def __init__(self, property_id: str):
        super().__init__(
            "Property not found",
            code="PROPERTY_NOT_FOUND",
            details={"property_id": property_id},
        )
