"""
Amenities module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class AmenityNotFoundError(NotFoundError):
    """Raised when an amenity is not found."""

    def __init__(self, amenity_id: str):
        super().__init__(
            "Amenity not found",
            code="AMENITY_NOT_FOUND",
            details={"amenity_id": amenity_id},
        )


class DuplicateAmenityError(ValidationError):
    """Raised when an amenity name already exists."""

    def __init__(self, name: str):
        super().__init__(
            f"Amenity {name} already exists",
            code="DUPLICATE_AMENITY",
            details={"name": name},
        )
