"""
Reviews module exceptions.
"""

from shared.exceptions import NotFoundError


class ReviewNotFoundError(NotFoundError):
    """Raised when a review is not found."""

    def __init__(self, review_id: str):
        super().__init__(
            "Review not found",
            code="REVIEW_NOT_FOUND",
            details={"review_id": review_id},
        )
