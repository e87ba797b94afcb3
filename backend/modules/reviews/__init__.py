"""
Reviews module.
"""

from .interfaces import IReviewService
from .models import Review, CreateReviewRequest, UpdateReviewRequest
from .exceptions import ReviewNotFoundError

__all__ = [
    "IReviewService",
    "Review",
    "CreateReviewRequest",
    "UpdateReviewRequest",
    "ReviewNotFoundError",
]
