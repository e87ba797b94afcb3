"""
Reviews module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Review, CreateReviewRequest, UpdateReviewRequest


@runtime_checkable
class IReviewService(Protocol):
    """Interface for review operations."""

    async def list_reviews(self) -> list[Review]:
        ...

    async def get_review(self, review_id: str) -> Review:
        ...

    async def create_review(self, request: CreateReviewRequest) -> Review:
        """
        Raises:
            ReferenceNotFoundError: If the user or property doesn't exist
        """
        ...

    async def update_review(self, review_id: str, request: UpdateReviewRequest) -> Review:
        ...

    async def delete_review(self, review_id: str) -> Review:
        ...
