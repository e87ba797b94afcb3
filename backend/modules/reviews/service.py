"""
Reviews service implementation.
"""

import logging

from shared.guard import IExistenceLookup, ResourceGuard

from .interfaces import IReviewService
from .models import Review, CreateReviewRequest, UpdateReviewRequest
from .repository import ReviewRepository
from .exceptions import ReviewNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("rating", "comment", "userId", "propertyId")


class ReviewService(IReviewService):
    """Review CRUD with user and property existence checks."""

    def __init__(
        self,
        repository: ReviewRepository,
        users: IExistenceLookup,
        properties: IExistenceLookup,
    ):
        self._repo = repository
        self._guard = ResourceGuard(users=users, properties=properties)

    async def list_reviews(self) -> list[Review]:
        return self._repo.list_reviews()

    async def get_review(self, review_id: str) -> Review:
        review = self._repo.get_by_id(review_id)
        if review is None:
            raise ReviewNotFoundError(review_id)
        return review

    async def create_review(self, request: CreateReviewRequest) -> Review:
        data = request.model_dump(mode="json", by_alias=True)
        self._guard.ensure_references(data)

        review = self._repo.create(data)
        logger.info("Created review %s for property %s", review.id, review.property_id)
        return review

    async def update_review(self, review_id: str, request: UpdateReviewRequest) -> Review:
        changes = request.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )
        self._guard.require_changes(changes, UPDATABLE_FIELDS)

        if not self._repo.exists(review_id):
            raise ReviewNotFoundError(review_id)

        self._guard.ensure_references(changes)

        updated = self._repo.update(review_id, changes)
        if updated is None:
            raise ReviewNotFoundError(review_id)

        logger.info("Updated review %s fields=%s", review_id, sorted(changes))
        return updated

    async def delete_review(self, review_id: str) -> Review:
        deleted = self._repo.delete(review_id)
        if deleted is None:
            raise ReviewNotFoundError(review_id)

        logger.info("Deleted review %s", review_id)
        return deleted
