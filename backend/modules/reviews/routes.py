"""
Review API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_review_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IReviewService
from .models import Review, CreateReviewRequest, UpdateReviewRequest

router = APIRouter()


@router.get("", response_model=list[Review])
async def list_reviews(
    service: IReviewService = Depends(get_review_service),
) -> list[Review]:
    return await service.list_reviews()


@router.get("/{review_id}", response_model=Review)
async def get_review(
    review_id: str,
    service: IReviewService = Depends(get_review_service),
) -> Review:
    return await service.get_review(review_id)


@router.post("", response_model=Review, status_code=201)
async def create_review(
    request: CreateReviewRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReviewService = Depends(get_review_service),
) -> Review:
    return await service.create_review(request)


@router.put("/{review_id}", response_model=Review)
async def update_review(
    review_id: str,
    request: UpdateReviewRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReviewService = Depends(get_review_service),
) -> Review:
    return await service.update_review(review_id, request)


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReviewService = Depends(get_review_service),
) -> MessageResponse:
    deleted = await service.delete_review(review_id)
    return MessageResponse(message=f"Review with ID {deleted.id} deleted successfully")
