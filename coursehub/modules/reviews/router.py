"""Course reviews API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import get_current_principal
from coursehub.modules.reviews.schemas import ReviewCreate, ReviewRead, ReviewWithAuthorRead
from coursehub.modules.reviews.service import ReviewsService, get_reviews_service

router = APIRouter(prefix="/courses/{course_id}/reviews", tags=["reviews"])


@router.post("", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
async def create_review(
    course_id: UUID,
    payload: ReviewCreate,
    service: ReviewsService = Depends(get_reviews_service),
    principal: Principal = Depends(get_current_principal),
) -> ReviewRead:
    """Review a course."""
    review = await service.create_review(course_id, payload, principal)
    return ReviewRead.model_validate(review)


@router.get("", response_model=list[ReviewWithAuthorRead])
async def list_reviews(
    course_id: UUID,
    service: ReviewsService = Depends(get_reviews_service),
) -> list[ReviewWithAuthorRead]:
    """List reviews of a course with reviewer names."""
    reviews = await service.list_reviews(course_id)
    return [ReviewWithAuthorRead.model_validate(item) for item in reviews]
