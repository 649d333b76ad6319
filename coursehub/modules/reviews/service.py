"""Course reviews business logic layer."""

from __future__ import annotations

from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.modules.courses.repository import CoursesRepository
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.reviews.models import CourseReview
from coursehub.modules.reviews.repository import ReviewsRepository
from coursehub.modules.reviews.schemas import ReviewCreate
from coursehub.shared.exceptions import NotFoundException


class ReviewsService:
    """Course reviews domain service."""

    def __init__(self, repository: ReviewsRepository, courses_repository: CoursesRepository) -> None:
        self.repository = repository
        self.courses_repository = courses_repository

    async def create_review(self, course_id: UUID, payload: ReviewCreate, principal: Principal) -> CourseReview:
        """Leave a review; a second review of the same course is a conflict."""
        if await self.courses_repository.get_course_by_id(course_id) is None:
            raise NotFoundException("Course not found")
        return await self.repository.create_review(
            user_id=principal.account_id,
            course_id=course_id,
            rating=payload.rating,
            comment=payload.comment,
        )

    async def list_reviews(self, course_id: UUID) -> list[CourseReview]:
        return await self.repository.list_reviews_for_course(course_id)


async def get_reviews_service(session: AsyncSession = Depends(get_db_session)) -> ReviewsService:
    """Dependency provider for reviews service."""
    return ReviewsService(ReviewsRepository(session), CoursesRepository(session))
