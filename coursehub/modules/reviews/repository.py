"""Course reviews repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.core.database import add_unique
from coursehub.modules.reviews.models import CourseReview


class ReviewsRepository:
    """DB operations for course reviews."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_review(self, user_id: UUID, course_id: UUID, rating: int, comment: str) -> CourseReview:
        review = CourseReview(user_id=user_id, course_id=course_id, rating=rating, comment=comment)
        return await add_unique(self.session, review, "Already reviewed this course")

    async def list_reviews_for_course(self, course_id: UUID) -> list[CourseReview]:
        stmt = (
            select(CourseReview)
            .options(selectinload(CourseReview.user))
            .where(CourseReview.course_id == course_id)
            .order_by(CourseReview.created_at.desc())
        )
        return list((await self.session.scalars(stmt)).all())
