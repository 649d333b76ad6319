"""Enrollments repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.core.database import add_unique
from coursehub.modules.enrollments.models import Enrollment


class EnrollmentsRepository:
    """DB operations for enrollments domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_enrollment(self, user_id: UUID, course_id: UUID) -> Enrollment:
        enrollment = Enrollment(user_id=user_id, course_id=course_id)
        return await add_unique(self.session, enrollment, "Already enrolled in this course")

    async def list_enrollments_for_user(self, user_id: UUID) -> list[Enrollment]:
        stmt = (
            select(Enrollment)
            .options(selectinload(Enrollment.course))
            .where(Enrollment.user_id == user_id)
            .order_by(Enrollment.enrolled_at.desc())
        )
        return list((await self.session.scalars(stmt)).all())
