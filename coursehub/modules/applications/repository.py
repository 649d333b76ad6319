"""Course applications repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.core.database import add_unique
from coursehub.modules.applications.models import CourseApplication


class ApplicationsRepository:
    """DB operations for course applications."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_application(self, user_id: UUID, course_id: UUID, message: str) -> CourseApplication:
        application = CourseApplication(user_id=user_id, course_id=course_id, message=message)
        return await add_unique(self.session, application, "Already applied to this course")

    async def list_applications(self) -> list[CourseApplication]:
        stmt = (
            select(CourseApplication)
            .options(selectinload(CourseApplication.user), selectinload(CourseApplication.course))
            .order_by(CourseApplication.created_at.desc())
        )
        return list((await self.session.scalars(stmt)).all())
