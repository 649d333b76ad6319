"""Courses repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.modules.courses.models import Course


class CoursesRepository:
    """DB operations for courses domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_course(self, teacher_id: UUID, **fields) -> Course:
        course = Course(teacher_id=teacher_id, **fields)
        self.session.add(course)
        await self.session.flush()
        await self.session.refresh(course, attribute_names=["teacher"])
        return course

    async def get_course_by_id(self, course_id: UUID) -> Course | None:
        stmt = select(Course).options(selectinload(Course.teacher)).where(Course.id == course_id)
        return await self.session.scalar(stmt)

    async def list_courses(self) -> list[Course]:
        stmt = select(Course).options(selectinload(Course.teacher)).order_by(Course.created_at.desc())
        return list((await self.session.scalars(stmt)).all())
