"""Lessons repository layer."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.modules.lessons.models import Homework, Lesson


class LessonsRepository:
    """DB operations for lessons and their homework."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_lesson(
        self,
        course_id: UUID,
        title: str,
        content: str,
        video_url: str | None,
        duration_minutes: int,
        order: int,
    ) -> Lesson:
        lesson = Lesson(
            course_id=course_id,
            title=title,
            content=content,
            video_url=video_url,
            duration_minutes=duration_minutes,
            order=order,
        )
        self.session.add(lesson)
        await self.session.flush()
        return lesson

    async def get_lesson_by_id(self, lesson_id: UUID) -> Lesson | None:
        return await self.session.get(Lesson, lesson_id)

    async def list_lessons_for_course(self, course_id: UUID) -> list[Lesson]:
        stmt = select(Lesson).where(Lesson.course_id == course_id).order_by(Lesson.order.asc())
        return list((await self.session.scalars(stmt)).all())

    async def create_homework(
        self,
        lesson_id: UUID,
        title: str,
        description: str,
        due_date: datetime,
    ) -> Homework:
        homework = Homework(lesson_id=lesson_id, title=title, description=description, due_date=due_date)
        self.session.add(homework)
        await self.session.flush()
        return homework

    async def list_homework_for_lesson(self, lesson_id: UUID) -> list[Homework]:
        stmt = select(Homework).where(Homework.lesson_id == lesson_id).order_by(Homework.due_date.asc())
        return list((await self.session.scalars(stmt)).all())
