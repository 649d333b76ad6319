"""Lessons business logic layer."""

from __future__ import annotations

from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.modules.courses.models import Course
from coursehub.modules.courses.repository import CoursesRepository
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.lessons.models import Homework, Lesson
from coursehub.modules.lessons.repository import LessonsRepository
from coursehub.modules.lessons.schemas import HomeworkCreate, LessonCreate
from coursehub.shared.exceptions import ForbiddenException, NotFoundException
from coursehub.shared.utils import ensure_utc


class LessonsService:
    """Lessons domain service."""

    def __init__(self, repository: LessonsRepository, courses_repository: CoursesRepository) -> None:
        self.repository = repository
        self.courses_repository = courses_repository

    async def _get_owned_course(self, course_id: UUID, principal: Principal) -> Course:
        course = await self.courses_repository.get_course_by_id(course_id)
        if course is None:
            raise NotFoundException("Course not found")
        if course.teacher_id != principal.account_id:
            raise ForbiddenException("Teacher can modify only own courses")
        return course

    async def create_lesson(self, payload: LessonCreate, principal: Principal) -> Lesson:
        """Add lesson to a course owned by the caller."""
        await self._get_owned_course(payload.course_id, principal)
        return await self.repository.create_lesson(**payload.model_dump())

    async def list_lessons(self, course_id: UUID) -> list[Lesson]:
        """List course lessons in display order."""
        return await self.repository.list_lessons_for_course(course_id)

    async def create_homework(self, payload: HomeworkCreate, principal: Principal) -> Homework:
        """Attach homework to a lesson of a course owned by the caller."""
        lesson = await self.repository.get_lesson_by_id(payload.lesson_id)
        if lesson is None:
            raise NotFoundException("Lesson not found")
        await self._get_owned_course(lesson.course_id, principal)

        return await self.repository.create_homework(
            lesson_id=payload.lesson_id,
            title=payload.title,
            description=payload.description,
            due_date=ensure_utc(payload.due_date),
        )

    async def list_homework(self, lesson_id: UUID) -> list[Homework]:
        return await self.repository.list_homework_for_lesson(lesson_id)


async def get_lessons_service(session: AsyncSession = Depends(get_db_session)) -> LessonsService:
    """Dependency provider for lessons service."""
    return LessonsService(LessonsRepository(session), CoursesRepository(session))
