"""Courses business logic layer."""

from __future__ import annotations

from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.modules.courses.models import Course
from coursehub.modules.courses.repository import CoursesRepository
from coursehub.modules.courses.schemas import CourseCreate
from coursehub.modules.identity.schemas import Principal
from coursehub.shared.exceptions import NotFoundException


class CoursesService:
    """Courses domain service."""

    def __init__(self, repository: CoursesRepository) -> None:
        self.repository = repository

    async def create_course(self, payload: CourseCreate, principal: Principal) -> Course:
        """Create course owned by the calling teacher."""
        return await self.repository.create_course(principal.account_id, **payload.model_dump())

    async def get_course(self, course_id: UUID) -> Course:
        course = await self.repository.get_course_by_id(course_id)
        if course is None:
            raise NotFoundException("Course not found")
        return course

    async def list_courses(self) -> list[Course]:
        return await self.repository.list_courses()


async def get_courses_service(session: AsyncSession = Depends(get_db_session)) -> CoursesService:
    """Dependency provider for courses service."""
    return CoursesService(CoursesRepository(session))
