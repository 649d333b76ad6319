"""Course applications business logic layer."""

from __future__ import annotations

from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.modules.applications.models import CourseApplication
from coursehub.modules.applications.repository import ApplicationsRepository
from coursehub.modules.applications.schemas import ApplicationCreate
from coursehub.modules.courses.repository import CoursesRepository
from coursehub.modules.identity.schemas import Principal
from coursehub.shared.exceptions import NotFoundException


class ApplicationsService:
    """Course applications domain service."""

    def __init__(self, repository: ApplicationsRepository, courses_repository: CoursesRepository) -> None:
        self.repository = repository
        self.courses_repository = courses_repository

    async def apply(self, course_id: UUID, payload: ApplicationCreate, principal: Principal) -> CourseApplication:
        """Submit an application to a course."""
        if await self.courses_repository.get_course_by_id(course_id) is None:
            raise NotFoundException("Course not found")
        return await self.repository.create_application(principal.account_id, course_id, payload.message)

    async def list_applications(self) -> list[CourseApplication]:
        return await self.repository.list_applications()


async def get_applications_service(session: AsyncSession = Depends(get_db_session)) -> ApplicationsService:
    """Dependency provider for applications service."""
    return ApplicationsService(ApplicationsRepository(session), CoursesRepository(session))
