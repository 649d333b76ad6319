"""Enrollments business logic layer."""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.modules.courses.repository import CoursesRepository
from coursehub.modules.enrollments.models import Enrollment
from coursehub.modules.enrollments.repository import EnrollmentsRepository
from coursehub.modules.enrollments.schemas import EnrollmentCreate
from coursehub.modules.identity.schemas import Principal
from coursehub.shared.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class EnrollmentsService:
    """Enrollments domain service."""

    def __init__(self, repository: EnrollmentsRepository, courses_repository: CoursesRepository) -> None:
        self.repository = repository
        self.courses_repository = courses_repository

    async def enroll(self, payload: EnrollmentCreate, principal: Principal) -> Enrollment:
        """Enroll the caller; the (user, course) unique key rejects repeats."""
        course = await self.courses_repository.get_course_by_id(payload.course_id)
        if course is None:
            raise NotFoundException("Course not found")

        enrollment = await self.repository.create_enrollment(principal.account_id, payload.course_id)
        logger.info("Account %s enrolled in course %s", principal.account_id, payload.course_id)
        return enrollment

    async def list_enrollments(self, principal: Principal) -> list[Enrollment]:
        return await self.repository.list_enrollments_for_user(principal.account_id)


async def get_enrollments_service(session: AsyncSession = Depends(get_db_session)) -> EnrollmentsService:
    """Dependency provider for enrollments service."""
    return EnrollmentsService(EnrollmentsRepository(session), CoursesRepository(session))
