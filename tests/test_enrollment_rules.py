from __future__ import annotations

import asyncio
from dataclasses import dataclass
from types import SimpleNamespace
from uuid import UUID, uuid4

import pytest

from coursehub.core.enums import RoleEnum
from coursehub.modules.enrollments.schemas import EnrollmentCreate
from coursehub.modules.enrollments.service import EnrollmentsService
from coursehub.modules.identity.schemas import Principal
from coursehub.shared.exceptions import ConflictException, NotFoundException


@dataclass
class FakeEnrollment:
    id: UUID
    user_id: UUID
    course_id: UUID


class FakeEnrollmentsRepository:
    """Mimics the (user, course) unique key of the enrollments table."""

    def __init__(self) -> None:
        self.rows: dict[tuple[UUID, UUID], FakeEnrollment] = {}

    async def create_enrollment(self, user_id: UUID, course_id: UUID) -> FakeEnrollment:
        await asyncio.sleep(0)
        key = (user_id, course_id)
        if key in self.rows:
            raise ConflictException("Already enrolled in this course")
        self.rows[key] = FakeEnrollment(id=uuid4(), user_id=user_id, course_id=course_id)
        return self.rows[key]

    async def list_enrollments_for_user(self, user_id: UUID) -> list[FakeEnrollment]:
        return [row for (owner, _), row in self.rows.items() if owner == user_id]


class FakeCoursesRepository:
    def __init__(self, course_ids: set[UUID]) -> None:
        self.course_ids = course_ids

    async def get_course_by_id(self, course_id: UUID) -> SimpleNamespace | None:
        if course_id not in self.course_ids:
            return None
        return SimpleNamespace(id=course_id)


@pytest.mark.asyncio
async def test_concurrent_enrollments_leave_single_row() -> None:
    course_id = uuid4()
    repository = FakeEnrollmentsRepository()
    service = EnrollmentsService(repository, FakeCoursesRepository({course_id}))  # type: ignore[arg-type]
    student = Principal(account_id=uuid4(), role=RoleEnum.STUDENT)
    payload = EnrollmentCreate(course_id=course_id)

    results = await asyncio.gather(
        service.enroll(payload, student),
        service.enroll(payload, student),
        return_exceptions=True,
    )

    conflicts = [item for item in results if isinstance(item, ConflictException)]
    assert len(conflicts) == 1
    assert conflicts[0].message == "Already enrolled in this course"
    assert len(await service.list_enrollments(student)) == 1


@pytest.mark.asyncio
async def test_enroll_into_unknown_course_is_not_found() -> None:
    repository = FakeEnrollmentsRepository()
    service = EnrollmentsService(repository, FakeCoursesRepository(set()))  # type: ignore[arg-type]
    student = Principal(account_id=uuid4(), role=RoleEnum.STUDENT)

    with pytest.raises(NotFoundException):
        await service.enroll(EnrollmentCreate(course_id=uuid4()), student)

    assert repository.rows == {}
