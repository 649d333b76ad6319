from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from coursehub.core.database import add_unique
from coursehub.modules.enrollments.models import Enrollment
from coursehub.modules.enrollments.repository import EnrollmentsRepository
from coursehub.modules.teachers.repository import ProfileAlreadyExists, TeachersRepository
from coursehub.shared.exceptions import ConflictException

DUPLICATE_ENROLLMENT = "Already enrolled in this course"


def _duplicate_key() -> IntegrityError:
    return IntegrityError("INSERT", {}, Exception("duplicate key value violates unique constraint"))


class FakeSavepoint:
    def __init__(self, session: UniqueKeySession) -> None:
        self.session = session

    async def __aenter__(self) -> FakeSavepoint:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        pending, self.session.pending = self.session.pending, []
        if exc_type is not None:
            self.session.rolled_back_savepoints += 1
            return False
        keys = [self.session.key_of(instance) for instance in pending]
        if any(key in self.session.stored for key in keys) or len(set(keys)) != len(keys):
            self.session.rolled_back_savepoints += 1
            raise _duplicate_key()
        for key, instance in zip(keys, pending):
            self.session.stored[key] = instance
        return False


class UniqueKeySession:
    """Async session stand-in that enforces one unique key at savepoint release."""

    def __init__(self, key_of: Callable[[Any], Hashable]) -> None:
        self.key_of = key_of
        self.pending: list[Any] = []
        self.stored: dict[Hashable, Any] = {}
        self.rolled_back_savepoints = 0
        self.executed_rows: list[dict[str, Any]] = []

    def begin_nested(self) -> FakeSavepoint:
        return FakeSavepoint(self)

    def add(self, instance: Any) -> None:
        self.pending.append(instance)

    async def execute(self, statement: Any, rows: list[dict[str, Any]] | None = None) -> None:
        for row in rows or []:
            if row["user_id"] in self.stored:
                raise _duplicate_key()
        self.executed_rows.extend(rows or [])

    async def refresh(self, instance: Any, attribute_names: list[str] | None = None) -> None:
        return None


def enrollment_key(enrollment: Enrollment) -> tuple:
    return (enrollment.user_id, enrollment.course_id)


@pytest.mark.asyncio
async def test_add_unique_turns_integrity_error_into_conflict_and_keeps_session_usable() -> None:
    session = UniqueKeySession(enrollment_key)
    user_id, course_id = uuid4(), uuid4()

    await add_unique(session, Enrollment(user_id=user_id, course_id=course_id), DUPLICATE_ENROLLMENT)

    with pytest.raises(ConflictException) as exc:
        await add_unique(session, Enrollment(user_id=user_id, course_id=course_id), DUPLICATE_ENROLLMENT)

    assert exc.value.message == DUPLICATE_ENROLLMENT
    assert isinstance(exc.value.__cause__, IntegrityError)
    assert session.rolled_back_savepoints == 1

    other_course = uuid4()
    await add_unique(session, Enrollment(user_id=user_id, course_id=other_course), DUPLICATE_ENROLLMENT)
    assert set(session.stored) == {(user_id, course_id), (user_id, other_course)}


@pytest.mark.asyncio
async def test_enrollments_repository_reports_duplicate_pair() -> None:
    repository = EnrollmentsRepository(UniqueKeySession(enrollment_key))  # type: ignore[arg-type]
    user_id, course_id = uuid4(), uuid4()

    enrollment = await repository.create_enrollment(user_id, course_id)
    assert enrollment.user_id == user_id

    with pytest.raises(ConflictException):
        await repository.create_enrollment(user_id, course_id)


def profile_fields() -> dict[str, Any]:
    return {"teacher_name": "Ada", "email": "ada@coursehub.dev"}


@pytest.mark.asyncio
async def test_insert_profile_reports_existing_profile_and_accepts_next_account() -> None:
    session = UniqueKeySession(lambda profile: profile.user_id)
    repository = TeachersRepository(session)  # type: ignore[arg-type]
    user_id = uuid4()

    profile = await repository.insert_profile(user_id, profile_fields())
    assert profile.user_id == user_id

    with pytest.raises(ProfileAlreadyExists):
        await repository.insert_profile(user_id, profile_fields())

    other = await repository.insert_profile(uuid4(), profile_fields())
    assert len(session.stored) == 2
    assert other.user_id != user_id


@pytest.mark.asyncio
async def test_insert_profiles_is_rejected_as_a_whole_on_conflict() -> None:
    session = UniqueKeySession(lambda profile: profile.user_id)
    repository = TeachersRepository(session)  # type: ignore[arg-type]
    taken = uuid4()
    await repository.insert_profile(taken, profile_fields())

    with pytest.raises(ProfileAlreadyExists):
        await repository.insert_profiles(
            [{"user_id": uuid4(), **profile_fields()}, {"user_id": taken, **profile_fields()}],
        )

    assert session.executed_rows == []
    assert session.rolled_back_savepoints == 1

    await repository.insert_profiles([{"user_id": uuid4(), **profile_fields()}])
    assert len(session.executed_rows) == 1
