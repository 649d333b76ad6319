from __future__ import annotations

from types import SimpleNamespace
from uuid import UUID, uuid4

import pytest

from coursehub.core.enums import RoleEnum
from coursehub.core.security import verify_password
from coursehub.modules.admin.service import AdminService
from coursehub.modules.identity.schemas import Principal
from coursehub.shared.exceptions import ForbiddenException, NotFoundException
from coursehub.shared.pagination import Page, PageWindow


class FakeIdentityRepository:
    def __init__(self, users: list[SimpleNamespace]) -> None:
        self.users = {user.id: user for user in users}

    async def get_user_by_id(self, user_id: UUID) -> SimpleNamespace | None:
        return self.users.get(user_id)

    async def list_users(self, limit: int, offset: int, role: RoleEnum | None = None):
        items = [user for user in self.users.values() if role is None or user.role == role]
        return items[offset : offset + limit], len(items)

    async def update_user(self, user: SimpleNamespace, **changes) -> SimpleNamespace:
        for key, value in changes.items():
            if value is not None:
                setattr(user, key, value)
        return user

    async def delete_user(self, user_id: UUID) -> None:
        self.users.pop(user_id, None)


class FakeTeachersRepository:
    def __init__(self, profile_owner_ids: set[UUID]) -> None:
        self.profile_owner_ids = profile_owner_ids

    async def delete_profile_by_user_id(self, user_id: UUID) -> None:
        self.profile_owner_ids.discard(user_id)


class FakeAdminRepository:
    def __init__(self) -> None:
        self.actions: list[dict] = []

    async def create_action(self, admin_id, action: str, target_id: str | None, payload: dict) -> None:
        self.actions.append(
            {"admin_id": admin_id, "action": action, "target_id": target_id, "payload": payload},
        )

    async def list_actions(self, limit: int, offset: int):
        return self.actions[offset : offset + limit], len(self.actions)


def make_user(role: RoleEnum) -> SimpleNamespace:
    user_id = uuid4()
    return SimpleNamespace(
        id=user_id,
        email=f"{role}-{user_id.hex[:6]}@example.com",
        name=f"{role} user",
        role=role,
        password_hash="old-hash",
    )


def build_service(users: list[SimpleNamespace], profile_owner_ids: set[UUID] | None = None):
    identity = FakeIdentityRepository(users)
    teachers = FakeTeachersRepository(profile_owner_ids or set())
    journal = FakeAdminRepository()
    service = AdminService(journal, identity, teachers)  # type: ignore[arg-type]
    return service, identity, teachers, journal


def as_principal(user: SimpleNamespace) -> Principal:
    return Principal(account_id=user.id, role=user.role, email=user.email)


@pytest.mark.asyncio
async def test_delete_user_removes_account_and_teacher_profile() -> None:
    admin = make_user(RoleEnum.ADMIN)
    teacher = make_user(RoleEnum.TEACHER)
    service, identity, teachers, journal = build_service([admin, teacher], {teacher.id})

    await service.delete_user(teacher.id, as_principal(admin))

    assert teacher.id not in identity.users
    assert teacher.id not in teachers.profile_owner_ids
    assert journal.actions[0]["action"] == "account.delete"
    assert journal.actions[0]["target_id"] == str(teacher.id)


@pytest.mark.asyncio
async def test_admin_cannot_delete_or_demote_self() -> None:
    admin = make_user(RoleEnum.ADMIN)
    service, identity, _, journal = build_service([admin])

    with pytest.raises(ForbiddenException):
        await service.delete_user(admin.id, as_principal(admin))
    with pytest.raises(ForbiddenException):
        await service.change_role(admin.id, RoleEnum.STUDENT, as_principal(admin))

    assert admin.id in identity.users
    assert admin.role == RoleEnum.ADMIN
    assert journal.actions == []


@pytest.mark.asyncio
async def test_change_role_updates_account_and_journals_transition() -> None:
    admin = make_user(RoleEnum.ADMIN)
    student = make_user(RoleEnum.STUDENT)
    service, _, _, journal = build_service([admin, student])

    user = await service.change_role(student.id, RoleEnum.TEACHER, as_principal(admin))

    assert user.role == RoleEnum.TEACHER
    assert journal.actions[0]["payload"] == {"from": "student", "to": "teacher"}


@pytest.mark.asyncio
async def test_reset_password_stores_new_hash() -> None:
    admin = make_user(RoleEnum.ADMIN)
    student = make_user(RoleEnum.STUDENT)
    service, _, _, journal = build_service([admin, student])

    await service.reset_password(student.id, "NewPass123!", as_principal(admin))

    assert verify_password("NewPass123!", student.password_hash)
    assert journal.actions[0]["action"] == "account.password.reset"


@pytest.mark.asyncio
async def test_operations_on_unknown_account_are_not_found() -> None:
    admin = make_user(RoleEnum.ADMIN)
    service, _, _, _ = build_service([admin])

    with pytest.raises(NotFoundException) as exc:
        await service.delete_user(uuid4(), as_principal(admin))
    assert exc.value.message == "User not found"


@pytest.mark.asyncio
async def test_list_users_filters_by_role() -> None:
    admin = make_user(RoleEnum.ADMIN)
    teachers = [make_user(RoleEnum.TEACHER) for _ in range(3)]
    service, _, _, _ = build_service([admin, *teachers])

    items, total = await service.list_users(limit=2, offset=0, role=RoleEnum.TEACHER)

    assert total == 3
    assert len(items) == 2
    assert all(item.role == RoleEnum.TEACHER for item in items)


def test_page_reports_whether_more_items_follow() -> None:
    window = PageWindow(limit=2, offset=0)

    first = Page[int].of([1, 2], total=3, window=window)
    last = Page[int].of([3], total=3, window=PageWindow(limit=2, offset=2))

    assert first.has_more is True
    assert last.has_more is False
    assert first.model_dump()["has_more"] is True
