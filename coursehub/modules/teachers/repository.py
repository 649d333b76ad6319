"""Teachers repository layer."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.core.enums import RoleEnum
from coursehub.modules.identity.models import User
from coursehub.modules.teachers.models import TeacherProfile


class ProfileAlreadyExists(Exception):
    """Storage rejected a profile insert because the account already has one."""


class TeachersRepository:
    """DB operations for teachers domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_account(self, user_id: UUID) -> User | None:
        return await self.session.get(User, user_id)

    async def list_teacher_accounts(self) -> list[User]:
        stmt = select(User).where(User.role == RoleEnum.TEACHER)
        return list((await self.session.scalars(stmt)).all())

    async def get_profile_by_user_id(self, user_id: UUID) -> TeacherProfile | None:
        stmt = (
            select(TeacherProfile)
            .options(selectinload(TeacherProfile.user))
            .where(TeacherProfile.user_id == user_id)
        )
        return await self.session.scalar(stmt)

    async def list_profiles_for_users(self, user_ids: list[UUID]) -> list[TeacherProfile]:
        if not user_ids:
            return []
        stmt = (
            select(TeacherProfile)
            .options(selectinload(TeacherProfile.user))
            .where(TeacherProfile.user_id.in_(user_ids))
        )
        return list((await self.session.scalars(stmt)).all())

    async def insert_profile(self, user_id: UUID, fields: dict[str, Any]) -> TeacherProfile:
        profile = TeacherProfile(user_id=user_id, **fields)
        try:
            async with self.session.begin_nested():
                self.session.add(profile)
        except IntegrityError as exc:
            raise ProfileAlreadyExists(str(user_id)) from exc
        await self.session.refresh(profile, attribute_names=["user"])
        return profile

    async def insert_profiles(self, rows: list[dict[str, Any]]) -> None:
        """Insert many profiles at once; all-or-nothing on a uniqueness violation."""
        if not rows:
            return
        try:
            async with self.session.begin_nested():
                await self.session.execute(insert(TeacherProfile), rows)
        except IntegrityError as exc:
            raise ProfileAlreadyExists(f"{len(rows)} rows") from exc

    async def save_profile(self, profile: TeacherProfile, fields: dict[str, Any]) -> TeacherProfile:
        for key, value in fields.items():
            setattr(profile, key, value)
        await self.session.flush()
        return profile

    async def delete_profile_by_user_id(self, user_id: UUID) -> None:
        await self.session.execute(delete(TeacherProfile).where(TeacherProfile.user_id == user_id))
