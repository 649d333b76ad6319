"""Identity repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import add_unique
from coursehub.core.enums import RoleEnum
from coursehub.modules.identity.models import User


class IdentityRepository:
    """DB operations for identity domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_user_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return await self.session.scalar(stmt)

    async def get_user_by_id(self, user_id: UUID) -> User | None:
        stmt = select(User).where(User.id == user_id)
        return await self.session.scalar(stmt)

    async def create_user(self, email: str, password_hash: str, name: str, role: RoleEnum) -> User:
        user = User(email=email, password_hash=password_hash, name=name, role=role)
        return await add_unique(self.session, user, "User already exists")

    async def list_users(
        self,
        limit: int,
        offset: int,
        role: RoleEnum | None = None,
    ) -> tuple[list[User], int]:
        base_stmt: Select[tuple[User]] = select(User)
        if role is not None:
            base_stmt = base_stmt.where(User.role == role)

        count_stmt = select(func.count()).select_from(base_stmt.subquery())
        total = int((await self.session.scalar(count_stmt)) or 0)

        stmt = base_stmt.order_by(User.created_at.desc()).limit(limit).offset(offset)
        items = (await self.session.scalars(stmt)).all()
        return list(items), total

    async def update_user(self, user: User, **changes) -> User:
        for key, value in changes.items():
            if value is not None:
                setattr(user, key, value)
        await self.session.flush()
        return user

    async def delete_user(self, user_id: UUID) -> None:
        await self.session.execute(delete(User).where(User.id == user_id))
