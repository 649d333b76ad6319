"""Admin business logic layer: account management."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.core.enums import RoleEnum
from coursehub.core.security import hash_password
from coursehub.modules.admin.models import AdminAction
from coursehub.modules.admin.repository import AdminRepository
from coursehub.modules.identity.models import User
from coursehub.modules.identity.repository import IdentityRepository
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.teachers.repository import TeachersRepository
from coursehub.shared.exceptions import ForbiddenException, NotFoundException

logger = logging.getLogger(__name__)


class AdminService:
    """Admin domain service."""

    def __init__(
        self,
        repository: AdminRepository,
        identity_repository: IdentityRepository,
        teachers_repository: TeachersRepository,
    ) -> None:
        self.repository = repository
        self.identity_repository = identity_repository
        self.teachers_repository = teachers_repository

    async def _get_user(self, user_id: UUID) -> User:
        user = await self.identity_repository.get_user_by_id(user_id)
        if user is None:
            raise NotFoundException("User not found")
        return user

    async def list_users(
        self,
        limit: int,
        offset: int,
        role: RoleEnum | None = None,
    ) -> tuple[list[User], int]:
        """List accounts, optionally of one role."""
        return await self.identity_repository.list_users(limit=limit, offset=offset, role=role)

    async def change_role(self, user_id: UUID, role: RoleEnum, actor: Principal) -> User:
        """Assign a new role to an account."""
        if user_id == actor.account_id:
            raise ForbiddenException("Admins cannot change their own role")

        user = await self._get_user(user_id)
        previous_role = user.role
        user = await self.identity_repository.update_user(user, role=role)
        await self.repository.create_action(
            admin_id=actor.account_id,
            action="account.role.change",
            target_id=str(user_id),
            payload={"from": str(previous_role), "to": str(role)},
        )
        logger.info("Account %s role changed %s -> %s", user_id, previous_role, role)
        return user

    async def reset_password(self, user_id: UUID, new_password: str, actor: Principal) -> None:
        """Overwrite an account's password."""
        user = await self._get_user(user_id)
        await self.identity_repository.update_user(user, password_hash=hash_password(new_password))
        await self.repository.create_action(
            admin_id=actor.account_id,
            action="account.password.reset",
            target_id=str(user_id),
            payload={},
        )

    async def delete_user(self, user_id: UUID, actor: Principal) -> None:
        """Delete an account, then its teacher profile.

        The two deletes are separate writes; nothing ties them together
        beyond the request transaction.
        """
        if user_id == actor.account_id:
            raise ForbiddenException("Admins cannot delete their own account")

        user = await self._get_user(user_id)
        snapshot = {"email": user.email, "role": str(user.role)}
        await self.identity_repository.delete_user(user_id)
        await self.teachers_repository.delete_profile_by_user_id(user_id)
        await self.repository.create_action(
            admin_id=actor.account_id,
            action="account.delete",
            target_id=str(user_id),
            payload=snapshot,
        )
        logger.info("Account %s deleted by %s", user_id, actor.account_id)

    async def list_actions(self, limit: int, offset: int) -> tuple[list[AdminAction], int]:
        """List admin journal entries."""
        return await self.repository.list_actions(limit=limit, offset=offset)


async def get_admin_service(session: AsyncSession = Depends(get_db_session)) -> AdminService:
    """Dependency provider for admin service."""
    return AdminService(
        AdminRepository(session),
        IdentityRepository(session),
        TeachersRepository(session),
    )
