"""Favorites repository layer."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import add_unique
from coursehub.modules.favorites.models import Favorite


class FavoritesRepository:
    """DB operations for favorites domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_favorite(self, user_id: UUID, course_id: UUID) -> Favorite:
        favorite = Favorite(user_id=user_id, course_id=course_id)
        return await add_unique(self.session, favorite, "Course already in favorites")

    async def remove_favorite(self, user_id: UUID, course_id: UUID) -> None:
        stmt = delete(Favorite).where(Favorite.user_id == user_id, Favorite.course_id == course_id)
        await self.session.execute(stmt)

    async def list_favorite_course_ids(self, user_id: UUID) -> list[UUID]:
        stmt = select(Favorite.course_id).where(Favorite.user_id == user_id).order_by(Favorite.created_at.asc())
        return list((await self.session.scalars(stmt)).all())
