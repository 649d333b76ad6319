"""Favorites business logic layer."""

from __future__ import annotations

from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.modules.courses.repository import CoursesRepository
from coursehub.modules.favorites.repository import FavoritesRepository
from coursehub.modules.favorites.schemas import FavoritesChanged
from coursehub.modules.identity.schemas import Principal
from coursehub.shared.exceptions import NotFoundException


class FavoritesService:
    """Favorites domain service."""

    def __init__(self, repository: FavoritesRepository, courses_repository: CoursesRepository) -> None:
        self.repository = repository
        self.courses_repository = courses_repository

    async def add(self, course_id: UUID, principal: Principal) -> FavoritesChanged:
        """Bookmark a course and return the caller's favorites."""
        if await self.courses_repository.get_course_by_id(course_id) is None:
            raise NotFoundException("Course not found")

        await self.repository.add_favorite(principal.account_id, course_id)
        return FavoritesChanged(
            message="Course added to favorites",
            favorites=await self.list_course_ids(principal),
        )

    async def remove(self, course_id: UUID, principal: Principal) -> FavoritesChanged:
        """Drop a bookmark; removing an absent one is not an error."""
        await self.repository.remove_favorite(principal.account_id, course_id)
        return FavoritesChanged(
            message="Course removed from favorites",
            favorites=await self.list_course_ids(principal),
        )

    async def list_course_ids(self, principal: Principal) -> list[UUID]:
        return await self.repository.list_favorite_course_ids(principal.account_id)


async def get_favorites_service(session: AsyncSession = Depends(get_db_session)) -> FavoritesService:
    """Dependency provider for favorites service."""
    return FavoritesService(FavoritesRepository(session), CoursesRepository(session))
