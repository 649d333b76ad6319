"""Favorites API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from coursehub.modules.favorites.schemas import FavoriteCreate, FavoritesChanged
from coursehub.modules.favorites.service import FavoritesService, get_favorites_service
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import get_current_principal

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.post("", response_model=FavoritesChanged)
async def add_favorite(
    payload: FavoriteCreate,
    service: FavoritesService = Depends(get_favorites_service),
    principal: Principal = Depends(get_current_principal),
) -> FavoritesChanged:
    """Add course to favorites."""
    return await service.add(payload.course_id, principal)


@router.delete("/{course_id}", response_model=FavoritesChanged)
async def remove_favorite(
    course_id: UUID,
    service: FavoritesService = Depends(get_favorites_service),
    principal: Principal = Depends(get_current_principal),
) -> FavoritesChanged:
    """Remove course from favorites."""
    return await service.remove(course_id, principal)


@router.get("", response_model=list[UUID])
async def list_favorites(
    service: FavoritesService = Depends(get_favorites_service),
    principal: Principal = Depends(get_current_principal),
) -> list[UUID]:
    """List favorite course ids of current user."""
    return await service.list_course_ids(principal)
