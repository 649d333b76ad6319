"""Favorites schemas."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel


class FavoriteCreate(BaseModel):
    """Add-to-favorites request."""

    course_id: UUID


class FavoritesChanged(BaseModel):
    """Outcome of a favorites mutation with the resulting list."""

    message: str
    favorites: list[UUID]
