"""Favorites ORM models."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.core.database import Base, BaseModelMixin


class Favorite(BaseModelMixin, Base):
    """Course bookmarked by an account."""

    __tablename__ = "favorites"
    __table_args__ = (UniqueConstraint("user_id", "course_id"),)

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id: Mapped[UUID] = mapped_column(ForeignKey("courses.id", ondelete="CASCADE"), nullable=False)
