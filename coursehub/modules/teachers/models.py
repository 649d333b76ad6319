"""Teachers ORM models."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.core.database import Base, BaseModelMixin

SOCIAL_LINK_KEYS = ("linkedin", "github", "twitter", "website")


def empty_social_links() -> dict[str, str]:
    return {key: "" for key in SOCIAL_LINK_KEYS}


class TeacherProfile(BaseModelMixin, Base):
    """Public profile companion of a teacher account."""

    __tablename__ = "teacher_profiles"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    teacher_name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[str] = mapped_column(Text, default="", nullable=False)
    specialization: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    education: Mapped[str] = mapped_column(Text, default="", nullable=False)
    experience: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    avatar: Mapped[str] = mapped_column(String(1024), default="", nullable=False)
    certifications: Mapped[list[str]] = mapped_column(JSONB, default=list, nullable=False)
    expertise: Mapped[list[str]] = mapped_column(JSONB, default=list, nullable=False)
    social_links: Mapped[dict[str, Any]] = mapped_column(JSONB, default=empty_social_links, nullable=False)
    rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    total_ratings: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    user = relationship("User", back_populates="teacher_profile")
