"""Courses ORM models."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Enum as SAEnum, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.core.database import Base, BaseModelMixin
from coursehub.core.enums import CourseLevelEnum

if TYPE_CHECKING:
    from coursehub.modules.identity.models import User


class Course(BaseModelMixin, Base):
    """Course offered by a teacher."""

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    category: Mapped[str] = mapped_column(String(128), default="", nullable=False)
    level: Mapped[CourseLevelEnum] = mapped_column(
        SAEnum(CourseLevelEnum, name="course_level_enum", native_enum=False),
        default=CourseLevelEnum.BEGINNER,
        nullable=False,
    )
    duration: Mapped[str] = mapped_column(String(64), default="", nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), default="", nullable=False)
    teacher_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    teacher: Mapped[User] = relationship()
