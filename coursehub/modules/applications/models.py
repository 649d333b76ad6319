"""Course applications ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Enum as SAEnum, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.core.database import Base, BaseModelMixin
from coursehub.core.enums import ApplicationStatusEnum

if TYPE_CHECKING:
    from coursehub.modules.courses.models import Course
    from coursehub.modules.identity.models import User


class CourseApplication(BaseModelMixin, Base):
    """Request of an account to join a course; one per (user, course)."""

    __tablename__ = "course_applications"
    __table_args__ = (UniqueConstraint("user_id", "course_id"),)

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[ApplicationStatusEnum] = mapped_column(
        SAEnum(ApplicationStatusEnum, name="application_status_enum", native_enum=False),
        default=ApplicationStatusEnum.PENDING,
        nullable=False,
    )

    user: Mapped[User] = relationship()
    course: Mapped[Course] = relationship()
