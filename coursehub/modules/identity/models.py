"""Identity ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Enum as SAEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.core.database import Base, BaseModelMixin
from coursehub.core.enums import RoleEnum

if TYPE_CHECKING:
    from coursehub.modules.teachers.models import TeacherProfile


class User(BaseModelMixin, Base):
    """Platform account."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    role: Mapped[RoleEnum] = mapped_column(
        SAEnum(RoleEnum, name="role_enum", native_enum=False),
        default=RoleEnum.STUDENT,
        nullable=False,
        index=True,
    )

    teacher_profile: Mapped["TeacherProfile | None"] = relationship(back_populates="user", uselist=False)
