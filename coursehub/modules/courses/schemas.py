"""Courses schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from coursehub.core.enums import CourseLevelEnum


class CourseCreate(BaseModel):
    """Create course request."""

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(default="", max_length=10000)
    price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    category: str = Field(default="", max_length=128)
    level: CourseLevelEnum = CourseLevelEnum.BEGINNER
    duration: str = Field(default="", max_length=64)
    image_url: str = Field(default="", max_length=1024)


class CourseTeacherRead(BaseModel):
    """Teacher summary embedded into a course."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class CourseRead(BaseModel):
    """Course response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    price: Decimal
    category: str
    level: CourseLevelEnum
    duration: str
    image_url: str
    teacher_id: UUID
    created_at: datetime
    updated_at: datetime


class CourseDetailRead(CourseRead):
    """Course with its teacher resolved."""

    teacher: CourseTeacherRead


class CourseTitleRead(BaseModel):
    """Minimal course reference embedded into other documents."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
