"""Enrollments schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from coursehub.core.enums import EnrollmentStatusEnum
from coursehub.modules.courses.schemas import CourseRead


class EnrollmentCreate(BaseModel):
    """Enroll request."""

    course_id: UUID


class EnrollmentRead(BaseModel):
    """Enrollment response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    course_id: UUID
    status: EnrollmentStatusEnum
    progress: int
    enrolled_at: datetime


class EnrollmentWithCourseRead(EnrollmentRead):
    """Enrollment with the course document resolved."""

    course: CourseRead
