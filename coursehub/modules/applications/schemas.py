"""Course applications schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from coursehub.core.enums import ApplicationStatusEnum
from coursehub.modules.courses.schemas import CourseTitleRead


class ApplicationCreate(BaseModel):
    """Apply-to-course request."""

    message: str = Field(min_length=1, max_length=5000)


class ApplicantRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class ApplicationRead(BaseModel):
    """Application response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    course_id: UUID
    message: str
    status: ApplicationStatusEnum
    created_at: datetime


class ApplicationDetailRead(ApplicationRead):
    """Application with applicant and course resolved."""

    user: ApplicantRead
    course: CourseTitleRead
