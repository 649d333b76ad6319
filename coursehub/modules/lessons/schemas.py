"""Lessons schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LessonCreate(BaseModel):
    """Create lesson request."""

    course_id: UUID
    title: str = Field(min_length=1, max_length=255)
    content: str = ""
    video_url: str | None = Field(default=None, max_length=1024)
    duration_minutes: int = Field(default=0, ge=0)
    order: int = Field(default=0, ge=0)


class LessonRead(BaseModel):
    """Lesson response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    course_id: UUID
    title: str
    content: str
    video_url: str | None
    duration_minutes: int
    order: int
    created_at: datetime
    updated_at: datetime


class HomeworkCreate(BaseModel):
    """Create homework request."""

    lesson_id: UUID
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    due_date: datetime


class HomeworkRead(BaseModel):
    """Homework response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    lesson_id: UUID
    title: str
    description: str
    due_date: datetime
    created_at: datetime
