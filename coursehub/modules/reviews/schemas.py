"""Course reviews schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    """Create review request."""

    rating: int = Field(ge=1, le=5)
    comment: str = Field(default="", max_length=5000)


class ReviewerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class ReviewRead(BaseModel):
    """Review response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    course_id: UUID
    rating: int
    comment: str
    created_at: datetime


class ReviewWithAuthorRead(ReviewRead):
    user: ReviewerRead
