"""Payments schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coursehub.core.enums import PaymentStatusEnum
from coursehub.modules.courses.schemas import CourseTitleRead


class PaymentCreate(BaseModel):
    """Create payment request."""

    course_id: UUID
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    payment_method: str = Field(default="card", min_length=1, max_length=64)
    transaction_id: str | None = Field(default=None, max_length=128)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        return value.upper()


class PaymentUpdateStatus(BaseModel):
    """Update payment status request."""

    status: PaymentStatusEnum


class PaymentRead(BaseModel):
    """Payment response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    course_id: UUID
    amount: Decimal
    currency: str
    status: PaymentStatusEnum
    payment_method: str
    transaction_id: str | None
    paid_at: datetime | None
    created_at: datetime
    updated_at: datetime


class PaymentWithCourseRead(PaymentRead):
    course: CourseTitleRead
