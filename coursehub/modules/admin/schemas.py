"""Admin schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from coursehub.core.enums import RoleEnum


class RoleChange(BaseModel):
    """Change account role request."""

    role: RoleEnum


class PasswordReset(BaseModel):
    """Admin password reset request."""

    new_password: str = Field(min_length=6, max_length=128)


class AdminActionRead(BaseModel):
    """Admin journal entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    admin_id: UUID | None
    action: str
    target_id: str | None
    payload: dict
    created_at: datetime
