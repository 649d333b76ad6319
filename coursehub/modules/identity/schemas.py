"""Identity schemas."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from coursehub.core.enums import RoleEnum


@dataclass(frozen=True, slots=True)
class Principal:
    """Identity attached to a request by the auth gate."""

    account_id: UUID
    role: RoleEnum
    email: str | None = None


class UserCreate(BaseModel):
    """User registration request."""

    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    name: str = Field(min_length=1, max_length=128)
    role: RoleEnum


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr
    password: str = Field(min_length=1)


class AccountSummary(BaseModel):
    """Public part of an account embedded into other documents."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    role: RoleEnum


class UserRead(AccountSummary):
    """User output schema."""

    created_at: datetime


class AuthResponse(BaseModel):
    """Register/login response with bearer token."""

    message: str
    token: str
    token_type: str = "bearer"
    user: AccountSummary
