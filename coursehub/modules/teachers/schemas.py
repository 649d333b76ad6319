"""Teachers schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coursehub.modules.identity.schemas import AccountSummary


def _parse_experience(value: object) -> object:
    """Accept experience as a number or a whole-number string such as "5"."""
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            number = float(stripped)
        except ValueError as exc:
            raise ValueError("experience must be a number of years") from exc
        if not number.is_integer():
            raise ValueError("experience must be a whole number of years")
        return int(number)
    return value


class SocialLinks(BaseModel):
    """Profile social links; empty string means unset."""

    linkedin: str = Field(default="", max_length=512)
    github: str = Field(default="", max_length=512)
    twitter: str = Field(default="", max_length=512)
    website: str = Field(default="", max_length=512)


class SocialLinksUpdate(BaseModel):
    linkedin: str | None = Field(default=None, max_length=512)
    github: str | None = Field(default=None, max_length=512)
    twitter: str | None = Field(default=None, max_length=512)
    website: str | None = Field(default=None, max_length=512)


class TeacherProfileUpdate(BaseModel):
    """Partial profile payload; falsy fields keep the stored value."""

    teacher_name: str | None = Field(default=None, max_length=128)
    email: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=5000)
    specialization: str | None = Field(default=None, max_length=255)
    education: str | None = Field(default=None, max_length=5000)
    experience: int | None = Field(default=None, ge=0, le=80)
    avatar: str | None = Field(default=None, max_length=1024)
    certifications: list[str] | None = None
    expertise: list[str] | None = None
    social_links: SocialLinksUpdate | None = None

    @field_validator("experience", mode="before")
    @classmethod
    def normalize_experience(cls, value: object) -> object:
        return _parse_experience(value)


class TeacherProfileDocument(BaseModel):
    """Full profile as it is persisted; validated before every write."""

    teacher_name: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    bio: str = Field(default="", max_length=5000)
    specialization: str = Field(default="", max_length=255)
    education: str = Field(default="", max_length=5000)
    experience: int = Field(default=0, ge=0, le=80)
    avatar: str = Field(default="", max_length=1024)
    certifications: list[str] = Field(default_factory=list)
    expertise: list[str] = Field(default_factory=list)
    social_links: SocialLinks = Field(default_factory=SocialLinks)

    @field_validator("experience", mode="before")
    @classmethod
    def normalize_experience(cls, value: object) -> object:
        return _parse_experience(value)


class TeacherProfileRead(BaseModel):
    """Teacher profile joined with its account summary."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: AccountSummary
    teacher_name: str
    email: str
    bio: str
    specialization: str
    education: str
    experience: int
    avatar: str
    certifications: list[str]
    expertise: list[str]
    social_links: SocialLinks
    rating: float
    total_ratings: int
    created_at: datetime
    updated_at: datetime
