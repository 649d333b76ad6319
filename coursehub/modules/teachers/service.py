"""Teachers business logic layer.

Keeps teacher accounts and teacher profiles one-to-one: profiles are
provisioned lazily on read, backfilled in bulk when listing, and merged
field by field on write.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from fastapi import Depends
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.core.enums import RoleEnum
from coursehub.core.metrics import record_profiles_provisioned
from coursehub.modules.identity.models import User
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.teachers.models import SOCIAL_LINK_KEYS, TeacherProfile, empty_social_links
from coursehub.modules.teachers.repository import ProfileAlreadyExists, TeachersRepository
from coursehub.modules.teachers.schemas import TeacherProfileDocument, TeacherProfileUpdate
from coursehub.shared.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    ValidationException,
)
from coursehub.shared.utils import coalesce, utc_now

logger = logging.getLogger(__name__)

SCALAR_FIELDS = (
    "teacher_name",
    "email",
    "bio",
    "specialization",
    "education",
    "experience",
    "avatar",
)
LIST_FIELDS = ("certifications", "expertise")


def default_profile_fields(account: User) -> dict[str, Any]:
    """Field values of a freshly provisioned profile."""
    return {
        "teacher_name": account.name,
        "email": account.email,
        "bio": "",
        "specialization": "",
        "education": "",
        "experience": 0,
        "avatar": "",
        "certifications": [],
        "expertise": [],
        "social_links": empty_social_links(),
    }


def profile_fields(profile: TeacherProfile) -> dict[str, Any]:
    """Mergeable fields currently stored on a profile."""
    fields = {name: getattr(profile, name) for name in SCALAR_FIELDS + LIST_FIELDS}
    fields["social_links"] = dict(profile.social_links or {})
    return fields


def merge_profile_fields(current: dict[str, Any], changes: TeacherProfileUpdate) -> dict[str, Any]:
    """Overlay truthy values from ``changes`` onto ``current``.

    Empty strings, zero and empty lists count as "not supplied", so a field
    can never be cleared through a merge. Social links coalesce per key.
    """
    merged = {name: coalesce(getattr(changes, name), current[name]) for name in SCALAR_FIELDS + LIST_FIELDS}

    stored_links = current.get("social_links") or {}
    sent_links = changes.social_links
    merged["social_links"] = {
        key: coalesce(getattr(sent_links, key) if sent_links else None, stored_links.get(key) or "")
        for key in SOCIAL_LINK_KEYS
    }
    return merged


def validate_profile_document(fields: dict[str, Any]) -> dict[str, Any]:
    """Run schema checks on the merged document before it reaches storage."""
    try:
        document = TeacherProfileDocument.model_validate(fields)
    except ValidationError as exc:
        raise ValidationException("Validation error", error=str(exc)) from exc
    return document.model_dump()


class TeachersService:
    """Teachers domain service."""

    def __init__(self, repository: TeachersRepository) -> None:
        self.repository = repository

    async def _get_teacher_account(self, account_id: UUID) -> User:
        account = await self.repository.get_account(account_id)
        if account is None or account.role != RoleEnum.TEACHER:
            raise NotFoundException("Teacher not found")
        return account

    async def get_or_create_profile(self, account_id: UUID) -> TeacherProfile:
        """Return the teacher's profile, provisioning a default one if missing."""
        account = await self._get_teacher_account(account_id)

        profile = await self.repository.get_profile_by_user_id(account_id)
        if profile is not None:
            return profile

        try:
            profile = await self.repository.insert_profile(account_id, default_profile_fields(account))
            record_profiles_provisioned("fetch")
            logger.info("Provisioned teacher profile for %s", account_id)
            return profile
        except ProfileAlreadyExists:
            logger.info("Teacher profile for %s was provisioned concurrently", account_id)

        profile = await self.repository.get_profile_by_user_id(account_id)
        if profile is None:
            raise ConflictException("Teacher profile could not be provisioned")
        return profile

    async def list_profiles(self) -> list[TeacherProfile]:
        """List profiles of all teachers, backfilling the missing ones."""
        teachers = await self.repository.list_teacher_accounts()
        teacher_ids = [teacher.id for teacher in teachers]
        profiles = await self.repository.list_profiles_for_users(teacher_ids)

        provisioned = {profile.user_id for profile in profiles}
        missing = [teacher for teacher in teachers if teacher.id not in provisioned]
        if not missing:
            return profiles

        rows = [{"user_id": teacher.id, **default_profile_fields(teacher)} for teacher in missing]
        try:
            await self.repository.insert_profiles(rows)
            created = len(rows)
        except ProfileAlreadyExists:
            logger.info("Bulk profile backfill raced another writer, inserting one by one")
            created = 0
            for teacher in missing:
                try:
                    await self.repository.insert_profile(teacher.id, default_profile_fields(teacher))
                    created += 1
                except ProfileAlreadyExists:
                    continue

        record_profiles_provisioned("backfill", created)
        logger.info("Backfilled %d of %d missing teacher profiles", created, len(missing))
        return await self.repository.list_profiles_for_users(teacher_ids)

    async def save_profile(
        self,
        account_id: UUID,
        payload: TeacherProfileUpdate,
        principal: Principal,
    ) -> TeacherProfile:
        """Create the profile on first write, otherwise merge ``payload`` into it."""
        if principal.account_id != account_id:
            raise ForbiddenException("You can only update your own profile")

        account = await self.repository.get_account(account_id)
        if account is None:
            raise NotFoundException("User not found")
        # Token role may be stale after an admin role change.
        if account.role != RoleEnum.TEACHER:
            raise NotFoundException("Teacher not found")

        profile = await self.repository.get_profile_by_user_id(account_id)
        if profile is None:
            fields = validate_profile_document(merge_profile_fields(default_profile_fields(account), payload))
            try:
                profile = await self.repository.insert_profile(account_id, fields)
            except ProfileAlreadyExists:
                logger.info("Teacher profile for %s was created concurrently, merging into it", account_id)
            else:
                record_profiles_provisioned("first_write")
                logger.info("Created teacher profile for %s", account_id)
                return profile

            profile = await self.repository.get_profile_by_user_id(account_id)
            if profile is None:
                raise ConflictException("Teacher profile already exists")

        fields = validate_profile_document(merge_profile_fields(profile_fields(profile), payload))
        fields["updated_at"] = utc_now()
        profile = await self.repository.save_profile(profile, fields)
        logger.info("Updated teacher profile for %s", account_id)
        return profile


async def get_teachers_service(session: AsyncSession = Depends(get_db_session)) -> TeachersService:
    """Dependency provider for teachers service."""
    return TeachersService(TeachersRepository(session))
