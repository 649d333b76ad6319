"""Teachers API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from coursehub.core.enums import RoleEnum
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import require_roles
from coursehub.modules.teachers.schemas import TeacherProfileRead, TeacherProfileUpdate
from coursehub.modules.teachers.service import TeachersService, get_teachers_service

router = APIRouter(prefix="/teacherProfiles", tags=["teachers"])


@router.get("", response_model=TeacherProfileRead | list[TeacherProfileRead])
async def get_profiles(
    teacher_id: UUID | None = Query(default=None, alias="teacherId"),
    service: TeachersService = Depends(get_teachers_service),
) -> TeacherProfileRead | list[TeacherProfileRead]:
    """Return one teacher profile, or all of them when no teacherId is given."""
    if teacher_id is not None:
        profile = await service.get_or_create_profile(teacher_id)
        return TeacherProfileRead.model_validate(profile)

    profiles = await service.list_profiles()
    return [TeacherProfileRead.model_validate(item) for item in profiles]


@router.post("", response_model=TeacherProfileRead)
async def save_own_profile(
    payload: TeacherProfileUpdate,
    service: TeachersService = Depends(get_teachers_service),
    principal: Principal = Depends(require_roles(RoleEnum.TEACHER)),
) -> TeacherProfileRead:
    """Create or update the caller's own profile."""
    profile = await service.save_profile(principal.account_id, payload, principal)
    return TeacherProfileRead.model_validate(profile)


@router.put("/{teacher_id}", response_model=TeacherProfileRead)
async def update_profile(
    teacher_id: UUID,
    payload: TeacherProfileUpdate,
    service: TeachersService = Depends(get_teachers_service),
    principal: Principal = Depends(require_roles(RoleEnum.TEACHER)),
) -> TeacherProfileRead:
    """Create or update a profile; teachers may only touch their own."""
    profile = await service.save_profile(teacher_id, payload, principal)
    return TeacherProfileRead.model_validate(profile)
