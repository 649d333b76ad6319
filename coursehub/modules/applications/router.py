"""Course applications API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from coursehub.core.enums import RoleEnum
from coursehub.modules.applications.schemas import (
    ApplicationCreate,
    ApplicationDetailRead,
    ApplicationRead,
)
from coursehub.modules.applications.service import ApplicationsService, get_applications_service
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import get_current_principal, require_roles

router = APIRouter(tags=["applications"])


@router.post(
    "/courses/{course_id}/applications",
    response_model=ApplicationRead,
    status_code=status.HTTP_201_CREATED,
)
async def apply_to_course(
    course_id: UUID,
    payload: ApplicationCreate,
    service: ApplicationsService = Depends(get_applications_service),
    principal: Principal = Depends(get_current_principal),
) -> ApplicationRead:
    """Apply to a course."""
    application = await service.apply(course_id, payload, principal)
    return ApplicationRead.model_validate(application)


@router.get("/applications", response_model=list[ApplicationDetailRead])
async def list_applications(
    service: ApplicationsService = Depends(get_applications_service),
    _: Principal = Depends(require_roles(RoleEnum.TEACHER)),
) -> list[ApplicationDetailRead]:
    """List all course applications (teacher only)."""
    applications = await service.list_applications()
    return [ApplicationDetailRead.model_validate(item) for item in applications]
