"""Enrollments API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from coursehub.modules.enrollments.schemas import (
    EnrollmentCreate,
    EnrollmentRead,
    EnrollmentWithCourseRead,
)
from coursehub.modules.enrollments.service import EnrollmentsService, get_enrollments_service
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import get_current_principal

router = APIRouter(prefix="/enrollments", tags=["enrollments"])


@router.post("", response_model=EnrollmentRead, status_code=status.HTTP_201_CREATED)
async def enroll(
    payload: EnrollmentCreate,
    service: EnrollmentsService = Depends(get_enrollments_service),
    principal: Principal = Depends(get_current_principal),
) -> EnrollmentRead:
    """Enroll current user into a course."""
    enrollment = await service.enroll(payload, principal)
    return EnrollmentRead.model_validate(enrollment)


@router.get("", response_model=list[EnrollmentWithCourseRead])
async def list_my_enrollments(
    service: EnrollmentsService = Depends(get_enrollments_service),
    principal: Principal = Depends(get_current_principal),
) -> list[EnrollmentWithCourseRead]:
    """List enrollments of current user."""
    enrollments = await service.list_enrollments(principal)
    return [EnrollmentWithCourseRead.model_validate(item) for item in enrollments]
