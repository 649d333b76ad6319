"""Courses API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from coursehub.core.enums import RoleEnum
from coursehub.modules.courses.schemas import CourseCreate, CourseDetailRead
from coursehub.modules.courses.service import CoursesService, get_courses_service
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import require_roles

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseDetailRead])
async def list_courses(service: CoursesService = Depends(get_courses_service)) -> list[CourseDetailRead]:
    """List all courses with their teachers."""
    courses = await service.list_courses()
    return [CourseDetailRead.model_validate(item) for item in courses]


@router.get("/{course_id}", response_model=CourseDetailRead)
async def get_course(
    course_id: UUID,
    service: CoursesService = Depends(get_courses_service),
) -> CourseDetailRead:
    """Get a single course."""
    course = await service.get_course(course_id)
    return CourseDetailRead.model_validate(course)


@router.post("", response_model=CourseDetailRead, status_code=status.HTTP_201_CREATED)
async def create_course(
    payload: CourseCreate,
    service: CoursesService = Depends(get_courses_service),
    principal: Principal = Depends(require_roles(RoleEnum.TEACHER)),
) -> CourseDetailRead:
    """Create a course (teacher only)."""
    course = await service.create_course(payload, principal)
    return CourseDetailRead.model_validate(course)
