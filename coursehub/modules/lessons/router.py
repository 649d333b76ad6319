"""Lessons API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from coursehub.core.enums import RoleEnum
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import require_roles
from coursehub.modules.lessons.schemas import HomeworkCreate, HomeworkRead, LessonCreate, LessonRead
from coursehub.modules.lessons.service import LessonsService, get_lessons_service

router = APIRouter(tags=["lessons"])


@router.get("/courses/{course_id}/lessons", response_model=list[LessonRead])
async def list_course_lessons(
    course_id: UUID,
    service: LessonsService = Depends(get_lessons_service),
) -> list[LessonRead]:
    """List lessons of a course ordered by position."""
    lessons = await service.list_lessons(course_id)
    return [LessonRead.model_validate(item) for item in lessons]


@router.post("/lessons", response_model=LessonRead, status_code=status.HTTP_201_CREATED)
async def create_lesson(
    payload: LessonCreate,
    service: LessonsService = Depends(get_lessons_service),
    principal: Principal = Depends(require_roles(RoleEnum.TEACHER)),
) -> LessonRead:
    """Create lesson."""
    lesson = await service.create_lesson(payload, principal)
    return LessonRead.model_validate(lesson)


@router.get("/lessons/{lesson_id}/homework", response_model=list[HomeworkRead])
async def list_lesson_homework(
    lesson_id: UUID,
    service: LessonsService = Depends(get_lessons_service),
) -> list[HomeworkRead]:
    """List homework of a lesson."""
    homework = await service.list_homework(lesson_id)
    return [HomeworkRead.model_validate(item) for item in homework]


@router.post("/homework", response_model=HomeworkRead, status_code=status.HTTP_201_CREATED)
async def create_homework(
    payload: HomeworkCreate,
    service: LessonsService = Depends(get_lessons_service),
    principal: Principal = Depends(require_roles(RoleEnum.TEACHER)),
) -> HomeworkRead:
    """Create homework."""
    homework = await service.create_homework(payload, principal)
    return HomeworkRead.model_validate(homework)
