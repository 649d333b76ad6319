from __future__ import annotations

from types import SimpleNamespace
from uuid import UUID, uuid4

import pytest

from coursehub.core.enums import RoleEnum
from coursehub.modules.applications.schemas import ApplicationCreate
from coursehub.modules.applications.service import ApplicationsService
from coursehub.modules.courses.schemas import CourseCreate
from coursehub.modules.courses.service import CoursesService
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.reviews.schemas import ReviewCreate
from coursehub.modules.reviews.service import ReviewsService
from coursehub.shared.exceptions import ConflictException, NotFoundException


class FakeCoursesRepository:
    def __init__(self, courses: list[SimpleNamespace] | None = None) -> None:
        self.courses = {course.id: course for course in courses or []}

    async def get_course_by_id(self, course_id: UUID) -> SimpleNamespace | None:
        return self.courses.get(course_id)

    async def create_course(self, teacher_id: UUID, **fields) -> SimpleNamespace:
        course = SimpleNamespace(id=uuid4(), teacher_id=teacher_id, **fields)
        self.courses[course.id] = course
        return course

    async def list_courses(self) -> list[SimpleNamespace]:
        return list(self.courses.values())


class FakeReviewsRepository:
    def __init__(self) -> None:
        self.reviews: dict[tuple[UUID, UUID], SimpleNamespace] = {}

    async def create_review(self, user_id: UUID, course_id: UUID, rating: int, comment: str) -> SimpleNamespace:
        if (user_id, course_id) in self.reviews:
            raise ConflictException("Already reviewed this course")
        review = SimpleNamespace(id=uuid4(), user_id=user_id, course_id=course_id, rating=rating, comment=comment)
        self.reviews[(user_id, course_id)] = review
        return review

    async def list_reviews_for_course(self, course_id: UUID) -> list[SimpleNamespace]:
        return [review for (_, reviewed), review in self.reviews.items() if reviewed == course_id]


class FakeApplicationsRepository:
    def __init__(self) -> None:
        self.applications: dict[tuple[UUID, UUID], SimpleNamespace] = {}

    async def create_application(self, user_id: UUID, course_id: UUID, message: str) -> SimpleNamespace:
        if (user_id, course_id) in self.applications:
            raise ConflictException("Already applied to this course")
        application = SimpleNamespace(id=uuid4(), user_id=user_id, course_id=course_id, message=message)
        self.applications[(user_id, course_id)] = application
        return application

    async def list_applications(self) -> list[SimpleNamespace]:
        return list(self.applications.values())


def make_course() -> SimpleNamespace:
    return SimpleNamespace(id=uuid4(), teacher_id=uuid4(), title="Linear algebra")


def make_student() -> Principal:
    return Principal(account_id=uuid4(), role=RoleEnum.STUDENT)


@pytest.mark.asyncio
async def test_second_review_of_same_course_is_conflict() -> None:
    course = make_course()
    repository = FakeReviewsRepository()
    service = ReviewsService(repository, FakeCoursesRepository([course]))  # type: ignore[arg-type]
    student = make_student()

    review = await service.create_review(course.id, ReviewCreate(rating=5, comment="Great"), student)
    assert review.rating == 5

    with pytest.raises(ConflictException) as exc:
        await service.create_review(course.id, ReviewCreate(rating=1), student)

    assert exc.value.message == "Already reviewed this course"
    assert await service.list_reviews(course.id) == [review]


@pytest.mark.asyncio
async def test_review_of_unknown_course_is_not_found() -> None:
    repository = FakeReviewsRepository()
    service = ReviewsService(repository, FakeCoursesRepository())  # type: ignore[arg-type]

    with pytest.raises(NotFoundException) as exc:
        await service.create_review(uuid4(), ReviewCreate(rating=4), make_student())

    assert exc.value.message == "Course not found"
    assert repository.reviews == {}


def test_review_rating_outside_range_is_rejected() -> None:
    with pytest.raises(ValueError):
        ReviewCreate(rating=6)


@pytest.mark.asyncio
async def test_second_application_to_same_course_is_conflict() -> None:
    course = make_course()
    repository = FakeApplicationsRepository()
    service = ApplicationsService(repository, FakeCoursesRepository([course]))  # type: ignore[arg-type]
    student = make_student()

    await service.apply(course.id, ApplicationCreate(message="Please let me in"), student)

    with pytest.raises(ConflictException) as exc:
        await service.apply(course.id, ApplicationCreate(message="Again"), student)

    assert exc.value.message == "Already applied to this course"
    assert len(await service.list_applications()) == 1


@pytest.mark.asyncio
async def test_application_to_unknown_course_is_not_found() -> None:
    repository = FakeApplicationsRepository()
    service = ApplicationsService(repository, FakeCoursesRepository())  # type: ignore[arg-type]

    with pytest.raises(NotFoundException):
        await service.apply(uuid4(), ApplicationCreate(message="Hello"), make_student())

    assert repository.applications == {}


@pytest.mark.asyncio
async def test_course_is_owned_by_creating_teacher_and_unknown_course_is_not_found() -> None:
    service = CoursesService(FakeCoursesRepository())  # type: ignore[arg-type]
    teacher = Principal(account_id=uuid4(), role=RoleEnum.TEACHER)

    course = await service.create_course(CourseCreate(title="Topology"), teacher)

    assert course.teacher_id == teacher.account_id
    assert await service.get_course(course.id) is course

    with pytest.raises(NotFoundException) as exc:
        await service.get_course(uuid4())
    assert exc.value.message == "Course not found"
