"""Seed idempotent demo data for local/non-production environments."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.config import get_settings
from coursehub.core.database import Database
from coursehub.core.enums import CourseLevelEnum, RoleEnum
from coursehub.core.security import hash_password, verify_password
from coursehub.modules.courses.models import Course
from coursehub.modules.identity.models import User
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.lessons.models import Lesson
from coursehub.modules.teachers.repository import TeachersRepository
from coursehub.modules.teachers.schemas import SocialLinksUpdate, TeacherProfileUpdate
from coursehub.modules.teachers.service import TeachersService

DEMO_PASSWORD = "DemoPass123!"

DEMO_ADMIN_EMAIL = "demo-admin@coursehub.dev"
DEMO_TEACHER_EMAIL = "demo-teacher@coursehub.dev"
DEMO_STUDENT_EMAIL = "demo-student@coursehub.dev"

DEMO_COURSE_TITLE = "Python for Data Analysis"
DEMO_LESSON_TITLES = ("Setting up the environment", "Working with tables", "Plotting results")


@dataclass(slots=True)
class SeedStats:
    users_created: int = 0
    users_updated: int = 0
    teacher_profile_saved: bool = False
    course_created: bool = False
    lessons_created: int = 0
    course_id: str | None = None


async def _ensure_user(
    session: AsyncSession,
    *,
    email: str,
    name: str,
    role: RoleEnum,
) -> tuple[User, bool]:
    user = await session.scalar(select(User).where(User.email == email))
    created = False
    if user is None:
        user = User(
            email=email,
            password_hash=hash_password(DEMO_PASSWORD),
            name=name,
            role=role,
        )
        session.add(user)
        created = True
    else:
        if not verify_password(DEMO_PASSWORD, user.password_hash):
            user.password_hash = hash_password(DEMO_PASSWORD)
        if user.role != role:
            user.role = role

    await session.flush()
    return user, created


async def _ensure_teacher_profile(session: AsyncSession, teacher_user: User) -> bool:
    service = TeachersService(TeachersRepository(session))
    principal = Principal(account_id=teacher_user.id, role=RoleEnum.TEACHER, email=teacher_user.email)
    await service.save_profile(
        teacher_user.id,
        TeacherProfileUpdate(
            bio="Demo teacher profile. Focus: data wrangling, plotting and reproducible notebooks.",
            specialization="Data analysis",
            education="MSc Applied Statistics",
            experience=8,
            expertise=["python", "pandas", "matplotlib"],
            social_links=SocialLinksUpdate(website="https://coursehub.dev"),
        ),
        principal,
    )
    return True


async def _ensure_demo_course(session: AsyncSession, teacher_user: User) -> tuple[Course, bool]:
    course = await session.scalar(
        select(Course).where(Course.teacher_id == teacher_user.id, Course.title == DEMO_COURSE_TITLE),
    )
    if course is not None:
        return course, False

    course = Course(
        teacher_id=teacher_user.id,
        title=DEMO_COURSE_TITLE,
        description="Load, clean and visualise tabular data.",
        price=Decimal("49.00"),
        category="programming",
        level=CourseLevelEnum.BEGINNER,
        duration="4 weeks",
    )
    session.add(course)
    await session.flush()
    return course, True


async def _ensure_demo_lessons(session: AsyncSession, course: Course) -> int:
    created = 0
    for position, title in enumerate(DEMO_LESSON_TITLES, start=1):
        existing = await session.scalar(
            select(Lesson).where(Lesson.course_id == course.id, Lesson.title == title),
        )
        if existing is not None:
            continue
        session.add(Lesson(course_id=course.id, title=title, duration_minutes=45, order=position))
        created += 1

    await session.flush()
    return created


async def _run_seed(database: Database, *, allow_production: bool) -> SeedStats:
    settings = get_settings()
    app_env = settings.app_env.strip().lower()
    if app_env in {"production", "prod"} and not allow_production:
        raise RuntimeError(
            "Refusing to seed demo data in production. "
            "Re-run with --allow-production only if you are absolutely sure.",
        )

    stats = SeedStats()

    async with database.session() as session:
        try:
            _, admin_created = await _ensure_user(
                session,
                email=DEMO_ADMIN_EMAIL,
                name="Demo Admin",
                role=RoleEnum.ADMIN,
            )
            teacher_user, teacher_created = await _ensure_user(
                session,
                email=DEMO_TEACHER_EMAIL,
                name="Demo Teacher",
                role=RoleEnum.TEACHER,
            )
            _, student_created = await _ensure_user(
                session,
                email=DEMO_STUDENT_EMAIL,
                name="Demo Student",
                role=RoleEnum.STUDENT,
            )

            stats.users_created = sum([admin_created, teacher_created, student_created])
            stats.users_updated = 3 - stats.users_created

            stats.teacher_profile_saved = await _ensure_teacher_profile(session, teacher_user)
            course, stats.course_created = await _ensure_demo_course(session, teacher_user)
            stats.lessons_created = await _ensure_demo_lessons(session, course)
            stats.course_id = str(course.id)

            await session.commit()
        except Exception:
            await session.rollback()
            raise

    return stats


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Seed idempotent demo data for CourseHub (users, teacher profile, course, lessons).",
    )
    parser.add_argument(
        "--allow-production",
        action="store_true",
        help="Allow seeding even when APP_ENV is production/prod.",
    )
    return parser


def _print_summary(stats: SeedStats) -> None:
    print("Demo seed completed.")
    print(f"- Users created: {stats.users_created}")
    print(f"- Users updated: {stats.users_updated}")
    print(f"- Teacher profile saved: {stats.teacher_profile_saved}")
    print(f"- Course created: {stats.course_created}")
    print(f"- Lessons created: {stats.lessons_created}")
    print(f"- Course id: {stats.course_id}")
    print("")
    print("Demo credentials (non-production only):")
    print(f"- admin:   {DEMO_ADMIN_EMAIL} / {DEMO_PASSWORD}")
    print(f"- teacher: {DEMO_TEACHER_EMAIL} / {DEMO_PASSWORD}")
    print(f"- student: {DEMO_STUDENT_EMAIL} / {DEMO_PASSWORD}")


async def _seed(*, allow_production: bool) -> SeedStats:
    database = Database(get_settings())
    try:
        return await _run_seed(database, allow_production=allow_production)
    finally:
        await database.close()


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        stats = asyncio.run(_seed(allow_production=args.allow_production))
    except Exception as exc:
        print(f"Demo seed failed: {exc}")
        return 1

    _print_summary(stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
