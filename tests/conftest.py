"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database sessions, seeded courses and students, mocked services
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import date
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from course_registry.boundary.db.connection import drop_models, init_models

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await init_models(engine)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await drop_models(engine)
    await engine.dispose()


@pytest.fixture
def make_course(test_async_db):
    """
    Factory creating committed courses through CourseService.

    Returns:
        Callable: async (code, schedule, capacity=30, **extra) -> UUID
    """
    from course_registry.application.services import CourseService

    service = CourseService(test_async_db)

    async def _make(code: str, schedule: list[dict] | None = None, capacity: int = 30, **extra):
        return await service.create_course(
            code=code,
            name=extra.pop("name", f"{code} course"),
            start_date=extra.pop("start_date", date(2025, 1, 6)),
            end_date=extra.pop("end_date", date(2025, 4, 25)),
            capacity=capacity,
            schedule=schedule or [],
            **extra,
        )

    return _make


@pytest.fixture
def make_student(test_async_db):
    """
    Factory creating committed students through StudentService.

    Returns:
        Callable: async (name) -> UUID
    """
    from course_registry.application.services import StudentService

    service = StudentService(test_async_db)

    async def _make(name: str = "Test Student"):
        email = f"{name.lower().replace(' ', '.')}.{uuid.uuid4().hex[:6]}@example.com"
        return await service.create_student(name=name, email=email)

    return _make


@pytest.fixture
def mock_course_service():
    """Mocked CourseService with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_student_service():
    """Mocked StudentService with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_registration_service():
    """Mocked RegistrationService with async methods."""
    return AsyncMock()


@pytest.fixture
def course_id():
    """Generate a test course ID."""
    return uuid.uuid4()


@pytest.fixture
def student_id():
    """Generate a test student ID."""
    return uuid.uuid4()
