"""
Dependency injection container.

Each factory binds a service to the request-scoped database session.

Dependencies: course_registry.application, course_registry.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from course_registry.application.services import (
    CourseService,
    RegistrationService,
    StudentService,
)
from course_registry.boundary.db import get_async_db


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)


def get_student_service(db: AsyncSession = Depends(get_async_db)) -> StudentService:
    """Get student service instance bound to the request's database session."""
    return StudentService(db=db)


def get_registration_service(db: AsyncSession = Depends(get_async_db)) -> RegistrationService:
    """
    Get registration service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        RegistrationService: Registration workflow instance
    """
    return RegistrationService(db=db)
