"""
Create a mock student for local testing.

Usage:
    python -m course_registry.scripts.seed_student
    python -m course_registry.scripts.seed_student --name "Ada" --email ada@example.com
"""

import argparse
import asyncio
import logging

from course_registry.application.services import StudentService
from course_registry.boundary.db import (
    get_async_engine,
    get_async_session_factory,
    init_models,
    student_crud,
)
from course_registry.core.exceptions import StudentAlreadyExistsError
from course_registry.observability import configure_logging

logger = logging.getLogger(__name__)


async def seed_student(name: str, email: str) -> dict:
    """
    Create the student, or return the existing one with the same email.

    Args:
        name: Display name
        email: Contact address

    Returns:
        dict: Student data
    """
    await init_models()
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        service = StudentService(session)
        try:
            student_id = await service.create_student(name=name, email=email)
        except StudentAlreadyExistsError:
            logger.info("Student already exists", extra={"email": email})
            existing = await student_crud.get_by_email(session, email)
            student_id = existing.id
        return await service.get_student(student_id)


async def _main(name: str, email: str) -> None:
    try:
        student = await seed_student(name, email)
        print(f"Mock student ready: {student['id']} ({student['email']})")
    finally:
        await get_async_engine().dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a mock student")
    parser.add_argument("--name", default="Test Student")
    parser.add_argument("--email", default="test.student@example.com")
    args = parser.parse_args()

    configure_logging()
    asyncio.run(_main(args.name, args.email))


if __name__ == "__main__":
    main()
