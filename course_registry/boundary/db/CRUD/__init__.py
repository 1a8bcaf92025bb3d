"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from course_registry.boundary.db.CRUD import course_crud, registration_crud

    course = await course_crud.get_by_id(db, course_id)
    student_ids = await registration_crud.student_ids_for_course(db, course_id)
"""

from course_registry.boundary.db.CRUD.base_crud import BaseCRUD
from course_registry.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from course_registry.boundary.db.CRUD.registration_crud import (
    RegistrationCRUD,
    registration_crud,
)
from course_registry.boundary.db.CRUD.student_crud import StudentCRUD, student_crud

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "RegistrationCRUD",
    "registration_crud",
    "StudentCRUD",
    "student_crud",
]
