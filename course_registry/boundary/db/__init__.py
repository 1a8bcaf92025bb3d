"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - init_models(), drop_models(): Schema lifecycle
  - CourseModel, StudentModel, RegistrationModel: Domain entities
  - course_crud, student_crud, registration_crud: CRUD operation singletons

Dependencies: sqlalchemy, course_registry.configs
System role: Database adapter providing persistent storage for courses,
students and their registrations.
"""

from course_registry.boundary.db.base import Base, TimestampMixin, UUIDMixin
from course_registry.boundary.db.connection import (
    drop_models,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    init_models,
)
from course_registry.boundary.db.models import (
    CourseModel,
    RegistrationModel,
    StudentModel,
)
from course_registry.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    RegistrationCRUD,
    StudentCRUD,
    course_crud,
    registration_crud,
    student_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "drop_models",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "init_models",
    # Models
    "CourseModel",
    "RegistrationModel",
    "StudentModel",
    # CRUD classes
    "BaseCRUD",
    "CourseCRUD",
    "RegistrationCRUD",
    "StudentCRUD",
    # CRUD singletons
    "course_crud",
    "registration_crud",
    "student_crud",
]
