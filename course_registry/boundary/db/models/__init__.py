"""
Database models package.

Exports:
  - CourseModel: Course ORM model
  - StudentModel: Student ORM model
  - RegistrationModel: Student/course join rows

Dependencies: sqlalchemy, course_registry.boundary.db.base
System role: Database model definitions for domain entities
"""

from course_registry.boundary.db.models.course_model import CourseModel
from course_registry.boundary.db.models.registration_model import RegistrationModel
from course_registry.boundary.db.models.student_model import StudentModel

__all__ = [
    "CourseModel",
    "RegistrationModel",
    "StudentModel",
]
