"""
Student domain models and schemas.

Dependencies: pydantic
System role: Student API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateStudentRequest(BaseModel):
    """Request schema for creating a student."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)


class StudentResponse(BaseModel):
    """Response schema for student operations."""

    id: uuid.UUID
    name: str
    email: str
    registered_courses: list[uuid.UUID]
    created_at: datetime
    updated_at: datetime
