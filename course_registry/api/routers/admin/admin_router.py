"""
Admin API endpoints.

Routes:
- POST /admin/courses - Create course
- GET /admin/courses/{id} - Get single course
- PUT /admin/courses/{id} - Update course
- DELETE /admin/courses/{id} - Delete course and its registrations
- POST /admin/students - Create student

Dependencies: course_registry.application.services, course_registry.models
System role: Course administration HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from course_registry.api.deps.dependencies import (
    get_course_service,
    get_student_service,
)
from course_registry.api.routers.router_utils import (
    handle_registration_errors,
    map_course_to_response,
    map_student_to_response,
)
from course_registry.application.services import CourseService, StudentService
from course_registry.models.course import (
    CourseResponse,
    CreateCourseRequest,
    DeleteCourseResponse,
    UpdateCourseRequest,
)
from course_registry.models.student import CreateStudentRequest, StudentResponse

from .course_validators import validate_course_creation, validate_course_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

# Fields that may be explicitly cleared with null in an update
NULLABLE_FIELDS = {"description"}


@router.post("/courses", response_model=CourseResponse, status_code=201)
@handle_registration_errors
async def create_course(
    request: CreateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create a new course.

    Raises:
        HTTPException(400): Invalid capacity, schedule or dates
        HTTPException(500): Creation failed
    """
    validate_course_creation(request)

    logger.info(
        "Creating new course",
        extra={"course_code": request.code, "session_count": len(request.schedule)},
    )

    course_id = await course_service.create_course(
        code=request.code.strip(),
        name=request.name.strip(),
        description=request.description,
        start_date=request.start_date,
        end_date=request.end_date,
        capacity=request.capacity,
        schedule=[s.model_dump() for s in request.schedule],
        makeup_lectures=[m.model_dump() for m in request.makeup_lectures],
        exception_dates=request.exception_dates,
    )
    course_data = await course_service.get_course(course_id)

    return map_course_to_response(course_data)


@router.get("/courses/{course_id}", response_model=CourseResponse)
@handle_registration_errors
async def get_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID.

    Raises:
        HTTPException(404): Course not found
    """
    course_data = await course_service.get_course(course_id)
    return map_course_to_response(course_data)


@router.put("/courses/{course_id}", response_model=CourseResponse)
@handle_registration_errors
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Update course by ID. Only the fields present in the body change.

    Raises:
        HTTPException(404): Course not found
        HTTPException(400): Invalid data, or capacity below current registrations
        HTTPException(500): Update failed
    """
    validate_course_update(request)

    updates = {
        key: value
        for key, value in request.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_FIELDS
    }

    logger.info(
        "Updating course",
        extra={"course_id": str(course_id), "fields": sorted(updates)},
    )

    course_data = await course_service.update_course(course_id, **updates)
    return map_course_to_response(course_data)


@router.delete("/courses/{course_id}", response_model=DeleteCourseResponse)
@handle_registration_errors
async def delete_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> DeleteCourseResponse:
    """
    Delete course by ID together with its registrations.

    Raises:
        HTTPException(404): Course not found
    """
    logger.info("Deleting course", extra={"course_id": str(course_id)})

    await course_service.delete_course(course_id)
    return DeleteCourseResponse(message="Course deleted")


@router.post("/students", response_model=StudentResponse, status_code=201)
@handle_registration_errors
async def create_student(
    request: CreateStudentRequest,
    student_service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    """
    Create a student record.

    Raises:
        HTTPException(400): Malformed or duplicate email
    """
    student_id = await student_service.create_student(name=request.name, email=request.email)
    student_data = await student_service.get_student(student_id)
    return map_student_to_response(student_data)
