"""
Student API endpoints.

Routes:
- GET /student/courses - Browse courses
- GET /student/{student_id}/courses - Courses a student is registered for
- POST /student/register/{course_id} - Register for a course
- POST /student/withdraw/{course_id} - Withdraw from a course

Dependencies: course_registry.application.services, course_registry.models
System role: Student-facing registration HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from course_registry.api.deps.dependencies import (
    get_course_service,
    get_registration_service,
    get_student_service,
)
from course_registry.api.routers.router_utils import (
    handle_registration_errors,
    map_conflict_to_response,
    map_courses_to_response,
    map_registration_to_response,
)
from course_registry.application.services import (
    CourseService,
    RegistrationService,
    StudentService,
)
from course_registry.models.course import CourseResponse
from course_registry.models.registration import (
    ConflictWarningResponse,
    RegistrationRequest,
    RegistrationResponse,
    WithdrawalRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/student", tags=["student"])


@router.get("/courses", response_model=list[CourseResponse])
@handle_registration_errors
async def list_courses(
    limit: int = 100,
    offset: int = 0,
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """
    List available courses with pagination.

    Args:
        limit: Maximum number of courses (default 100)
        offset: Number to skip (default 0)
    """
    courses = await course_service.get_all_courses(limit=limit, offset=offset)
    return map_courses_to_response(courses)


@router.get("/{student_id}/courses", response_model=list[CourseResponse])
@handle_registration_errors
async def list_registered_courses(
    student_id: UUID,
    student_service: StudentService = Depends(get_student_service),
) -> list[CourseResponse]:
    """
    List the courses a student is registered for.

    Raises:
        HTTPException(404): Student not found
    """
    courses = await student_service.get_registered_courses(student_id)
    return map_courses_to_response(courses)


@router.post(
    "/register/{course_id}",
    response_model=RegistrationResponse | ConflictWarningResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"model": ConflictWarningResponse, "description": "Schedule conflict warning"}},
)
@handle_registration_errors
async def register(
    course_id: UUID,
    request: RegistrationRequest,
    response: Response,
    registration_service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse | ConflictWarningResponse:
    """
    Register a student for a course.

    If the course clashes with the student's schedule and confirm is not
    set, nothing is registered and a 200 warning lists the conflicting
    courses; resubmitting with confirm=true registers anyway.

    Raises:
        HTTPException(400): Missing student_id, course full, already registered
        HTTPException(404): Course or student not found
        HTTPException(500): Registration failed
    """
    logger.info(
        "Registration requested",
        extra={
            "course_id": str(course_id),
            "student_id": str(request.student_id) if request.student_id else None,
            "confirm": request.confirm,
        },
    )

    result = await registration_service.register(
        course_id=course_id,
        student_id=request.student_id,
        confirm=request.confirm,
    )

    if result.needs_confirmation:
        response.status_code = status.HTTP_200_OK
        return map_conflict_to_response(result)

    return map_registration_to_response(result, "Successfully registered for course")


@router.post("/withdraw/{course_id}", response_model=RegistrationResponse)
@handle_registration_errors
async def withdraw(
    course_id: UUID,
    request: WithdrawalRequest,
    registration_service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """
    Withdraw a student from a course.

    Raises:
        HTTPException(400): Missing student_id, or student not registered
        HTTPException(404): Course or student not found
    """
    logger.info(
        "Withdrawal requested",
        extra={
            "course_id": str(course_id),
            "student_id": str(request.student_id) if request.student_id else None,
        },
    )

    result = await registration_service.withdraw(
        course_id=course_id,
        student_id=request.student_id,
    )
    return map_registration_to_response(result, "Successfully withdrawn from course")
