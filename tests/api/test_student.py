import pytest
from fastapi.testclient import TestClient
from uuid import uuid4

from course_registry.api.main import create_app
from course_registry.api.deps.dependencies import (
    get_course_service,
    get_registration_service,
    get_student_service,
)
from course_registry.application.services import RegistrationResult
from course_registry.core.exceptions import (
    AlreadyRegisteredError,
    CourseFullError,
    CourseNotFoundError,
    MissingFieldError,
    NotRegisteredError,
    StudentNotFoundError,
)

from datetime import datetime


def course_payload(course_id, code="ECE 1786", registered=(), capacity=40):
    now = datetime.now().isoformat()
    return {
        "id": str(course_id),
        "code": code,
        "name": f"{code} course",
        "description": None,
        "start_date": "2025-01-06",
        "end_date": "2025-04-25",
        "capacity": capacity,
        "schedule": [{"day": "Monday", "start_time": "10:00 AM", "end_time": "12:00 PM"}],
        "makeup_lectures": [],
        "exception_dates": [],
        "registered_students": [str(s) for s in registered],
        "available_spots": capacity - len(registered),
        "created_at": now,
        "updated_at": now,
    }


def student_payload(student_id, courses=()):
    now = datetime.now().isoformat()
    return {
        "id": str(student_id),
        "name": "Test Student",
        "email": "test.student@example.com",
        "registered_courses": [str(c) for c in courses],
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_list_courses(client, mock_course_service):
    mock_course_service.get_all_courses.return_value = [
        course_payload(uuid4(), code="A 1"),
        course_payload(uuid4(), code="B 2"),
    ]

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get("/api/v1/student/courses")

    assert response.status_code == 200
    data = response.json()
    assert [c["code"] for c in data] == ["A 1", "B 2"]
    mock_course_service.get_all_courses.assert_called_once_with(limit=100, offset=0)


def test_list_registered_courses(client, mock_student_service, student_id):
    mock_student_service.get_registered_courses.return_value = [course_payload(uuid4())]

    client.app.dependency_overrides[get_student_service] = lambda: mock_student_service

    response = client.get(f"/api/v1/student/{student_id}/courses")

    assert response.status_code == 200
    assert len(response.json()) == 1
    mock_student_service.get_registered_courses.assert_called_once_with(student_id)


def test_list_registered_courses_unknown_student(client, mock_student_service, student_id):
    mock_student_service.get_registered_courses.side_effect = StudentNotFoundError(student_id)

    client.app.dependency_overrides[get_student_service] = lambda: mock_student_service

    response = client.get(f"/api/v1/student/{student_id}/courses")

    assert response.status_code == 404
    assert response.json() == {"detail": "Student not found"}


def test_register_success(client, mock_registration_service, course_id, student_id):
    mock_registration_service.register.return_value = RegistrationResult(
        course=course_payload(course_id, registered=[student_id]),
        student=student_payload(student_id, courses=[course_id]),
    )

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/register/{course_id}",
        json={"student_id": str(student_id)},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Successfully registered for course"
    assert data["course"]["registered_students"] == [str(student_id)]
    assert data["student"]["registered_courses"] == [str(course_id)]
    mock_registration_service.register.assert_called_once_with(
        course_id=course_id, student_id=student_id, confirm=False
    )


def test_register_accepts_camel_case_student_id(
    client, mock_registration_service, course_id, student_id
):
    mock_registration_service.register.return_value = RegistrationResult(
        course=course_payload(course_id, registered=[student_id]),
        student=student_payload(student_id, courses=[course_id]),
    )

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/register/{course_id}",
        json={"studentId": str(student_id)},
    )

    assert response.status_code == 201


def test_register_conflict_warning(client, mock_registration_service, course_id, student_id):
    clashing_id = uuid4()
    mock_registration_service.register.return_value = RegistrationResult(
        course=course_payload(course_id),
        student=student_payload(student_id, courses=[clashing_id]),
        completed=False,
        conflicting_courses=[course_payload(clashing_id, code="MAT 100", registered=[student_id])],
    )

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/register/{course_id}",
        json={"student_id": str(student_id)},
    )

    assert response.status_code == 200
    data = response.json()
    assert "confirm=true" in data["warning"]
    assert "conflicting_courses" not in data
    assert [c["code"] for c in data["conflictingCourses"]] == ["MAT 100"]


def test_register_with_confirm(client, mock_registration_service, course_id, student_id):
    mock_registration_service.register.return_value = RegistrationResult(
        course=course_payload(course_id, registered=[student_id]),
        student=student_payload(student_id, courses=[course_id]),
    )

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/register/{course_id}",
        json={"student_id": str(student_id), "confirm": True},
    )

    assert response.status_code == 201
    mock_registration_service.register.assert_called_once_with(
        course_id=course_id, student_id=student_id, confirm=True
    )


@pytest.mark.parametrize(
    "make_error, expected_status, expected_detail",
    [
        (lambda c, s: CourseFullError(c, s), 400, "Course is full"),
        (
            lambda c, s: AlreadyRegisteredError(c, s),
            400,
            "Student is already registered for this course",
        ),
        (lambda c, s: CourseNotFoundError(c), 404, "Course not found"),
        (lambda c, s: StudentNotFoundError(s), 404, "Student not found"),
    ],
)
def test_register_errors(
    client,
    mock_registration_service,
    course_id,
    student_id,
    make_error,
    expected_status,
    expected_detail,
):
    mock_registration_service.register.side_effect = make_error(course_id, student_id)

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/register/{course_id}",
        json={"student_id": str(student_id)},
    )

    assert response.status_code == expected_status
    assert response.json() == {"detail": expected_detail}


def test_register_missing_student_id(client, mock_registration_service, course_id):
    mock_registration_service.register.side_effect = MissingFieldError(
        "student_id", course_id=course_id
    )

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(f"/api/v1/student/register/{course_id}", json={})

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing required field: student_id"}
    mock_registration_service.register.assert_called_once_with(
        course_id=course_id, student_id=None, confirm=False
    )


def test_withdraw_success(client, mock_registration_service, course_id, student_id):
    mock_registration_service.withdraw.return_value = RegistrationResult(
        course=course_payload(course_id),
        student=student_payload(student_id),
    )

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/withdraw/{course_id}",
        json={"student_id": str(student_id)},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Successfully withdrawn from course"
    assert data["course"]["available_spots"] == 40
    assert data["student"]["registered_courses"] == []


def test_withdraw_not_registered(client, mock_registration_service, course_id, student_id):
    mock_registration_service.withdraw.side_effect = NotRegisteredError(course_id, student_id)

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/withdraw/{course_id}",
        json={"student_id": str(student_id)},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Student is not registered for this course"}


def test_invalid_course_id_path(client, mock_registration_service, student_id):
    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        "/api/v1/student/register/not-a-uuid",
        json={"student_id": str(student_id)},
    )

    assert response.status_code == 400
    mock_registration_service.register.assert_not_called()


def test_malformed_student_id_is_bad_request(client, mock_registration_service, course_id):
    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(
        f"/api/v1/student/register/{course_id}",
        json={"studentId": "not-a-uuid"},
    )

    assert response.status_code == 400
    assert isinstance(response.json()["detail"], list)
    mock_registration_service.register.assert_not_called()


def test_unversioned_paths_are_served(client, mock_registration_service, course_id, student_id):
    mock_registration_service.withdraw.return_value = RegistrationResult(
        course=course_payload(course_id),
        student=student_payload(student_id),
    )

    client.app.dependency_overrides[get_registration_service] = lambda: mock_registration_service

    response = client.post(f"/student/withdraw/{course_id}", json={"studentId": str(student_id)})

    assert response.status_code == 200
    assert response.json()["message"] == "Successfully withdrawn from course"
