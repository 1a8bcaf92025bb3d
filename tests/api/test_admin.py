import pytest
from fastapi.testclient import TestClient
from uuid import uuid4

from course_registry.api.main import create_app
from course_registry.api.deps.dependencies import get_course_service, get_student_service
from course_registry.core.exceptions import (
    CourseNotFoundError,
    InvalidCapacityError,
    StudentAlreadyExistsError,
)

from datetime import datetime

MONDAY = {"day": "Monday", "start_time": "10:00 AM", "end_time": "12:00 PM"}


def course_payload(course_id, **overrides):
    now = datetime.now().isoformat()
    data = {
        "id": str(course_id),
        "code": "ECE 1786",
        "name": "Introduction to NLP",
        "description": None,
        "start_date": "2025-01-06",
        "end_date": "2025-04-25",
        "capacity": 40,
        "schedule": [MONDAY],
        "makeup_lectures": [],
        "exception_dates": [],
        "registered_students": [],
        "available_spots": 40,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return data


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def create_body(**overrides):
    body = {
        "code": "ECE 1786",
        "name": "Introduction to NLP",
        "start_date": "2025-01-06",
        "end_date": "2025-04-25",
        "capacity": 40,
        "schedule": [MONDAY],
    }
    body.update(overrides)
    return body


def test_create_course(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.create_course.return_value = course_id
    mock_course_service.get_course.return_value = course_payload(course_id)

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.post("/api/v1/admin/courses", json=create_body())

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == str(course_id)
    assert data["available_spots"] == 40
    assert data["registered_students"] == []
    mock_course_service.create_course.assert_called_once()
    kwargs = mock_course_service.create_course.call_args.kwargs
    assert kwargs["schedule"] == [MONDAY]


@pytest.mark.parametrize(
    "overrides",
    [
        {"capacity": 0},
        {"capacity": -5},
        {"schedule": [{"day": "Funday", "start_time": "10:00", "end_time": "11:00"}]},
        {"schedule": [{"day": "Monday", "start_time": "11:00", "end_time": "10:00"}]},
        {"schedule": [{"day": "Monday", "start_time": "9am", "end_time": "10:00"}]},
        {"end_date": "2024-12-31"},
        {"code": "   "},
    ],
)
def test_create_course_rejects_invalid_data(client, mock_course_service, overrides):
    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.post("/api/v1/admin/courses", json=create_body(**overrides))

    assert response.status_code == 400
    mock_course_service.create_course.assert_not_called()


def test_create_course_missing_field(client, mock_course_service):
    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service
    body = create_body()
    del body["capacity"]

    response = client.post("/api/v1/admin/courses", json=body)

    assert response.status_code == 400


def test_get_course(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.get_course.return_value = course_payload(course_id, name="Single Course")

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get(f"/api/v1/admin/courses/{course_id}")

    assert response.status_code == 200
    assert response.json()["name"] == "Single Course"


def test_get_course_not_found(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.get_course.side_effect = CourseNotFoundError(course_id)

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get(f"/api/v1/admin/courses/{course_id}")

    assert response.status_code == 404
    assert response.json() == {"detail": "Course not found"}


def test_update_course_passes_only_given_fields(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.update_course.return_value = course_payload(course_id, name="Updated")

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.put(
        f"/api/v1/admin/courses/{course_id}",
        json={"name": "Updated", "description": None},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Updated"
    mock_course_service.update_course.assert_called_once_with(
        course_id, name="Updated", description=None
    )


def test_update_course_empty_body(client, mock_course_service):
    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.put(f"/api/v1/admin/courses/{uuid4()}", json={})

    assert response.status_code == 400
    mock_course_service.update_course.assert_not_called()


def test_update_course_capacity_below_registrations(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.update_course.side_effect = InvalidCapacityError(
        "Capacity cannot be lower than the 3 students already registered",
        course_id=course_id,
    )

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.put(f"/api/v1/admin/courses/{course_id}", json={"capacity": 2})

    assert response.status_code == 400
    assert "Capacity" in response.json()["detail"]


def test_delete_course(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.delete_course.return_value = True

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.delete(f"/api/v1/admin/courses/{course_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Course deleted"}
    mock_course_service.delete_course.assert_called_once_with(course_id)


def test_delete_course_not_found(client, mock_course_service):
    course_id = uuid4()
    mock_course_service.delete_course.side_effect = CourseNotFoundError(course_id)

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.delete(f"/api/v1/admin/courses/{course_id}")

    assert response.status_code == 404


def test_unexpected_error_returns_500(client, mock_course_service):
    mock_course_service.get_course.side_effect = RuntimeError("database exploded")

    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service

    response = client.get(f"/api/v1/admin/courses/{uuid4()}")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_create_student(client, mock_student_service):
    student_id = uuid4()
    now = datetime.now().isoformat()
    mock_student_service.create_student.return_value = student_id
    mock_student_service.get_student.return_value = {
        "id": str(student_id),
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "registered_courses": [],
        "created_at": now,
        "updated_at": now,
    }

    client.app.dependency_overrides[get_student_service] = lambda: mock_student_service

    response = client.post(
        "/api/v1/admin/students",
        json={"name": "Ada Lovelace", "email": "ada@example.com"},
    )

    assert response.status_code == 201
    assert response.json()["id"] == str(student_id)


def test_create_student_duplicate(client, mock_student_service):
    mock_student_service.create_student.side_effect = StudentAlreadyExistsError(
        "A student with email ada@example.com already exists"
    )

    client.app.dependency_overrides[get_student_service] = lambda: mock_student_service

    response = client.post(
        "/api/v1/admin/students",
        json={"name": "Ada Lovelace", "email": "ada@example.com"},
    )

    assert response.status_code == 400
