# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for Courses API endpoints."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestListCourses:
    """Tests for GET /courses."""

    def test_returns_seeded_courses(self, client: TestClient) -> None:
        """Test the seeded courses are listed in order."""
        response = client.get("/courses")

        assert response.status_code == 200
        assert [c["title"] for c in response.json()["courses"]] == ["Math", "Physics", "History"]

    def test_search_by_title(self, client: TestClient) -> None:
        """Test filtering by title."""
        response = client.get("/courses?title=Math")

        assert response.status_code == 200
        courses = response.json()["courses"]
        assert len(courses) == 1
        assert courses[0]["title"] == "Math"

    def test_search_by_teacher(self, client: TestClient) -> None:
        """Test filtering by teacher substring."""
        response = client.get("/courses?teacher=Smith")

        assert response.status_code == 200
        courses = response.json()["courses"]
        assert len(courses) == 1
        assert courses[0]["teacher"] == "Mr. Smith"


class TestCreateCourse:
    """Tests for POST /courses."""

    def test_create_course(self, client: TestClient) -> None:
        """Test creating a course."""
        response = client.post("/courses", json={"title": "Chemistry", "teacher": "Dr. White"})

        assert response.status_code == 201
        assert response.json() == {"id": 4, "title": "Chemistry", "teacher": "Dr. White"}

    def test_missing_teacher(self, client: TestClient) -> None:
        """Test title and teacher are both required."""
        response = client.post("/courses", json={"title": "Incomplete"})

        assert response.status_code == 400
        assert response.json() == {"error": "title and teacher required"}

    def test_duplicate_title(self, client: TestClient) -> None:
        """Test duplicate titles are rejected."""
        response = client.post("/courses", json={"title": "Math", "teacher": "Someone"})

        assert response.status_code == 400
        assert response.json() == {"error": "Course title must be unique"}


class TestGetCourse:
    """Tests for GET /courses/{id}."""

    def test_with_enrolled_students(self, client: TestClient) -> None:
        """Test a course is returned with its students."""
        client.post("/courses/1/students/1")

        response = client.get("/courses/1")

        assert response.status_code == 200
        body = response.json()
        assert body["course"]["title"] == "Math"
        assert [s["name"] for s in body["students"]] == ["Alice"]

    def test_not_found(self, client: TestClient) -> None:
        """Test unknown course ids are 404."""
        response = client.get("/courses/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Course not found"}


class TestUpdateCourse:
    """Tests for PUT /courses/{id}."""

    def test_update_course(self, client: TestClient) -> None:
        """Test updating a course."""
        response = client.put("/courses/1", json={"title": "Advanced Math", "teacher": "Prof. Johnson"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "title": "Advanced Math", "teacher": "Prof. Johnson"}

    def test_not_found(self, client: TestClient) -> None:
        """Test updating an unknown course."""
        response = client.put("/courses/999", json={"title": "Ghost Course"})

        assert response.status_code == 404
        assert response.json() == {"error": "Course not found"}

    def test_duplicate_title(self, client: TestClient) -> None:
        """Test taking another course's title."""
        response = client.put("/courses/1", json={"title": "Physics"})

        assert response.status_code == 400
        assert response.json() == {"error": "Course title must be unique"}

    @pytest.mark.parametrize(
        "body",
        [{"title": None}, {"teacher": None}, {"title": None, "teacher": None}, {"teacher": ""}],
    )
    def test_null_or_empty_fields(self, client: TestClient, body: dict) -> None:
        """Test title and teacher cannot be cleared and nothing is changed."""
        response = client.put("/courses/1", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "title and teacher required"}
        assert client.get("/courses/1").json()["course"] == {
            "id": 1,
            "title": "Math",
            "teacher": "Mr. Smith",
        }


class TestDeleteCourse:
    """Tests for DELETE /courses/{id}."""

    def test_delete_course(self, client: TestClient) -> None:
        """Test deleting a course without students."""
        response = client.delete("/courses/2")

        assert response.status_code == 204
        assert client.get("/courses/2").status_code == 404

    def test_not_found(self, client: TestClient) -> None:
        """Test deleting an unknown course."""
        response = client.delete("/courses/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Course not found"}

    def test_course_with_students(self, client: TestClient) -> None:
        """Test courses with enrolled students cannot be deleted."""
        course_id = client.get("/courses").json()["courses"][0]["id"]
        client.post(f"/courses/{course_id}/students/1")

        response = client.delete(f"/courses/{course_id}")

        assert response.status_code == 400
        assert response.json() == {"error": "Cannot delete course: students are enrolled"}
