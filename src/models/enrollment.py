# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment API schemas.

Detail views pair an entity with the other side of its enrollments.
"""

from pydantic import BaseModel

from src.models.course import CourseResponse
from src.models.student import StudentResponse


class StudentDetailResponse(BaseModel):
    """A student together with the courses they are enrolled in."""

    student: StudentResponse
    courses: list[CourseResponse]


class CourseDetailResponse(BaseModel):
    """A course together with its enrolled students."""

    course: CourseResponse
    students: list[StudentResponse]
