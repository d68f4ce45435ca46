# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course API endpoints.

This module provides endpoints for course management:
- GET / - List courses, optionally filtered by title/teacher substring
- POST / - Create a course
- GET /{course_id} - Get a course with its enrolled students
- PUT /{course_id} - Update a course
- DELETE /{course_id} - Delete a course without enrollments

Student enrollment endpoints:
- POST /{course_id}/students/{student_id} - Enroll a student
- DELETE /{course_id}/students/{student_id} - Unenroll a student
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status

from src.api.dependencies import RegistryDep
from src.api.errors import unwrap
from src.domains.registry import Collection
from src.models.common import ErrorResponse, SuccessResponse
from src.models.course import (
    CourseCreateRequest,
    CourseListResponse,
    CourseResponse,
    CourseUpdateRequest,
)
from src.models.enrollment import CourseDetailResponse
from src.models.student import StudentResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=CourseListResponse,
    summary="List courses",
    description="List courses. Filters are case-sensitive substring matches.",
)
async def list_courses(
    registry: RegistryDep,
    title: Annotated[str | None, Query(description="Substring of the title")] = None,
    teacher: Annotated[str | None, Query(description="Substring of the teacher name")] = None,
) -> CourseListResponse:
    """List courses matching the optional filters."""
    courses = registry.search(Collection.COURSES, title=title, teacher=teacher)
    return CourseListResponse(
        courses=[CourseResponse.model_validate(c) for c in courses],
    )


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
    responses={400: {"model": ErrorResponse}},
)
async def create_course(data: CourseCreateRequest, registry: RegistryDep) -> CourseResponse:
    """Create a course.

    Args:
        data: Course title and teacher.
        registry: Application registry.

    Returns:
        The created course.

    Raises:
        HTTPException: 400 if a field is missing or the title is taken.
    """
    if not data.title or not data.teacher:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="title and teacher required",
        )

    course = unwrap(registry.create(Collection.COURSES, data.model_dump()))
    return CourseResponse.model_validate(course)


@router.get(
    "/{course_id}",
    response_model=CourseDetailResponse,
    summary="Get course",
    description="Get a course together with its enrolled students.",
    responses={404: {"model": ErrorResponse}},
)
async def get_course(course_id: str, registry: RegistryDep) -> CourseDetailResponse:
    """Get a course and its students."""
    course = unwrap(registry.get(Collection.COURSES, course_id))
    return CourseDetailResponse(
        course=CourseResponse.model_validate(course),
        students=[
            StudentResponse.model_validate(s)
            for s in registry.get_course_students(course.id)
        ],
    )


@router.put(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Update course",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_course(
    course_id: str,
    data: CourseUpdateRequest,
    registry: RegistryDep,
) -> CourseResponse:
    """Update the fields sent in the request body.

    Raises:
        HTTPException: 400 if a field is sent as null or empty, or the
            title is taken; 404 if the course does not exist.
    """
    patch = data.model_dump(exclude_unset=True)
    if not all(patch.values()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="title and teacher required",
        )

    course = unwrap(registry.update(Collection.COURSES, course_id, patch))
    return CourseResponse.model_validate(course)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete course",
    description="Delete a course. Courses with enrolled students cannot be deleted.",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_course(course_id: str, registry: RegistryDep) -> Response:
    """Delete a course."""
    unwrap(registry.remove(Collection.COURSES, course_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# Student Enrollment Endpoints
# ============================================================================


@router.post(
    "/{course_id}/students/{student_id}",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Enroll student",
    description="Enroll a student in a course. Courses hold at most a fixed number of students.",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def enroll_student(course_id: str, student_id: str, registry: RegistryDep) -> SuccessResponse:
    """Enroll a student in a course.

    Raises:
        HTTPException: 404 if course/student not found, 400 if already
            enrolled or the course is full.
    """
    logger.info("Enrolling student: student=%s, course=%s", student_id, course_id)
    unwrap(registry.enroll(student_id, course_id))
    return SuccessResponse()


@router.delete(
    "/{course_id}/students/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unenroll student",
    responses={404: {"model": ErrorResponse}},
)
async def unenroll_student(course_id: str, student_id: str, registry: RegistryDep) -> Response:
    """Remove a student's enrollment from a course."""
    logger.info("Unenrolling student: student=%s, course=%s", student_id, course_id)
    unwrap(registry.unenroll(student_id, course_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
