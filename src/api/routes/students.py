# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student API endpoints.

This module provides endpoints for student management:
- GET / - List students, optionally filtered by name/email substring
- POST / - Create a student
- GET /{student_id} - Get a student with their enrolled courses
- PUT /{student_id} - Update a student
- DELETE /{student_id} - Delete a student without enrollments
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status

from src.api.dependencies import RegistryDep
from src.api.errors import unwrap
from src.domains.registry import Collection
from src.models.common import ErrorResponse
from src.models.course import CourseResponse
from src.models.enrollment import StudentDetailResponse
from src.models.student import (
    StudentCreateRequest,
    StudentListResponse,
    StudentResponse,
    StudentUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=StudentListResponse,
    summary="List students",
    description="List students. Filters are case-sensitive substring matches.",
)
async def list_students(
    registry: RegistryDep,
    name: Annotated[str | None, Query(description="Substring of the name")] = None,
    email: Annotated[str | None, Query(description="Substring of the email")] = None,
) -> StudentListResponse:
    """List students matching the optional filters."""
    students = registry.search(Collection.STUDENTS, name=name, email=email)
    return StudentListResponse(
        students=[StudentResponse.model_validate(s) for s in students],
    )


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create student",
    responses={400: {"model": ErrorResponse}},
)
async def create_student(data: StudentCreateRequest, registry: RegistryDep) -> StudentResponse:
    """Create a student.

    Args:
        data: Student name and email.
        registry: Application registry.

    Returns:
        The created student.

    Raises:
        HTTPException: 400 if a field is missing or the email is taken.
    """
    if not data.name or not data.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="name and email required",
        )

    student = unwrap(registry.create(Collection.STUDENTS, data.model_dump()))
    return StudentResponse.model_validate(student)


@router.get(
    "/{student_id}",
    response_model=StudentDetailResponse,
    summary="Get student",
    description="Get a student together with the courses they are enrolled in.",
    responses={404: {"model": ErrorResponse}},
)
async def get_student(student_id: str, registry: RegistryDep) -> StudentDetailResponse:
    """Get a student and their courses."""
    student = unwrap(registry.get(Collection.STUDENTS, student_id))
    return StudentDetailResponse(
        student=StudentResponse.model_validate(student),
        courses=[
            CourseResponse.model_validate(c)
            for c in registry.get_student_courses(student.id)
        ],
    )


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Update student",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_student(
    student_id: str,
    data: StudentUpdateRequest,
    registry: RegistryDep,
) -> StudentResponse:
    """Update the fields sent in the request body.

    Raises:
        HTTPException: 400 if a field is sent as null or empty, or the
            email is taken; 404 if the student does not exist.
    """
    patch = data.model_dump(exclude_unset=True)
    if not all(patch.values()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="name and email required",
        )

    student = unwrap(registry.update(Collection.STUDENTS, student_id, patch))
    return StudentResponse.model_validate(student)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete student",
    description="Delete a student. Students with enrollments cannot be deleted.",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_student(student_id: str, registry: RegistryDep) -> Response:
    """Delete a student."""
    unwrap(registry.remove(Collection.STUDENTS, student_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
