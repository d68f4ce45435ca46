# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-memory entities held by the registry."""

from dataclasses import dataclass
from enum import Enum


class Collection(str, Enum):
    """Entity collections addressable by name."""

    STUDENTS = "students"
    COURSES = "courses"


@dataclass
class Student:
    """A student. ``email`` is unique among students."""

    id: int
    name: str | None = None
    email: str | None = None


@dataclass
class Course:
    """A course. ``title`` is unique among courses."""

    id: int
    title: str | None = None
    teacher: str | None = None


@dataclass(frozen=True)
class Enrollment:
    """Join record between a student and a course; the pair is its identity."""

    student_id: int
    course_id: int
