# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Registry domain.

In-memory store for students, courses and enrollments with
invariant-checked operations returning tagged results.
"""

from src.domains.registry.entities import Collection, Course, Enrollment, Student
from src.domains.registry.result import Err, ErrorKind, Ok, Result
from src.domains.registry.seed import seed
from src.domains.registry.store import DEFAULT_COURSE_CAPACITY, Registry, coerce_id

__all__ = [
    "Collection",
    "Course",
    "DEFAULT_COURSE_CAPACITY",
    "Enrollment",
    "Err",
    "ErrorKind",
    "Ok",
    "Registry",
    "Result",
    "Student",
    "coerce_id",
    "seed",
]
