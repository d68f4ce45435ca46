# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-memory registry of students, courses and enrollments.

This module provides the Registry class which owns the three collections
and their id counters, and enforces the domain invariants:
- Student emails and course titles are unique
- Enrollments reference existing students and courses
- A course holds at most ``capacity`` enrollments
- A student is enrolled at most once per course
- Enrolled students and courses cannot be deleted

Each operation that can fail returns a tagged ``Ok | Err`` result instead
of raising. All operations are serialized on an instance lock so the
check-then-mutate sequences stay atomic when handlers run concurrently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from src.domains.registry.entities import Collection, Course, Enrollment, Student
from src.domains.registry.result import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

DEFAULT_COURSE_CAPACITY = 3


@dataclass(frozen=True)
class _CollectionRules:
    """Per-collection behaviour: entity type, unique field and messages."""

    entity: type
    unique_field: str
    duplicate_message: str
    not_found_message: str
    constraint_message: str
    enrollment_field: str


_RULES: dict[Collection, _CollectionRules] = {
    Collection.STUDENTS: _CollectionRules(
        entity=Student,
        unique_field="email",
        duplicate_message="Email must be unique",
        not_found_message="Student not found",
        constraint_message="Cannot delete student: enrolled in a course",
        enrollment_field="student_id",
    ),
    Collection.COURSES: _CollectionRules(
        entity=Course,
        unique_field="title",
        duplicate_message="Course title must be unique",
        not_found_message="Course not found",
        constraint_message="Cannot delete course: students are enrolled",
        enrollment_field="course_id",
    ),
}


def coerce_id(value: int | str | None) -> int | None:
    """Coerce an id given as int or integer-like string.

    Args:
        value: Raw id, e.g. ``3`` or ``"3"``.

    Returns:
        The integer id, or None if the value is not integer-like.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class Registry:
    """In-memory store with invariant-checked operations.

    Attributes:
        capacity: Maximum number of concurrent enrollments per course.
    """

    def __init__(self, capacity: int = DEFAULT_COURSE_CAPACITY) -> None:
        """Initialize an empty registry.

        Args:
            capacity: Maximum enrollments per course.
        """
        self.capacity = capacity
        self._lock = threading.RLock()
        self._students: list[Student] = []
        self._courses: list[Course] = []
        self._enrollments: list[Enrollment] = []
        self._next_ids: dict[Collection, int] = {}
        self.reset()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self) -> None:
        """Clear every collection and rewind the id counters to 1."""
        with self._lock:
            self._students = []
            self._courses = []
            self._enrollments = []
            self._next_ids = {Collection.STUDENTS: 1, Collection.COURSES: 1}

    @property
    def enrollments(self) -> list[Enrollment]:
        """Snapshot of enrollment records in insertion order."""
        with self._lock:
            return list(self._enrollments)

    # =========================================================================
    # Entity operations
    # =========================================================================

    def list(self, collection: Collection | str) -> list[Any]:
        """Return all entities of a collection in insertion order."""
        with self._lock:
            return list(self._items(Collection(collection)))

    def search(self, collection: Collection | str, **filters: str | None) -> list[Any]:
        """Return entities whose fields contain every given substring.

        Matching is case-sensitive. Filters set to None or "" are ignored.

        Args:
            collection: Collection to search.
            **filters: Field name to substring, e.g. ``email="bob"``.

        Returns:
            Matching entities in insertion order.
        """
        active = {key: value for key, value in filters.items() if value}
        with self._lock:
            return [
                item
                for item in self._items(Collection(collection))
                if all(value in (getattr(item, key, None) or "") for key, value in active.items())
            ]

    def get(self, collection: Collection | str, entity_id: int | str) -> Result[Any]:
        """Look up an entity by id.

        Returns:
            Ok with the entity, or Err(NOT_FOUND).
        """
        collection = Collection(collection)
        with self._lock:
            item = self._find(collection, coerce_id(entity_id))
            if item is None:
                return Err(ErrorKind.NOT_FOUND, _RULES[collection].not_found_message)
            return Ok(item)

    def create(self, collection: Collection | str, payload: Mapping[str, Any]) -> Result[Any]:
        """Create an entity after checking field uniqueness.

        Only the entity's own fields are taken from the payload; no other
        validation happens at this layer.

        Args:
            collection: Target collection.
            payload: Field values for the new entity.

        Returns:
            Ok with the created entity, or Err(DUPLICATE).
        """
        collection = Collection(collection)
        rules = _RULES[collection]
        with self._lock:
            if self._is_taken(collection, payload.get(rules.unique_field)):
                logger.info(
                    "Rejected create: collection=%s, reason=%s",
                    collection.value,
                    rules.duplicate_message,
                )
                return Err(ErrorKind.DUPLICATE, rules.duplicate_message)

            entity_id = self._next_ids[collection]
            self._next_ids[collection] = entity_id + 1
            item = rules.entity(id=entity_id, **_entity_fields(rules.entity, payload))
            self._items(collection).append(item)

            logger.info("Created entity: collection=%s, id=%s", collection.value, entity_id)
            return Ok(item)

    def update(
        self,
        collection: Collection | str,
        entity_id: int | str,
        patch: Mapping[str, Any],
    ) -> Result[Any]:
        """Apply a partial update to an entity in place.

        Args:
            collection: Target collection.
            entity_id: Entity identifier.
            patch: Fields to overwrite. ``id`` is never changed.

        Returns:
            Ok with the updated entity, Err(NOT_FOUND) or Err(DUPLICATE).
        """
        collection = Collection(collection)
        rules = _RULES[collection]
        with self._lock:
            item = self._find(collection, coerce_id(entity_id))
            if item is None:
                return Err(ErrorKind.NOT_FOUND, rules.not_found_message)

            if rules.unique_field in patch and self._is_taken(
                collection, patch[rules.unique_field], exclude_id=item.id
            ):
                logger.info(
                    "Rejected update: collection=%s, id=%s, reason=%s",
                    collection.value,
                    item.id,
                    rules.duplicate_message,
                )
                return Err(ErrorKind.DUPLICATE, rules.duplicate_message)

            for key, value in _entity_fields(rules.entity, patch).items():
                setattr(item, key, value)

            logger.info("Updated entity: collection=%s, id=%s", collection.value, item.id)
            return Ok(item)

    def remove(self, collection: Collection | str, entity_id: int | str) -> Result[None]:
        """Delete an entity that has no enrollments.

        Returns:
            Ok(None), Err(CONSTRAINT) if enrolled, or Err(NOT_FOUND).
        """
        collection = Collection(collection)
        rules = _RULES[collection]
        key = coerce_id(entity_id)
        with self._lock:
            if any(getattr(e, rules.enrollment_field) == key for e in self._enrollments):
                logger.info(
                    "Rejected delete: collection=%s, id=%s, reason=%s",
                    collection.value,
                    key,
                    rules.constraint_message,
                )
                return Err(ErrorKind.CONSTRAINT, rules.constraint_message)

            items = self._items(collection)
            for index, item in enumerate(items):
                if item.id == key:
                    del items[index]
                    logger.info("Deleted entity: collection=%s, id=%s", collection.value, key)
                    return Ok(None)
            return Err(ErrorKind.NOT_FOUND, rules.not_found_message)

    # =========================================================================
    # Enrollment operations
    # =========================================================================

    def enroll(self, student_id: int | str, course_id: int | str) -> Result[Enrollment]:
        """Enroll a student in a course.

        Checks run in order and stop at the first failure: course exists,
        student exists, not already enrolled, course below capacity.

        Returns:
            Ok with the new enrollment, or Err(NOT_FOUND | DUPLICATE | CAPACITY).
        """
        sid = coerce_id(student_id)
        cid = coerce_id(course_id)
        with self._lock:
            if self._find(Collection.COURSES, cid) is None:
                return Err(ErrorKind.NOT_FOUND, "Course not found")
            if self._find(Collection.STUDENTS, sid) is None:
                return Err(ErrorKind.NOT_FOUND, "Student not found")

            enrollment = Enrollment(student_id=sid, course_id=cid)
            if enrollment in self._enrollments:
                return Err(ErrorKind.DUPLICATE, "Student already enrolled in this course")

            enrolled = sum(1 for e in self._enrollments if e.course_id == cid)
            if enrolled >= self.capacity:
                logger.info("Rejected enrollment: course=%s is full (%d)", cid, enrolled)
                return Err(ErrorKind.CAPACITY, "Course is full")

            self._enrollments.append(enrollment)
            logger.info("Enrolled student: student=%s, course=%s", sid, cid)
            return Ok(enrollment)

    def unenroll(self, student_id: int | str, course_id: int | str) -> Result[None]:
        """Remove a student's enrollment from a course.

        Returns:
            Ok(None), or Err(NOT_FOUND) if no such enrollment exists.
        """
        enrollment = Enrollment(student_id=coerce_id(student_id), course_id=coerce_id(course_id))
        with self._lock:
            try:
                self._enrollments.remove(enrollment)
            except ValueError:
                return Err(ErrorKind.NOT_FOUND, "Enrollment not found")
            logger.info(
                "Unenrolled student: student=%s, course=%s",
                enrollment.student_id,
                enrollment.course_id,
            )
            return Ok(None)

    def get_student_courses(self, student_id: int | str) -> list[Course]:
        """Courses the student is enrolled in, in enrollment order."""
        sid = coerce_id(student_id)
        with self._lock:
            return [
                course
                for e in self._enrollments
                if e.student_id == sid
                and (course := self._find(Collection.COURSES, e.course_id)) is not None
            ]

    def get_course_students(self, course_id: int | str) -> list[Student]:
        """Students enrolled in the course, in enrollment order."""
        cid = coerce_id(course_id)
        with self._lock:
            return [
                student
                for e in self._enrollments
                if e.course_id == cid
                and (student := self._find(Collection.STUDENTS, e.student_id)) is not None
            ]

    # =========================================================================
    # Helpers
    # =========================================================================

    def _items(self, collection: Collection) -> list[Any]:
        if collection is Collection.STUDENTS:
            return self._students
        return self._courses

    def _find(self, collection: Collection, entity_id: int | None) -> Any | None:
        if entity_id is None:
            return None
        for item in self._items(collection):
            if item.id == entity_id:
                return item
        return None

    def _is_taken(self, collection: Collection, value: Any, exclude_id: int | None = None) -> bool:
        field = _RULES[collection].unique_field
        return any(
            getattr(item, field) == value
            for item in self._items(collection)
            if item.id != exclude_id
        )


def _entity_fields(entity: type, values: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the entity's own fields (except ``id``) out of a mapping."""
    names = {f.name for f in fields(entity)} - {"id"}
    return {key: value for key, value in values.items() if key in names}
