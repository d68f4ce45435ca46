# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Demo data for a fresh registry."""

import logging

from src.domains.registry.entities import Collection
from src.domains.registry.store import Registry

logger = logging.getLogger(__name__)

SEED_STUDENTS = (
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
    {"name": "Charlie", "email": "charlie@example.com"},
)

SEED_COURSES = (
    {"title": "Math", "teacher": "Mr. Smith"},
    {"title": "Physics", "teacher": "Dr. Brown"},
    {"title": "History", "teacher": "Ms. Clark"},
)


def seed(registry: Registry) -> None:
    """Add the demo students and courses.

    Entries that already exist are skipped by the uniqueness checks.

    Args:
        registry: Registry to populate.
    """
    for payload in SEED_STUDENTS:
        registry.create(Collection.STUDENTS, payload)
    for payload in SEED_COURSES:
        registry.create(Collection.COURSES, payload)

    logger.info(
        "Seeded registry: students=%d, courses=%d",
        len(registry.list(Collection.STUDENTS)),
        len(registry.list(Collection.COURSES)),
    )
