# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tagged results returned by registry operations.

Business-rule outcomes (missing entities, uniqueness violations, full
courses, blocked deletions) are values, not exceptions. Every registry
operation that can fail returns either ``Ok`` carrying the payload or
``Err`` carrying an ``ErrorKind`` and a human-readable message.

Example:
    >>> match registry.get("students", 1):
    ...     case Ok(value=student):
    ...         print(student.name)
    ...     case Err(kind=ErrorKind.NOT_FOUND, message=message):
    ...         print(message)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Kinds of business-rule failure."""

    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    CAPACITY = "capacity"
    CONSTRAINT = "constraint"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Operation payload (entity, enrollment, or None).
    """

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    Attributes:
        kind: Failure category.
        message: Message suitable for returning to API clients.
    """

    kind: ErrorKind
    message: str

    @property
    def is_ok(self) -> bool:
        return False


Result = Ok[T] | Err
