"""Enrollment Registry Backend.

In-memory students, courses and enrollments behind a small HTTP API.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
