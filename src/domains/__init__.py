# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain layer for the Enrollment Registry.

Domains:
    registry: In-memory students, courses and enrollments with their invariants.
"""
