# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import DomainError, InvariantViolation

__all__ = [
    "DomainError",
    "InvariantViolation",
]
