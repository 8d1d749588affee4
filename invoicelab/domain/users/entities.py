# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from invoicelab.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:
    """Seeded account. The password is kept and compared in plaintext."""

    id: int
    username: str
    password: str

    def __post_init__(self) -> None:
        if not self.username:
            raise InvariantViolation("must not be empty", field="username")

    def password_matches(self, candidate: str) -> bool:
        return self.password == candidate
