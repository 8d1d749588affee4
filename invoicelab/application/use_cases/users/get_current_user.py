# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.domain.sessions.state import SessionRecord
from invoicelab.domain.users.entities import User
from invoicelab.domain.users.repositories import UserRepository


class GetCurrentUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, session: SessionRecord) -> User | None:
        if session.user_id is None:
            return None
        return self._users.find_by_id(session.user_id)
