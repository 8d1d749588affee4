# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.application.ports import SessionPort
from invoicelab.domain.sessions.state import SessionRecord
from invoicelab.domain.users.entities import User
from invoicelab.domain.users.exceptions import InvalidCredentialsError
from invoicelab.domain.users.repositories import UserRepository


class LoginUserUseCase:
    def __init__(self, *, users: UserRepository, sessions: SessionPort) -> None:
        self._users = users
        self._sessions = sessions

    def execute(self, token: str, username: str, password: str) -> tuple[User, SessionRecord]:
        user = self._users.find_by_username(username)
        if user is None or not user.password_matches(password):
            # Same error for unknown user and wrong password; the session is left as is.
            raise InvalidCredentialsError()

        record = self._sessions.authenticate(token, user.id)
        return user, record
